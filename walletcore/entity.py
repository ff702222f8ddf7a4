"""Domain entities of the wallet: clients, accounts and transfers between accounts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


class DomainError(ValueError):
    """Raised when an entity would be put into an invalid state."""


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(eq=False)
class Client:
    """A wallet customer owning zero or more accounts."""

    id: str = field(default_factory=_new_id)
    name: str = ""
    email: str = ""
    accounts: list[Account] = field(default_factory=list, repr=False)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(cls, name: str, email: str) -> Client:
        """Create a new client with a fresh identifier, validating its fields."""
        client = cls(name=name, email=email)
        client.validate()
        return client

    def validate(self) -> None:
        if not self.name:
            raise DomainError("name is required")
        if not self.email:
            raise DomainError("email is required")

    def update(self, name: str, email: str) -> None:
        """Change name and e-mail, then validate the result."""
        self.name = name
        self.email = email
        self.updated_at = datetime.now()
        self.validate()

    def add_account(self, account: Account) -> None:
        if account.client is None or account.client.id != self.id:
            raise DomainError("account does not belong to this client")
        self.accounts.append(account)


@dataclass(eq=False)
class Account:
    """A balance held by a client."""

    id: str = field(default_factory=_new_id)
    client: Optional[Client] = None
    balance: float = 0.0
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def client_id(self) -> str:
        return self.client.id if self.client is not None else ""

    @classmethod
    def create(cls, client: Optional[Client]) -> Optional[Account]:
        """Open an empty account for ``client``; no account without a client."""
        if client is None:
            return None
        return cls(client=client)

    def credit(self, amount: float) -> None:
        self.balance += amount
        self.updated_at = datetime.now()

    def debit(self, amount: float) -> None:
        self.balance -= amount
        self.updated_at = datetime.now()


@dataclass(eq=False)
class Transaction:
    """A transfer of an amount from one account to another."""

    account_from: Account
    account_to: Account
    amount: float
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(cls, account_from: Account, account_to: Account, amount: float) -> Transaction:
        """Validate the transfer and apply it to both accounts."""
        transaction = cls(account_from=account_from, account_to=account_to, amount=amount)
        transaction.validate()
        transaction.commit()
        return transaction

    def commit(self) -> None:
        self.account_from.debit(self.amount)
        self.account_to.credit(self.amount)

    def validate(self) -> None:
        if self.amount <= 0:
            raise DomainError("amount must be greater than zero")
        if self.account_from.balance < self.amount:
            raise DomainError("insuficient funds")