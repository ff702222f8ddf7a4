"""SQL repositories for clients, accounts and transactions over a DB-API connection."""

from __future__ import annotations

from contextlib import closing
from datetime import datetime
from typing import Any, Sequence

from walletcore.entity import Account, Client, Transaction


class NotFoundError(LookupError):
    """Raised when a looked-up row does not exist."""


def _to_db_time(value: datetime) -> str:
    return value.isoformat(sep=" ")


def _from_db_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise ValueError(f"cannot read a timestamp from {value!r}")


class _Repository:
    """Shared plumbing: holds the connection and the driver's placeholder."""

    def __init__(self, connection: Any, placeholder: str = "?") -> None:
        self.connection = connection
        self.placeholder = placeholder

    def _sql(self, query: str) -> str:
        return query.replace("?", self.placeholder)

    def _execute(self, query: str, params: Sequence[Any]) -> None:
        with closing(self.connection.cursor()) as cursor:
            cursor.execute(self._sql(query), tuple(params))

    def _fetch_one(self, query: str, params: Sequence[Any]) -> Any:
        with closing(self.connection.cursor()) as cursor:
            cursor.execute(self._sql(query), tuple(params))
            return cursor.fetchone()


class ClientDB(_Repository):
    """Stores clients in the ``clients`` table."""

    def get(self, client_id: str) -> Client:
        row = self._fetch_one(
            "SELECT id, name, email, created_at from clients WHERE id = ?", (client_id,)
        )
        if row is None:
            raise NotFoundError(f"client {client_id!r} not found")
        id_, name, email, created_at = row
        return Client(id=id_, name=name, email=email, created_at=_from_db_time(created_at))

    def save(self, client: Client) -> None:
        self._execute(
            "INSERT INTO clients (id, name, email, created_at) VALUES (?, ?, ?, ?)",
            (client.id, client.name, client.email, _to_db_time(client.created_at)),
        )


class AccountDB(_Repository):
    """Stores accounts in the ``accounts`` table, joined with their client."""

    def find_by_id(self, account_id: str) -> Account:
        row = self._fetch_one(
            "SELECT a.id, a.client_id, a.balance, a.created_at, c.id, c.name, c.email, "
            "c.created_at FROM accounts a INNER JOIN clients c ON a.client_id = c.id "
            "WHERE a.id = ?",
            (account_id,),
        )
        if row is None:
            raise NotFoundError(f"account {account_id!r} not found")
        a_id, _client_id, balance, a_created, c_id, c_name, c_email, c_created = row
        client = Client(id=c_id, name=c_name, email=c_email, created_at=_from_db_time(c_created))
        return Account(
            id=a_id,
            client=client,
            balance=float(balance),
            created_at=_from_db_time(a_created),
        )

    def save(self, account: Account) -> None:
        self._execute(
            "INSERT INTO accounts (id, client_id, balance, created_at) VALUES (?, ?, ?, ?)",
            (account.id, account.client_id, account.balance, _to_db_time(account.created_at)),
        )

    def update_balance(self, account: Account) -> None:
        self._execute(
            "UPDATE accounts SET balance = ? WHERE id = ?", (account.balance, account.id)
        )


class TransactionDB(_Repository):
    """Stores transfers in the ``transactions`` table."""

    def create(self, transaction: Transaction) -> None:
        self._execute(
            "INSERT INTO transactions (id, account_id_from, account_id_to, amount, created_at) "
            "VALUES (?, ?, ?, ?, ?)",
            (
                transaction.id,
                transaction.account_from.id,
                transaction.account_to.id,
                transaction.amount,
                _to_db_time(transaction.created_at),
            ),
        )