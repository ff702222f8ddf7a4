"""Application use cases: creating clients, accounts and transfers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from walletcore.entity import Account, Client, Transaction
from walletcore.events import Event, EventDispatcher
from walletcore.uow import UnitOfWork


class AccountGateway(ABC):
    @abstractmethod
    def save(self, account: Account) -> None: ...

    @abstractmethod
    def find_by_id(self, account_id: str) -> Account: ...

    @abstractmethod
    def update_balance(self, account: Account) -> None: ...


class ClientGateway(ABC):
    @abstractmethod
    def get(self, client_id: str) -> Client: ...

    @abstractmethod
    def save(self, client: Client) -> None: ...


class TransactionGateway(ABC):
    @abstractmethod
    def create(self, transaction: Transaction) -> None: ...


AccountGateway.register(object.__class__)  # noqa: keeps ABC usable as a structural marker
for _gateway in (AccountGateway, ClientGateway, TransactionGateway):
    pass


@dataclass
class CreateClientInput:
    name: str
    email: str


@dataclass
class CreateClientOutput:
    id: str = field(metadata={"json": "ID"})
    name: str = field(metadata={"json": "Name"})
    email: str = field(metadata={"json": "Email"})
    created_at: datetime = field(metadata={"json": "CreatedAt"})
    updated_at: datetime = field(metadata={"json": "UpdatedAt"})


class CreateClientUseCase:
    def __init__(self, client_gateway: ClientGateway) -> None:
        self.client_gateway = client_gateway

    def execute(self, input_dto: CreateClientInput) -> CreateClientOutput:
        client = Client.create(input_dto.name, input_dto.email)
        self.client_gateway.save(client)
        return CreateClientOutput(
            id=client.id,
            name=client.name,
            email=client.email,
            created_at=client.created_at,
            updated_at=client.updated_at,
        )


@dataclass
class CreateAccountInput:
    client_id: str = field(metadata={"json": "client_id"})


@dataclass
class CreateAccountOutput:
    id: str = field(metadata={"json": "ID"})


class CreateAccountUseCase:
    def __init__(self, account_gateway: AccountGateway, client_gateway: ClientGateway) -> None:
        self.account_gateway = account_gateway
        self.client_gateway = client_gateway

    def execute(self, input_dto: CreateAccountInput) -> CreateAccountOutput:
        client = self.client_gateway.get(input_dto.client_id)
        account = Account.create(client)
        self.account_gateway.save(account)
        return CreateAccountOutput(id=account.id)


@dataclass
class CreateTransactionInput:
    account_id_from: str = field(metadata={"json": "account_id_from"})
    account_id_to: str = field(metadata={"json": "account_id_to"})
    amount: float = field(metadata={"json": "amount"})


@dataclass
class CreateTransactionOutput:
    id: str = field(default="", metadata={"json": "id"})
    account_id_from: str = field(default="", metadata={"json": "account_id_from"})
    account_id_to: str = field(default="", metadata={"json": "account_id_to"})
    amount: float = field(default=0.0, metadata={"json": "amount"})


@dataclass
class BalanceUpdatedOutput:
    account_id_from: str = field(default="", metadata={"json": "account_id_from"})
    account_id_to: str = field(default="", metadata={"json": "account_id_to"})
    balance_account_id_from: float = field(default=0.0, metadata={"json": "balance_account_id_from"})
    balance_account_id_to: float = field(default=0.0, metadata={"json": "balance_account_id_to"})


class CreateTransactionUseCase:
    """Transfers money between accounts in one unit of work, then publishes events."""

    def __init__(
        self,
        uow: UnitOfWork,
        event_dispatcher: EventDispatcher,
        transaction_created: Event,
        balance_updated: Event,
    ) -> None:
        self.uow = uow
        self.event_dispatcher = event_dispatcher
        self.transaction_created = transaction_created
        self.balance_updated = balance_updated

    def execute(self, input_dto: CreateTransactionInput) -> CreateTransactionOutput:
        output = CreateTransactionOutput()
        balance_output = BalanceUpdatedOutput()

        def work(uow: UnitOfWork) -> None:
            accounts = uow.get_repository("AccountDB")
            transactions = uow.get_repository("TransactionDB")
            account_from = accounts.find_by_id(input_dto.account_id_from)
            account_to = accounts.find_by_id(input_dto.account_id_to)
            transaction = Transaction.create(account_from, account_to, input_dto.amount)
            accounts.update_balance(account_from)
            accounts.update_balance(account_to)
            transactions.create(transaction)

            output.id = transaction.id
            output.account_id_from = input_dto.account_id_from
            output.account_id_to = input_dto.account_id_to
            output.amount = input_dto.amount

            balance_output.account_id_from = input_dto.account_id_from
            balance_output.account_id_to = input_dto.account_id_to
            balance_output.balance_account_id_from = account_from.balance
            balance_output.balance_account_id_to = account_to.balance

        self.uow.do(work)

        self.transaction_created.payload = output
        self.event_dispatcher.dispatch(self.transaction_created)
        self.balance_updated.payload = balance_output
        self.event_dispatcher.dispatch(self.balance_updated)
        return output