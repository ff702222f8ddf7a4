# walletcore

A small wallet library built around domain events. It models clients, their
accounts and transfers between accounts, stores them through any DB-API
connection, and emits a `TransactionCreated` and a `BalanceUpdated` event
every time money moves. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## The domain model

`walletcore.entity` holds `Client`, `Account` and `Transaction`. Invalid
states raise `DomainError` (a `ValueError`).

```python
from walletcore.entity import Account, Client, DomainError, Transaction

alice = Client.create("Alice", "alice@example.com")
bob = Client.create("Bob", "bob@example.com")

source = Account.create(alice)
target = Account.create(bob)
source.credit(1000)

Transaction.create(source, target, 100)
assert source.balance == 900
assert target.balance == 100

try:
    Transaction.create(source, target, 5000)
except DomainError as exc:
    print(exc)  # insuficient funds
```

- `Client.create(name, email)` requires both fields ("name is required",
  "email is required"); `update` changes them and validates again;
  `add_account` refuses an account whose client is someone else.
- `Account.create(None)` returns `None`; otherwise an empty account.
- `Transaction.create` rejects an amount of zero or less and an amount larger
  than the source balance, and otherwise debits and credits both accounts.

## Events

`walletcore.events` has `Event` (a name and a payload), the two events
`TransactionCreated` and `BalanceUpdated`, the abstract `EventHandler`, and
`EventDispatcher`:

- `register(event_name, handler)` — raises `HandlerAlreadyRegisteredError`
  if the same handler object is already registered for that name;
- `has(event_name, handler)`, `remove(event_name, handler)` (silent if the
  handler is not there), `clear()`;
- `dispatch(event)` — calls the handlers for `event.name` in registration
  order, one after another.

## Storage

`walletcore.database` provides `ClientDB`, `AccountDB` and `TransactionDB`
over a DB-API connection, using the tables `clients`, `accounts` and
`transactions`. Queries are written with `?` placeholders; pass
`placeholder="%s"` for drivers that use that style. Timestamps are written
as ISO strings. `ClientDB.get` and `AccountDB.find_by_id` raise
`NotFoundError` when the row does not exist.

`walletcore.uow.UnitOfWork` wraps a connection: `register(name, factory)`
stores a repository factory, `get_repository(name)` builds it (opening a
transaction if none is open), and `do(fn)` runs `fn` in a transaction,
committing on success and rolling back on error. Misuse raises
`UnitOfWorkError`.

## Use cases

`walletcore.usecases` ties the pieces together:

```python
import sqlite3

from walletcore.database import AccountDB, ClientDB, TransactionDB
from walletcore.events import BalanceUpdated, EventDispatcher, TransactionCreated
from walletcore.uow import UnitOfWork
from walletcore.usecases import (
    CreateAccountInput, CreateAccountUseCase,
    CreateClientInput, CreateClientUseCase,
    CreateTransactionInput, CreateTransactionUseCase,
)

conn = sqlite3.connect(":memory:")
conn.executescript("""
    CREATE TABLE clients (id TEXT, name TEXT, email TEXT, created_at TEXT);
    CREATE TABLE accounts (id TEXT, client_id TEXT, balance REAL, created_at TEXT);
    CREATE TABLE transactions (id TEXT, account_id_from TEXT, account_id_to TEXT,
                               amount REAL, created_at TEXT);
""")

clients, accounts = ClientDB(conn), AccountDB(conn)
client = CreateClientUseCase(clients).execute(
    CreateClientInput(name="Alice", email="alice@example.com"))
account = CreateAccountUseCase(accounts, clients).execute(
    CreateAccountInput(client_id=client.id))

uow = UnitOfWork(conn)
uow.register("AccountDB", AccountDB)
uow.register("TransactionDB", TransactionDB)
transfer = CreateTransactionUseCase(
    uow, EventDispatcher(), TransactionCreated(), BalanceUpdated())
```

`CreateTransactionUseCase.execute` loads both accounts, makes the transfer,
saves the balances and the transaction in one unit of work, then dispatches
`TransactionCreated` with a `CreateTransactionOutput` payload and
`BalanceUpdated` with a `BalanceUpdatedOutput` payload.

## Publishing events

`walletcore.kafka` serialises messages with `to_json` (dataclass fields use
their `json` metadata names; events become `{"Name": ..., "Payload": ...}`).
`Producer(client).publish(message, key, topic)` hands the JSON bytes to any
object with `produce(topic, value, key)`. `Consumer(client, topics).consume(sink)`
subscribes and passes every message the client yields to `sink`, skipping
items that are exceptions.

`walletcore.handlers` has `TransactionCreatedKafkaHandler` (topic
`transactions`) and `UpdateBalanceKafkaHandler` (topic `balances`), event
handlers that publish through a `Producer` and print a line.

## What it does not do

- There is no HTTP server and no command to run; the use cases are called
  from your own code.
- It ships no database driver and no broker client: you pass a DB-API
  connection and a producer or consumer client object.
- It does not create the database tables; the schema must exist beforehand.