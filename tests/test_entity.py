import pytest

from walletcore.entity import Account, Client, DomainError, Transaction


def _client(name="John Doe"):
    return Client.create(name, "john@example.com")


def test_create_account():
    client = _client()
    account = Account.create(client)
    assert account is not None
    assert account.client.id == client.id
    assert account.client_id == client.id
    assert account.balance == 0


def test_create_account_with_no_client():
    assert Account.create(None) is None


def test_credit_account():
    account = Account.create(_client())
    account.credit(100)
    assert account.balance == 100.0


def test_debit_account():
    account = Account.create(_client())
    account.credit(100)
    account.debit(50)
    assert account.balance == 50.0


def test_create_new_client():
    client = Client.create("John Doe", "john@example.com")
    assert client.name == "John Doe"
    assert client.email == "john@example.com"
    assert client.id


def test_new_clients_get_distinct_ids():
    ids = {_client().id for _ in range(5)}
    assert len(ids) == 5


def test_create_new_client_when_args_are_invalid():
    with pytest.raises(DomainError):
        Client.create("", "")


def test_create_client_without_email():
    with pytest.raises(DomainError, match="email is required"):
        Client.create("John Doe", "")


def test_update_client():
    client = _client()
    client.update("John Doe Update", "update@example.com")
    assert client.name == "John Doe Update"
    assert client.email == "update@example.com"


def test_update_client_with_invalid_args():
    client = _client()
    with pytest.raises(DomainError, match="name is required"):
        client.update("", "john@example.com")


def test_add_account_to_client():
    client = _client()
    account = Account.create(client)
    client.add_account(account)
    assert len(client.accounts) == 1
    assert client.accounts[0] is account


def test_add_foreign_account_to_client():
    client = _client()
    other = Account.create(_client("Jane Doe"))
    with pytest.raises(DomainError, match="does not belong"):
        client.add_account(other)
    assert client.accounts == []


def test_create_transaction():
    account1 = Account.create(_client())
    account2 = Account.create(_client("John Doe 2"))
    account1.credit(1000)
    account2.credit(1000)

    transaction = Transaction.create(account1, account2, 100)
    assert transaction.amount == 100
    assert account2.balance == 1100.0
    assert account1.balance == 900.0


def test_create_transaction_with_insufficient_balance():
    account1 = Account.create(_client())
    account2 = Account.create(_client("John Doe 2"))
    account1.credit(1000)
    account2.credit(1000)

    with pytest.raises(DomainError, match="insuficient funds"):
        Transaction.create(account1, account2, 2000)
    assert account2.balance == 1000.0
    assert account1.balance == 1000.0


@pytest.mark.parametrize("amount", [0, -10])
def test_create_transaction_with_non_positive_amount(amount):
    account1 = Account.create(_client())
    account2 = Account.create(_client("John Doe 2"))
    account1.credit(1000)
    with pytest.raises(DomainError, match="amount must be greater than zero"):
        Transaction.create(account1, account2, amount)
    assert account1.balance == 1000.0
    assert account2.balance == 0.0