import json

from walletcore.events import BalanceUpdated, EventDispatcher, TransactionCreated
from walletcore.handlers import TransactionCreatedKafkaHandler, UpdateBalanceKafkaHandler
from walletcore.kafka import Producer


class FakeClient:
    def __init__(self):
        self.sent = []

    def produce(self, topic, value, key):
        self.sent.append((topic, value, key))


def test_transaction_created_handler_publishes():
    client = FakeClient()
    TransactionCreatedKafkaHandler(Producer(client)).handle(TransactionCreated(payload="p"))
    topic, value, key = client.sent[0]
    assert topic == "transactions"
    assert key is None
    assert json.loads(value) == {"Name": "TransactionCreated", "Payload": "p"}


def test_balance_handler_publishes():
    client = FakeClient()
    UpdateBalanceKafkaHandler(Producer(client)).handle(BalanceUpdated(payload=[1, 2]))
    topic, value, _ = client.sent[0]
    assert topic == "balances"
    assert json.loads(value)["Payload"] == [1, 2]


def test_handlers_via_dispatcher():
    client = FakeClient()
    producer = Producer(client)
    dispatcher = EventDispatcher()
    dispatcher.register("TransactionCreated", TransactionCreatedKafkaHandler(producer))
    dispatcher.register("BalanceUpdated", UpdateBalanceKafkaHandler(producer))
    dispatcher.dispatch(BalanceUpdated())
    assert [t for t, _, _ in client.sent] == ["balances"]