import json
from dataclasses import dataclass, field

import pytest

from walletcore.events import BalanceUpdated
from walletcore.kafka import Consumer, Producer


class FakeProducerClient:
    def __init__(self):
        self.sent = []

    def produce(self, topic, value, key):
        self.sent.append((topic, value, key))


class FakeConsumerClient:
    def __init__(self, messages):
        self.messages = messages
        self.topics = None

    def subscribe(self, topics):
        self.topics = topics

    def __iter__(self):
        return iter(self.messages)


@dataclass
class TransactionDtoOutput:
    id: str = field(metadata={"json": "id"})
    status: str = field(metadata={"json": "status"})
    error_message: str = field(metadata={"json": "error_message"})


def test_producer_publish():
    client = FakeProducerClient()
    output = TransactionDtoOutput("1", "rejected", "you dont have limit for this transaction")
    Producer(client).publish(output, b"1", "test")
    topic, value, key = client.sent[0]
    assert topic == "test"
    assert key == b"1"
    assert json.loads(value) == {
        "id": "1",
        "status": "rejected",
        "error_message": "you dont have limit for this transaction",
    }


def test_producer_publishes_event_envelope():
    client = FakeProducerClient()
    Producer(client).publish(BalanceUpdated(payload={"a": 1}), None, "balances")
    assert json.loads(client.sent[0][1]) == {"Name": "BalanceUpdated", "Payload": {"a": 1}}


def test_producer_rejects_unserialisable():
    with pytest.raises(TypeError):
        Producer(FakeProducerClient()).publish(object(), None, "t")


def test_consumer_skips_errors():
    client = FakeConsumerClient(["m1", RuntimeError("x"), "m2"])
    received = []
    Consumer(client, ["t1", "t2"]).consume(received.append)
    assert received == ["m1", "m2"]
    assert client.topics == ["t1", "t2"]