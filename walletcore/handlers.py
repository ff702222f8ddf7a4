"""Event handlers that forward wallet events to message topics."""

from __future__ import annotations

from walletcore.events import Event, EventHandler
from walletcore.kafka import Producer


class TransactionCreatedKafkaHandler(EventHandler):
    """Publishes created transactions to the ``transactions`` topic."""

    def __init__(self, kafka: Producer) -> None:
        self.kafka = kafka

    def handle(self, event: Event) -> None:
        self.kafka.publish(event, None, "transactions")
        print("TransactionCreatedKafkaHandler: ", event.payload)


class UpdateBalanceKafkaHandler(EventHandler):
    """Publishes balance updates to the ``balances`` topic."""

    def __init__(self, kafka: Producer) -> None:
        self.kafka = kafka

    def handle(self, event: Event) -> None:
        self.kafka.publish(event, None, "balances")
        print("UpdateBalanceKafkaHandler called")