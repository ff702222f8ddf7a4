"""JSON message publishing and consuming over a pluggable broker client."""

from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Protocol

from walletcore.events import Event


class ProducerClient(Protocol):
    def produce(self, topic: str, value: bytes, key: Optional[bytes]) -> None: ...


class ConsumerClient(Protocol):
    def subscribe(self, topics: list[str]) -> None: ...

    def __iter__(self) -> Any: ...


def _encode(obj: Any) -> Any:
    if isinstance(obj, Event):
        return {"Name": obj.name, "Payload": obj.payload}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.metadata.get("json", f.name): getattr(obj, f.name)
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"cannot serialise {type(obj).__name__}")


def to_json(message: Any) -> bytes:
    """Serialise ``message`` as JSON, honouring ``json`` field metadata of dataclasses."""
    return json.dumps(message, default=_encode).encode("utf-8")


class Producer:
    """Publishes messages as JSON to topics through ``client``."""

    def __init__(self, client: ProducerClient) -> None:
        self.client = client

    def publish(self, message: Any, key: Optional[bytes], topic: str) -> None:
        self.client.produce(topic, to_json(message), key)


class Consumer:
    """Subscribes to topics and passes every successfully read message to a sink."""

    def __init__(self, client: ConsumerClient, topics: Iterable[str]) -> None:
        self.client = client
        self.topics = list(topics)

    def consume(self, sink: Callable[[Any], None]) -> None:
        """Read until the client's stream ends; read errors are skipped."""
        self.client.subscribe(self.topics)
        for message in self.client:
            if isinstance(message, Exception):
                continue
            sink(message)