"""Unit of work: runs repository operations inside one database transaction."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

RepositoryFactory = Callable[[Any], Any]
T = TypeVar("T")


class UnitOfWorkError(Exception):
    """Raised when the unit of work is used out of order or cannot finish."""


class UnitOfWork:
    """Holds repository factories and the transaction they share.

    ``connection`` is a DB-API connection; each factory receives it when a
    repository is requested inside the transaction.
    """

    def __init__(self, connection: Any) -> None:
        self.connection = connection
        self.repositories: dict[str, RepositoryFactory] = {}
        self.in_transaction = False

    def register(self, name: str, factory: RepositoryFactory) -> None:
        self.repositories[name] = factory

    def unregister(self, name: str) -> None:
        self.repositories.pop(name, None)

    def get_repository(self, name: str) -> Any:
        """Build the named repository, starting a transaction if none is open."""
        try:
            factory = self.repositories[name]
        except KeyError:
            raise UnitOfWorkError(f"repository {name!r} is not registered") from None
        if not self.in_transaction:
            self._begin()
        return factory(self.connection)

    def do(self, fn: Callable[[UnitOfWork], T]) -> T:
        """Run ``fn`` in a new transaction: commit on success, roll back on error."""
        if self.in_transaction:
            raise UnitOfWorkError("transaction already started")
        self._begin()
        try:
            result = fn(self)
        except Exception as err:
            try:
                self.rollback()
            except Exception as rollback_err:
                raise UnitOfWorkError(
                    f"original error: {err}, rollback error: {rollback_err}"
                ) from err
            raise
        self.commit_or_rollback()
        return result

    def rollback(self) -> None:
        if not self.in_transaction:
            raise UnitOfWorkError("no transaction to rollback")
        self.connection.rollback()
        self.in_transaction = False

    def commit_or_rollback(self) -> None:
        if not self.in_transaction:
            raise UnitOfWorkError("no transaction to commit")
        try:
            self.connection.commit()
        except Exception as err:
            try:
                self.rollback()
            except Exception as rollback_err:
                raise UnitOfWorkError(
                    f"original error: {err}, rollback error: {rollback_err}"
                ) from err
            raise
        self.in_transaction = False

    def _begin(self) -> None:
        begin = getattr(self.connection, "begin", None)
        if callable(begin):
            begin()
        self.in_transaction = True