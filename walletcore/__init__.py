"""Wallet domain library: clients, accounts, transfers, repositories and domain events."""

__version__ = "0.1.0"