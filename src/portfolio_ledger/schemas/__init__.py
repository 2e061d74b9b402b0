"""Pydantic schemas for serialized state."""

from portfolio_ledger.schemas.snapshot import (
    SNAPSHOT_VERSION,
    AccountSchema,
    TransactionSchema,
    DividendSchema,
    SnapshotSchema,
)

__all__ = [
    "SNAPSHOT_VERSION",
    "AccountSchema",
    "TransactionSchema",
    "DividendSchema",
    "SnapshotSchema",
]
