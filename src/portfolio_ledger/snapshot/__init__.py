"""Snapshot backup/restore utilities."""

from portfolio_ledger.snapshot.exporter import SnapshotExporter, backup_filename
from portfolio_ledger.snapshot.importer import SnapshotImporter

__all__ = [
    "SnapshotExporter",
    "SnapshotImporter",
    "backup_filename",
]
