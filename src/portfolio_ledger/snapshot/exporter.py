"""Snapshot export functionality."""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from portfolio_ledger.core.timezone import now_eastern
from portfolio_ledger.domain.models import PortfolioState
from portfolio_ledger.schemas import SnapshotSchema

logger = logging.getLogger(__name__)


def backup_filename(day: date) -> str:
    """Default backup file name, e.g. ivest-backup-2024-06-15.json."""
    return f"ivest-backup-{day.isoformat()}.json"


class SnapshotExporter:
    """
    JSON exporter for the full portfolio state.

    Writes accounts, transactions and dividends plus an exportDate stamp.
    Decimal values are written as strings so nothing is lost to floats.
    """

    def __init__(self, export_dir: Optional[Path] = None):
        self._export_dir = export_dir

    def dumps(self, state: PortfolioState, exported_at: Optional[datetime] = None) -> str:
        """Serialize state to a JSON document."""
        snapshot = SnapshotSchema.from_state(state, export_date=exported_at or now_eastern())
        return snapshot.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    def export(
        self,
        state: PortfolioState,
        path: Optional[str] = None,
        exported_at: Optional[datetime] = None,
    ) -> Path:
        """
        Write a snapshot to disk.

        Args:
            path: Output file path; defaults to a dated file in the export dir
        """
        exported_at = exported_at or now_eastern()
        if path is None:
            if self._export_dir is None:
                raise ValueError("No path given and no export directory configured")
            file_path = self._export_dir / backup_filename(exported_at.date())
        else:
            file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_path.write_text(self.dumps(state, exported_at), encoding="utf-8")
        logger.info(
            "Exported %d accounts, %d transactions, %d dividends to %s",
            len(state.accounts),
            len(state.transactions),
            len(state.dividends),
            file_path,
        )
        return file_path
