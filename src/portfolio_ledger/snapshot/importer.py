"""Snapshot import functionality."""

import logging
from pathlib import Path

import pydantic

from portfolio_ledger.core.exceptions import UnknownAccount, ValidationError
from portfolio_ledger.domain.models import PortfolioState
from portfolio_ledger.schemas import SNAPSHOT_VERSION, SnapshotSchema

logger = logging.getLogger(__name__)


class SnapshotImporter:
    """
    JSON importer that restores a PortfolioState from a backup.

    Accepts files written by SnapshotExporter and older backups that store
    amounts as JSON numbers. Unknown top-level keys are ignored.
    """

    def loads(self, text: str) -> PortfolioState:
        """
        Parse a snapshot document.

        Raises ValidationError for malformed JSON or shapes or a snapshot
        version newer than this engine writes, InvalidTransaction
        for ledger entries missing fields their type requires, and
        UnknownAccount for entries that reference a missing account.
        """
        try:
            snapshot = SnapshotSchema.model_validate_json(text)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid snapshot: {e.error_count()} error(s): {e}") from e

        if snapshot.version > SNAPSHOT_VERSION:
            raise ValidationError(
                f"Unsupported snapshot version {snapshot.version}; "
                f"newest supported is {SNAPSHOT_VERSION}"
            )

        state = snapshot.to_state()
        self._check_references(state)
        return state

    def import_file(self, path: str) -> PortfolioState:
        file_path = Path(path)
        if not file_path.exists():
            raise ValidationError(f"File not found: {path}")

        state = self.loads(file_path.read_text(encoding="utf-8"))
        logger.info(
            "Imported %d accounts, %d transactions, %d dividends from %s",
            len(state.accounts),
            len(state.transactions),
            len(state.dividends),
            file_path,
        )
        return state

    @staticmethod
    def _check_references(state: PortfolioState) -> None:
        account_ids = {a.id for a in state.accounts}
        for entry in (*state.transactions, *state.dividends):
            if entry.account_id not in account_ids:
                raise UnknownAccount(entry.account_id)
