"""In-process composition root.

Wires settings, logging, the market data provider and the services so a
presentation shell can use the engine through one object.
"""

import logging
from pathlib import Path
from typing import Optional

from portfolio_ledger.config.logging_config import setup_logging
from portfolio_ledger.config.settings import Settings, get_settings, set_settings
from portfolio_ledger.providers import MarketDataProvider, StubMarketDataProvider
from portfolio_ledger.services import AnalysisService, LedgerService, MarketDataService
from portfolio_ledger.snapshot import SnapshotExporter, SnapshotImporter

logger = logging.getLogger(__name__)


class LedgerContext:
    """
    Service container for the portfolio ledger engine.

    Holds no portfolio state; callers keep the PortfolioState and pass it in.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        provider: Optional[MarketDataProvider] = None,
    ):
        self._settings = settings
        self._provider = provider
        self._initialized = False

        # Service instances (lazy initialized)
        self._ledger_service: Optional[LedgerService] = None
        self._market_data_service: Optional[MarketDataService] = None
        self._analysis_service: Optional[AnalysisService] = None
        self._exporter: Optional[SnapshotExporter] = None
        self._importer: Optional[SnapshotImporter] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Install settings, configure logging and reset services.

        Args:
            data_dir: Overrides the configured data directory.
        """
        settings = self._settings or get_settings()
        if data_dir is not None:
            settings = settings.model_copy(update={"data_dir": data_dir})
        self._settings = settings
        set_settings(settings)
        setup_logging()
        logger.info(
            "%s %s initialized (data dir: %s)",
            settings.app_name,
            settings.app_version,
            settings.data_dir,
        )

        self._ledger_service = None
        self._market_data_service = None
        self._analysis_service = None
        self._exporter = None
        self._importer = None
        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def ledger(self) -> LedgerService:
        """Get the LedgerService instance."""
        if self._ledger_service is None:
            settings = self.settings
            self._ledger_service = LedgerService(
                enforce_cash_balance=settings.enforce_cash_balance,
                replay_order=settings.replay_order,
                default_currency=settings.default_currency,
            )
        return self._ledger_service

    @property
    def market_data(self) -> MarketDataService:
        """Get the MarketDataService instance."""
        if self._market_data_service is None:
            self._market_data_service = MarketDataService(
                provider=self._provider or StubMarketDataProvider(),
                cache_ttl_seconds=self.settings.market_data_cache_ttl_seconds,
            )
        return self._market_data_service

    @property
    def analysis(self) -> AnalysisService:
        """Get the AnalysisService instance."""
        if self._analysis_service is None:
            self._analysis_service = AnalysisService(
                ledger_service=self.ledger,
                market_data_service=self.market_data,
                allocation_top_n=self.settings.allocation_top_n,
            )
        return self._analysis_service

    @property
    def exporter(self) -> SnapshotExporter:
        if self._exporter is None:
            self._exporter = SnapshotExporter(export_dir=self.settings.get_export_dir())
        return self._exporter

    @property
    def importer(self) -> SnapshotImporter:
        if self._importer is None:
            self._importer = SnapshotImporter()
        return self._importer
