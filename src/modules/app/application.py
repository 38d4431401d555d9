"""Application lifecycle: owns the shutdown coordinator and the update checks."""

import asyncio
from datetime import datetime, UTC
from typing import Optional

from ..config import AppConfig
from ..logging import BaseLogger
from ..request.http_client import HttpClient
from ..shutdown import ConsoleView, HostSignalSource, LoopBoundView, PosixSignalSource, ShutdownCoordinator, signals_from_names
from ..version.checker import NewVersionChecker
from ..version.schedule import VersionCheckScheduler


class Application:
    """Runs in the foreground until its main view is closed."""

    def __init__(
        self,
        config: AppConfig,
        logger: BaseLogger,
        signal_source: Optional[HostSignalSource] = None,
        http_client: Optional[HttpClient] = None
    ):
        """
        Initialize the application.

        Args:
            config: Application configuration
            logger: Logger instance
            signal_source: Host signal facility, POSIX signals from the config by default
            http_client: Client used for update checks
        """
        self.config = config
        self.logger = logger
        self.signal_source = signal_source or PosixSignalSource(signals_from_names(config.shutdown.signals))
        self.http_client = http_client or HttpClient(config.http, logger)
        self.coordinator = ShutdownCoordinator(self.signal_source, logger, config.shutdown)
        self.checker = NewVersionChecker(
            config=config.version_check,
            http_client=self.http_client,
            logger=logger,
            running_version=config.get_running_version()
        )
        self.scheduler = VersionCheckScheduler(self.checker, config.version_check, logger)
        self.checker.add_listener(self._on_new_version_changed)
        self.view: Optional[ConsoleView] = None

    def _on_new_version_changed(self, checker: NewVersionChecker) -> None:
        if not checker.is_new_version_available:
            return
        message = f"Version {checker.latest_version} is available"
        if checker.download_url:
            message += f", download it from {checker.download_url}"
        self.logger.log_warning(message)

    def _start_interception(self) -> None:
        try:
            self.coordinator.enable_shutdown_interception()
        except (ValueError, OSError, RuntimeError) as err:
            self.logger.log_warning(f"Graceful interrupt handling is unavailable: {str(err)}")

    async def run(self) -> None:
        """Run until the main view closes, checking for updates on each heartbeat."""
        loop = asyncio.get_running_loop()
        self.view = ConsoleView(self.logger)
        self.coordinator.main_view = LoopBoundView(self.view, loop)
        self._start_interception()
        self.logger.log_info(f"Running version {self.config.running_version}, press Ctrl+C to stop")

        try:
            while not self.view.closed:
                await self.scheduler.perform_periodic_check(datetime.now(UTC))
                await self.view.wait_closed(timeout=self.config.heartbeat_seconds)
        finally:
            self.coordinator.disable_shutdown_interception()
            self.coordinator.main_view = None
            await self.http_client.close()
            self.logger.log_info("Shutdown complete")
