from datetime import datetime, timedelta
from typing import Optional

from ..config import VersionCheckConfig
from ..logging import BaseLogger
from .checker import NewVersionChecker


class VersionCheckScheduler:
    """Runs the automatic update check once per configured period."""

    def __init__(self, checker: NewVersionChecker, config: VersionCheckConfig, logger: BaseLogger):
        self.checker = checker
        self.config = config
        self.logger = logger
        self.last_check: Optional[datetime] = None

    def is_due(self, now: datetime) -> bool:
        if not self.config.check_automatically or self.config.check_period_days <= 0:
            return False
        if not self.config.manifest_url:
            return False
        if self.last_check is None:
            return True
        return now - self.last_check >= timedelta(days=self.config.check_period_days)

    async def perform_periodic_check(self, now: datetime) -> None:
        """Run the check if it is due. Failures are logged, never raised."""
        if not self.is_due(now):
            return

        self.last_check = now
        try:
            await self.checker.check_for_new_version()
        except Exception as err:
            self.logger.log_error(f"Caught exception while checking for new version: {str(err)}")
