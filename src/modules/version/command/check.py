import asyncio
from typing import Optional

from ...config import AppConfig
from ...logging import BaseLogger
from ...request.errors import HttpStatusError, RetryExceededError, SSLVerificationError, UnknownError
from ...request.http_client import HttpClient
from ..checker import NewVersionChecker


class CheckCommand:
    """Command class for running a single update check."""

    def __init__(self, logger: BaseLogger, config: AppConfig):
        self.logger = logger
        self.config = config

    def _create_checker(self, url: Optional[str]) -> NewVersionChecker:
        version_config = self.config.version_check
        if url:
            version_config = version_config.model_copy(update={"manifest_url": url})
        return NewVersionChecker(
            config=version_config,
            http_client=HttpClient(self.config.http, self.logger),
            logger=self.logger,
            running_version=self.config.get_running_version()
        )

    def run(self, url: Optional[str] = None) -> bool:
        """
        Check the manifest once and log the outcome.

        Args:
            url: Manifest URL overriding the configured one

        Returns:
            bool: False if the check could not be completed
        """
        checker = self._create_checker(url)
        try:
            available = asyncio.run(checker.check_for_new_version())
        except ValueError as err:
            self.logger.log_error(f"Version check error: {str(err)}")
            return False
        except (HttpStatusError, RetryExceededError, SSLVerificationError, UnknownError) as err:
            self.logger.log_error(f"Fetching the version manifest failed: {str(err)}")
            return False

        if available:
            message = f"A new version is available: {checker.latest_version}"
            if checker.download_url:
                message += f" ({checker.download_url})"
            self.logger.log_info(message)
        else:
            self.logger.log_info("No new version available")
        return True
