from typing import Callable, List, Optional

from ..config import VersionCheckConfig
from ..logging import BaseLogger
from ..request.http_client import HttpClient
from .comparator import VersionNumber, compare_version
from .errors import InvalidVersionFormat

NewVersionListener = Callable[['NewVersionChecker'], None]


class NewVersionChecker:
    """Checks a published version manifest for a newer release."""

    def __init__(
        self,
        config: VersionCheckConfig,
        http_client: HttpClient,
        logger: BaseLogger,
        running_version: VersionNumber
    ):
        """
        Initialize the checker.

        Args:
            config: Where to find the manifest and where users download releases
            http_client: Client used to fetch the manifest
            logger: Logger instance
            running_version: Version of the running build
        """
        self.config = config
        self.http_client = http_client
        self.logger = logger
        self.running_version = running_version
        self._is_new_version_available = False
        self._latest_version: Optional[str] = None
        self._listeners: List[NewVersionListener] = []

    @property
    def is_new_version_available(self) -> bool:
        return self._is_new_version_available

    @property
    def latest_version(self) -> Optional[str]:
        """The last valid version string read from the manifest."""
        return self._latest_version

    @property
    def download_url(self) -> Optional[str]:
        return self.config.download_url

    def add_listener(self, listener: NewVersionListener) -> None:
        """Register a callback fired whenever availability of a new version changes."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: NewVersionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def check_for_new_version(self) -> bool:
        """Fetch the published version and compare it with the running one.

        An unparseable published version counts as no update.

        Returns:
            bool: True if the published version is newer than the running version

        Raises:
            ValueError: If no manifest URL is configured
        """
        if not self.config.manifest_url:
            raise ValueError("No version manifest URL configured")

        content = await self.http_client.fetch_text(self.config.manifest_url)
        published = content.strip()

        try:
            comparison = compare_version(published, self.running_version)
        except InvalidVersionFormat as err:
            self.logger.log_error(f"Ignoring published version: {str(err)}")
            self._set_available(False)
            return False

        self._latest_version = published
        self.logger.log_version_check(str(self.running_version), published, comparison)
        self._set_available(comparison > 0)
        return self._is_new_version_available

    def _set_available(self, available: bool) -> None:
        if available == self._is_new_version_available:
            return
        self._is_new_version_available = available
        for listener in list(self._listeners):
            listener(self)
