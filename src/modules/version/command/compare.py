from ...logging import BaseLogger
from ..comparator import VersionNumber, compare_version
from ..errors import InvalidVersionFormat


class CompareCommand:
    """Command class for comparing two versions offline."""

    def __init__(self, logger: BaseLogger):
        self.logger = logger

    def run(self, candidate: str, reference: str) -> bool:
        """
        Log how candidate relates to reference.

        Args:
            candidate: Dotted triplet being evaluated, e.g. a published version
            reference: Dotted triplet to compare against, e.g. the running version

        Returns:
            bool: False if either version is invalid
        """
        try:
            comparison = compare_version(candidate, VersionNumber.parse(reference))
        except InvalidVersionFormat as err:
            self.logger.log_error(str(err))
            return False

        self.logger.log_version_check(reference, candidate, comparison)
        return True
