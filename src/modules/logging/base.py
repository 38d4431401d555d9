from abc import ABC, abstractmethod
from loguru import logger


class BaseLogger(ABC):
    """Abstract base class for loggers."""
    
    def __init__(self, log_level: str = "INFO"):
        self.logger = logger
        self.log_level = log_level
    
    @abstractmethod
    def log_signal(self, signal_name: str, handled: bool):
        """Log a delivered interrupt/termination signal."""
        pass

    @abstractmethod
    def log_version_check(self, running_version: str, available_version: str, comparison: int):
        """Log the outcome of an update check."""
        pass

    @abstractmethod
    def log_error(self, message: str):
        """Log an error message."""
        pass

    @abstractmethod
    def log_warning(self, message: str):
        """Log a warning message."""
        pass

    @abstractmethod
    def log_info(self, message: str):
        """Log an info message."""
        pass

    @abstractmethod
    def log_debug(self, message: str):
        """Log a debug message."""
        pass


def describe_comparison(comparison: int) -> str:
    """Describe a comparison result from the published version's side."""
    if comparison > 0:
        return "newer"
    if comparison < 0:
        return "older"
    return "the same"
