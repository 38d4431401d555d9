import sys
from .base import BaseLogger, describe_comparison


class PlainLogger(BaseLogger):
    """Logger that outputs plain text, suitable for CI/file output."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Configure loguru for plain output
        self.logger.configure(
            handlers=[{
                "sink": sys.stdout,
                "format": "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}",
                "colorize": False,
                "level": log_level
            }]
        )
    
    def log_signal(self, signal_name: str, handled: bool):
        if handled:
            self.logger.warning(f"Received {signal_name}, closing gracefully")
        else:
            self.logger.warning(f"Received {signal_name}, no view to close, terminating")

    def log_version_check(self, running_version: str, available_version: str, comparison: int):
        self.logger.info(
            f"Published version {available_version} is {describe_comparison(comparison)} "
            f"(running {running_version})"
        )

    def log_error(self, message: str):
        self.logger.error(message)

    def log_warning(self, message: str):
        self.logger.warning(message)

    def log_info(self, message: str):
        self.logger.info(message)

    def log_debug(self, message: str):
        self.logger.debug(message)
