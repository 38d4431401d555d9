import sys
from .base import BaseLogger


class JsonLogger(BaseLogger):
    """Logger that outputs JSON for machine parsing."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Configure loguru for JSON output
        self.logger.configure(
            handlers=[{
                "sink": sys.stdout,
                "serialize": True,  # JSON output
                "format": "{time} | {level} | {message}",
                "level": log_level
            }]
        )
    
    def log_signal(self, signal_name: str, handled: bool):
        self.logger.warning("", extra={
            "type": "signal",
            "signal": signal_name,
            "handled": handled
        })

    def log_version_check(self, running_version: str, available_version: str, comparison: int):
        self.logger.info("", extra={
            "type": "version_check",
            "running_version": running_version,
            "available_version": available_version,
            "comparison": comparison,
            "new_version_available": comparison > 0
        })

    def log_error(self, message: str):
        self.logger.error("", extra={
            "type": "error",
            "message": message
        })

    def log_warning(self, message: str):
        self.logger.warning("", extra={
            "type": "warning",
            "message": message
        })

    def log_info(self, message: str):
        self.logger.info("", extra={
            "type": "info",
            "message": message
        })

    def log_debug(self, message: str):
        self.logger.debug("", extra={
            "type": "debug",
            "message": message
        })
