import click
from .base import BaseLogger, describe_comparison
import sys


class ColorfulLogger(BaseLogger):
    """Logger that outputs colorful text for CLI usage."""
    
    def __init__(self, log_level: str = "INFO"):
        super().__init__(log_level)
        # Configure loguru for colored output
        self.logger.configure(
            handlers=[{
                "sink": sys.stdout,
                "colorize": True,
                "format": "<cyan>{time:YYYY-MM-DD HH:mm:ss.SSS}</cyan> | "
                         "<level>{level: <8}</level> | "
                         "<white>{message}</white>",
                "level": log_level
            }]
        )
    
    def log_signal(self, signal_name: str, handled: bool):
        if handled:
            self.logger.warning(click.style(f"Received {signal_name}, closing gracefully", fg="yellow", bold=True))
        else:
            self.logger.warning(click.style(f"Received {signal_name}, no view to close, terminating", fg="red", bold=True))

    def log_version_check(self, running_version: str, available_version: str, comparison: int):
        color = "green" if comparison > 0 else "white"
        self.logger.info(click.style(
            f"Published version {available_version} is {describe_comparison(comparison)} "
            f"(running {running_version})",
            fg=color,
            bold=comparison > 0
        ))

    def log_error(self, message: str):
        self.logger.error(click.style(message, fg="red", bold=True))

    def log_warning(self, message: str):
        self.logger.warning(click.style(message, fg="yellow", bold=True))

    def log_info(self, message: str):
        self.logger.info(click.style(message, fg="white"))

    def log_debug(self, message: str):
        self.logger.debug(click.style(message, fg="blue"))
