from typing import Type
from .base import BaseLogger, describe_comparison
from .colorful import ColorfulLogger
from .plain import PlainLogger
from .json import JsonLogger

LOGGERS: dict[str, Type[BaseLogger]] = {
    "colorful": ColorfulLogger,
    "plain": PlainLogger,
    "json": JsonLogger
}

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def create_logger(output_type: str, log_level: str = "INFO") -> BaseLogger:
    """Factory function to create the appropriate logger.
    
    Args:
        output_type: The type of logger to create (colorful, plain, or json)
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    if output_type.lower() not in LOGGERS:
        raise ValueError(f"Invalid output type: {output_type}. Must be one of: {', '.join(LOGGERS.keys())}")
    if log_level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {log_level}. Must be one of: {', '.join(LOG_LEVELS)}")
    
    return LOGGERS[output_type.lower()](log_level.upper())

__all__ = [
    'BaseLogger', 'ColorfulLogger', 'PlainLogger', 'JsonLogger',
    'LOGGERS', 'LOG_LEVELS', 'create_logger', 'describe_comparison'
]
