"""Application configuration."""

from .config import AppConfig, ShutdownConfig, VersionCheckConfig
from .validator import ConfigYamlValidator

__all__ = ['AppConfig', 'ShutdownConfig', 'VersionCheckConfig', 'ConfigYamlValidator']
