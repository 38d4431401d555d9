import signal
from typing import List, Optional
from pydantic import BaseModel, field_validator

from ..request.http_client import HttpClientConfig
from ..version.comparator import VersionNumber

# Signals that mean "interrupt or terminate requested"; SIGBREAK exists on Windows only
INTERRUPT_SIGNAL_NAMES = ["SIGINT", "SIGTERM", "SIGHUP", "SIGBREAK"]

class ShutdownConfig(BaseModel):
    signals: List[str] = ["SIGINT", "SIGTERM"]
    intercept_without_view: bool = False  # Keep running when no view is registered

    @field_validator('signals')
    @classmethod
    def validate_signals(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("At least one signal must be configured")
        supported = [name for name in INTERRUPT_SIGNAL_NAMES if name in signal.Signals.__members__]
        unknown = [name for name in value if name not in supported]
        if unknown:
            raise ValueError(
                f"Unsupported signal name(s): {', '.join(unknown)}. Must be one of: {', '.join(supported)}"
            )
        return value

class VersionCheckConfig(BaseModel):
    check_automatically: bool = True
    check_period_days: int = 7
    manifest_url: Optional[str] = None  # URL of a plain-text file holding the latest version
    download_url: Optional[str] = None

class AppConfig(BaseModel):
    running_version: str = "1.0.0"
    heartbeat_seconds: float = 1.0
    shutdown: ShutdownConfig = ShutdownConfig()
    version_check: VersionCheckConfig = VersionCheckConfig()
    http: HttpClientConfig = HttpClientConfig()

    @field_validator('running_version')
    @classmethod
    def validate_running_version(cls, value: str) -> str:
        VersionNumber.parse(value)
        return value

    @field_validator('heartbeat_seconds')
    @classmethod
    def validate_heartbeat(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("heartbeat_seconds must be positive")
        return value

    def get_running_version(self) -> VersionNumber:
        return VersionNumber.parse(self.running_version)
