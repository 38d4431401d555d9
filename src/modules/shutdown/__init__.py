"""Shutdown coordination: interrupt/termination interception for graceful close."""

from .coordinator import ShutdownCoordinator
from .host_signals import HostSignalSource, PosixSignalSource, SignalEvent, signals_from_names
from .view import ConsoleView, LoopBoundView, MainView

__all__ = [
    'ShutdownCoordinator', 'HostSignalSource', 'PosixSignalSource', 'SignalEvent',
    'signals_from_names', 'ConsoleView', 'LoopBoundView', 'MainView'
]
