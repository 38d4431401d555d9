"""Shutdown coordinator that turns an interrupt/termination request into a view close."""

import threading
from typing import Optional

from ..config import ShutdownConfig
from ..logging import BaseLogger
from .host_signals import HostSignalSource, SignalEvent
from .view import MainView


class ShutdownCoordinator:
    """Holds at most one interrupt/termination registration with the host.

    The coordinator has two states: unhooked (initial) and hooked. Enabling
    while hooked and disabling while unhooked are no-ops. The main view is set
    and cleared by whoever owns the application lifecycle; the coordinator only
    reads it when a signal is delivered.
    """
    
    def __init__(
        self,
        signal_source: HostSignalSource,
        logger: BaseLogger,
        config: Optional[ShutdownConfig] = None
    ):
        """
        Initialize the shutdown coordinator.
        
        Args:
            signal_source: Host facility that delivers interrupt/termination requests
            logger: Logger instance for logging shutdown events
            config: Shutdown configuration, defaults apply when omitted
        """
        self.signal_source = signal_source
        self.logger = logger
        self.config = config or ShutdownConfig()
        self.main_view: Optional[MainView] = None
        self._hooked = False
        self._lock = threading.Lock()
    
    @property
    def is_hooked(self) -> bool:
        """Check if the signal handler is currently attached."""
        return self._hooked

    def enable_shutdown_interception(self) -> None:
        """Attach the signal handler unless it is already attached.

        Registration errors from the signal source propagate and leave the
        coordinator unhooked.
        """
        with self._lock:
            if self._hooked:
                return
            self.signal_source.register(self._handle_signal)
            self._hooked = True
        self.logger.log_debug("Shutdown interception enabled")

    def disable_shutdown_interception(self) -> None:
        """Detach the signal handler if it is attached."""
        with self._lock:
            if not self._hooked:
                return
            self.signal_source.unregister(self._handle_signal)
            self._hooked = False
        self.logger.log_debug("Shutdown interception disabled")

    def _handle_signal(self, event: SignalEvent) -> None:
        """
        Handle an interrupt/termination request delivered by the host.

        Errors raised by the view's close() are not caught here.
        
        Args:
            event: The delivered request; marked handled to suppress default termination
        """
        view = self.main_view
        if view is not None or self.config.intercept_without_view:
            event.handled = True
        self.logger.log_signal(event.signal_name, event.handled)
        if view is not None:
            view.close()
