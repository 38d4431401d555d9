"""Host signal delivery: register, deregister and invoke a single callback."""

import os
import signal
import types
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Union

# Type for signal handlers
SignalHandlerType = Union[Callable[[int, Optional[types.FrameType]], Any], int, None]


@dataclass
class SignalEvent:
    """A delivered interrupt/termination request.

    Setting ``handled`` to True stops the host from applying its default behavior.
    """
    signal_name: str
    handled: bool = False


SignalCallback = Callable[[SignalEvent], None]


class HostSignalSource(ABC):
    """Abstract source of interrupt/termination requests."""

    @abstractmethod
    def register(self, callback: SignalCallback) -> None:
        """Start delivering interrupt/termination requests to callback."""
        pass

    @abstractmethod
    def unregister(self, callback: SignalCallback) -> None:
        """Stop delivering requests to callback."""
        pass


class PosixSignalSource(HostSignalSource):
    """Delivers SIGINT/SIGTERM through the ``signal`` module.

    ``signal.signal`` only works on the main thread; calling register or
    unregister anywhere else raises ValueError.
    """

    DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self, signals: Optional[Iterable[signal.Signals]] = None):
        self.signals = tuple(signals) if signals is not None else self.DEFAULT_SIGNALS
        self._callback: Optional[SignalCallback] = None
        self._original_handlers: Dict[int, SignalHandlerType] = {}

    @property
    def is_registered(self) -> bool:
        return self._callback is not None

    def register(self, callback: SignalCallback) -> None:
        if self._callback is not None:
            raise RuntimeError("A signal callback is already registered")

        # Store original signal handlers to restore later
        originals = {int(sig): signal.getsignal(sig) for sig in self.signals}
        installed = []
        try:
            for sig in self.signals:
                signal.signal(sig, self._dispatch)
                installed.append(int(sig))
        except (OSError, ValueError, RuntimeError):
            # Undo a partial install so no signal is left without a callback
            for sig_num in installed:
                original = originals[sig_num]
                signal.signal(sig_num, original if original is not None else signal.SIG_DFL)
            raise
        self._original_handlers = originals
        self._callback = callback

    def unregister(self, callback: SignalCallback) -> None:
        if self._callback is None or self._callback != callback:
            return

        for sig_num, original in self._original_handlers.items():
            signal.signal(sig_num, original if original is not None else signal.SIG_DFL)
        self._original_handlers = {}
        self._callback = None

    def _dispatch(self, sig_num: int, frame: Optional[types.FrameType]) -> None:
        """Called by the interpreter on the main thread when a signal arrives."""
        event = SignalEvent(signal.Signals(sig_num).name)
        callback = self._callback
        if callback is not None:
            callback(event)
        if not event.handled:
            self._apply_default(sig_num, frame)

    def _apply_default(self, sig_num: int, frame: Optional[types.FrameType]) -> None:
        original = self._original_handlers.get(sig_num, signal.SIG_DFL)
        if callable(original):
            original(sig_num, frame)
            return
        if original == signal.SIG_IGN:
            return

        # SIG_DFL, or a handler installed outside Python: let the OS terminate us
        signal.signal(sig_num, signal.SIG_DFL)
        os.kill(os.getpid(), sig_num)


def signals_from_names(names: Iterable[str]) -> tuple:
    """Resolve names such as ``SIGINT`` to ``signal.Signals`` members."""
    return tuple(signal.Signals[name] for name in names)
