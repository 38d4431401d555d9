from typing import List

from src.modules.shutdown.host_signals import HostSignalSource, SignalCallback, SignalEvent


class FakeSignalSource(HostSignalSource):
    """Signal source that records registrations and delivers signals on demand."""

    def __init__(self):
        self.callbacks: List[SignalCallback] = []
        self.register_calls = 0
        self.unregister_calls = 0

    def register(self, callback: SignalCallback) -> None:
        self.register_calls += 1
        self.callbacks.append(callback)

    def unregister(self, callback: SignalCallback) -> None:
        self.unregister_calls += 1
        if callback in self.callbacks:
            self.callbacks.remove(callback)

    def deliver(self, signal_name: str = "SIGINT") -> SignalEvent:
        """Deliver a signal to every registered callback and return the event."""
        event = SignalEvent(signal_name)
        for callback in list(self.callbacks):
            callback(event)
        return event
