"""Shared test helpers for HIIT."""

from hiit.timer import IntervalTimer, ManualTickSource


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def __call__(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None


def state(timer: IntervalTimer) -> tuple:
    """(phase, remaining_seconds, remaining_sets, running) for compact asserts."""
    snap = timer.snapshot
    return (snap.phase, snap.remaining_seconds, snap.remaining_sets, snap.running)


def run_to_completion(
    timer: IntervalTimer, ticks: ManualTickSource, limit: int = 10_000,
) -> int:
    """Fire ticks until the workout completes; return how many it took."""
    count = 0
    while timer.running:
        if count >= limit:
            raise AssertionError(f"timer still running after {limit} ticks")
        ticks.fire()
        count += 1
    return count
