"""Tick sources: cancellable one-second emitters that drive the timer.

A source hands out a :class:`TickHandle` per started stream.  The handle
is both the cancellation token and the identity the timer compares
against, so a tick queued by a stream that has since been stopped can be
recognised and dropped.

``QtTickSource`` is the real one (a ``QTimer`` per stream, serialised on
the Qt event loop).  ``ManualTickSource`` fires only when told to, which
makes the state machine fully deterministic under test.

Both sources hold a bound-method callback weakly: once its object is
collected the stream is stopped, so a timer that is dropped without
``close()`` does not keep ticking.
"""

from __future__ import annotations

import inspect
import itertools
import logging
import weakref
from typing import Callable, Optional, Protocol

from PyQt6 import sip
from PyQt6.QtCore import QObject, QTimer

TICK_INTERVAL_MS = 1000

_log = logging.getLogger(__name__)
_handle_ids = itertools.count(1)


class TickHandle:
    """Identity token for one started tick stream."""

    __slots__ = ("_id", "_active")

    def __init__(self) -> None:
        self._id: int = next(_handle_ids)
        self._active: bool = True

    @property
    def id(self) -> int:
        return self._id

    @property
    def active(self) -> bool:
        return self._active

    def deactivate(self) -> None:
        self._active = False

    def __repr__(self) -> str:
        state = "active" if self._active else "stopped"
        return f"<TickHandle #{self._id} {state}>"


TickCallback = Callable[[TickHandle], None]
CallbackRef = Callable[[], Optional[TickCallback]]


def _hold(callback: TickCallback, on_dead: Callable[[], None]) -> CallbackRef:
    """Return a getter for *callback*, weak if it is a bound method.

    *on_dead* runs when the method's object is collected.
    """
    if inspect.ismethod(callback):
        return weakref.WeakMethod(callback, lambda _ref: on_dead())
    return lambda: callback


class TickSource(Protocol):
    def start(self, callback: TickCallback) -> TickHandle: ...

    def stop(self, handle: TickHandle) -> None: ...


class QtTickSource(QObject):
    """One ``QTimer`` per started stream, firing every second."""

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._interval_ms = interval_ms
        self._timers: dict[TickHandle, QTimer] = {}
        self._targets: dict[TickHandle, CallbackRef] = {}

    def start(self, callback: TickCallback) -> TickHandle:
        handle = TickHandle()
        timer = QTimer(self)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(lambda: self._fire(handle))
        self._timers[handle] = timer
        self._targets[handle] = _hold(callback, lambda: self._release_orphan(handle))
        timer.start()
        _log.debug("Tick stream started: %r", handle)
        return handle

    def stop(self, handle: TickHandle) -> None:
        handle.deactivate()
        self._targets.pop(handle, None)
        timer = self._timers.pop(handle, None)
        if timer is None:
            return
        # The QTimer goes with its parent if this source is being torn down
        if not sip.isdeleted(timer):
            timer.stop()
            timer.deleteLater()
        _log.debug("Tick stream stopped: %r", handle)

    @property
    def active_streams(self) -> int:
        return len(self._timers)

    def _fire(self, handle: TickHandle) -> None:
        ref = self._targets.get(handle)
        callback = ref() if ref is not None else None
        if callback is None:
            self._release_orphan(handle)
            return
        callback(handle)

    def _release_orphan(self, handle: TickHandle) -> None:
        if handle in self._timers:
            _log.debug("Tick recipient gone, stopping %r", handle)
            self.stop(handle)


class ManualTickSource:
    """Tick source that only fires on request."""

    def __init__(self) -> None:
        self._targets: dict[TickHandle, CallbackRef] = {}
        self.started: list[TickHandle] = []

    def start(self, callback: TickCallback) -> TickHandle:
        handle = TickHandle()
        self._targets[handle] = _hold(callback, lambda: self.stop(handle))
        self.started.append(handle)
        return handle

    def stop(self, handle: TickHandle) -> None:
        handle.deactivate()
        self._targets.pop(handle, None)

    def fire(self, count: int = 1) -> None:
        """Deliver *count* ticks to every active stream."""
        for _ in range(count):
            for handle, ref in list(self._targets.items()):
                callback = ref()
                if callback is None:
                    self.stop(handle)
                    continue
                callback(handle)

    def deliver(self, handle: TickHandle, callback: TickCallback | None = None) -> None:
        """Deliver one tick from *handle*, even if it was stopped.

        Simulates a tick that was already queued when its stream was
        cancelled.  Stopped handles need the original *callback*.
        """
        ref = self._targets.get(handle)
        target = ref() if ref is not None else callback
        if target is None:
            raise LookupError(f"no callback known for {handle!r}")
        target(handle)

    @property
    def active_streams(self) -> int:
        return len(self._targets)
