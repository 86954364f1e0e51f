"""
Scheduled one-shot events driven by simulation time
"""

import heapq
import itertools


class ScheduledEvent:
    """
    Handle for a pending callback; doubles as its cancellation token
    """
    def __init__(self, due, callback, name=None):
        self.due = due
        self.callback = callback
        self.name = name or getattr(callback, '__name__', 'event')
        self.cancelled = False
        self.fired = False

    @property
    def pending(self):
        return not (self.cancelled or self.fired)

    def cancel(self):
        """Stop the callback from ever running"""
        self.cancelled = True

    def __repr__(self):
        state = "pending" if self.pending else ("fired" if self.fired else "cancelled")
        return f"ScheduledEvent(name={self.name}, due={self.due:.2f}, {state})"


class EventScheduler:
    """
    Fires callbacks once the scheduler clock passes their due time

    The clock only moves through advance(), so whoever drives the
    simulation decides when time is frozen.
    """
    def __init__(self):
        self.now = 0.0
        self._queue = []
        self._counter = itertools.count()

    def schedule(self, delay, callback, name=None):
        """
        Run callback once, delay seconds from now

        Returns:
            ScheduledEvent token
        """
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        event = ScheduledEvent(self.now + delay, callback, name)
        heapq.heappush(self._queue, (event.due, next(self._counter), event))
        return event

    def cancel(self, event):
        if event is not None:
            event.cancel()

    def cancel_all(self):
        """Drop every pending event"""
        for _, _, event in self._queue:
            event.cancel()
        self._queue.clear()

    def advance(self, dt):
        """
        Move the clock forward and fire everything now due, in due order

        Returns:
            List of events fired by this call
        """
        self.now += dt
        fired = []
        while self._queue and self._queue[0][0] <= self.now:
            _, _, event = heapq.heappop(self._queue)
            if event.cancelled:
                continue
            event.fired = True
            event.callback()
            fired.append(event)
        return fired

    def reset(self):
        """Cancel everything and rewind the clock to zero"""
        self.cancel_all()
        self.now = 0.0

    def pending_events(self):
        return [e for _, _, e in sorted(self._queue, key=lambda item: item[:2]) if e.pending]

    def __len__(self):
        return len(self.pending_events())

    def __repr__(self):
        return f"EventScheduler(now={self.now:.2f}, pending={len(self)})"
