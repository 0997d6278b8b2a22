"""Request/response hooks for the HTTP client adapters."""
from typing import Callable, Dict, List, Optional


class EventEmitter:
    """
    Observer registry mixed into the client adapters.

    Events emitted by RequestsHttpClient and AiohttpHttpClient:
    - 'request': called with the RequestSpec before it is sent
    - 'response': called with the ResponseEntity after a successful exchange

    Handlers run synchronously in registration order; a failing handler
    propagates out of ``exchange``.

    Example:
        >>> client.on('response', lambda r: print(r.status_code))
    """

    def __init__(self):
        self._events: Dict[str, List[Callable]] = {}

    def on(self, event: str, callback: Callable) -> 'EventEmitter':
        """Register callback for event; returns self for chaining."""
        self._events.setdefault(event, []).append(callback)
        return self

    def emit(self, event: str, *args, **kwargs):
        """Call every handler of event with the given arguments."""
        for callback in list(self._events.get(event, ())):
            callback(*args, **kwargs)

    def off(self, event: str, callback: Optional[Callable] = None) -> 'EventEmitter':
        """Remove callback from event, or every handler when callback is None."""
        if event not in self._events:
            return self

        if callback is None:
            del self._events[event]
        else:
            self._events[event] = [cb for cb in self._events[event] if cb != callback]

        return self

    def listener_count(self, event: str) -> int:
        """Number of handlers registered for event."""
        return len(self._events.get(event, []))
