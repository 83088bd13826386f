"""
Observer for generation lifecycle events.
Subscriptions are (event_name -> list of callables).
"""
from threading import Lock
from typing import Callable, Dict, List
import logging

logger = logging.getLogger(__name__)

GENERATION_STARTED = "generation_started"
GENERATION_SUCCEEDED = "generation_succeeded"
GENERATION_FAILED = "generation_failed"


class EventDispatcher:
    def __init__(self):
        self._listeners: Dict[str, List[Callable[..., None]]] = {}
        self._lock = Lock()

    def subscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        with self._lock:
            self._listeners.setdefault(event_name, []).append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        with self._lock:
            callbacks = self._listeners.get(event_name, [])
            if callback in callbacks:
                callbacks.remove(callback)

    def dispatch(self, event_name: str, **kwargs) -> None:
        with self._lock:
            listeners = list(self._listeners.get(event_name, []))
        for listener in listeners:
            try:
                listener(**kwargs)
            except Exception:
                # a broken listener must not fail the generation attempt
                logger.exception("Listener for %s raised", event_name)


def register_logging_listeners(dispatcher: EventDispatcher) -> None:
    """Log every generation attempt's outcome; the credential never reaches these events."""

    def on_started(preferences=None, **kwargs):
        logger.info("Generation started for %s", preferences)

    def on_succeeded(preferences=None, batch=None, **kwargs):
        logger.info("Generated %d suggestions for %s", len(batch), preferences)

    def on_failed(preferences=None, error=None, **kwargs):
        logger.warning("Generation failed for %s: %s (%s)", preferences, getattr(error, "message", error), type(error).__name__)

    dispatcher.subscribe(GENERATION_STARTED, on_started)
    dispatcher.subscribe(GENERATION_SUCCEEDED, on_succeeded)
    dispatcher.subscribe(GENERATION_FAILED, on_failed)
