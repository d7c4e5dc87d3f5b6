"""Event dispatcher service for dependency injection."""

from typing import Any, List

from translatable.events.dispatcher import dispatch_event
from translatable.events.models import TranslationEvent


class EventDispatcher:
    """Class-based facade over dispatch_event.

    Lets the change sink receive a dispatcher instance, which tests can
    replace with a mock.
    """

    def dispatch(self, event: TranslationEvent) -> List[Any]:
        """Dispatch event synchronously to all registered handlers."""
        return dispatch_event(event)
