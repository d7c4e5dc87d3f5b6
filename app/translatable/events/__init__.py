"""Translation change events.

Usage:

    from translatable.events import TRANSLATION_SET_EVENT, register_event_handler

    @register_event_handler(TRANSLATION_SET_EVENT)
    def reindex(event: TranslationEvent) -> None:
        search.refresh(event.change.record)
"""

from translatable.events.dispatcher import (
    clear_handlers,
    dispatch_event,
    register_event_handler,
)
from translatable.events.models import (
    TRANSLATION_SET_EVENT,
    TranslationChangeRecord,
    TranslationEvent,
)
from translatable.events.service import EventDispatcher

__all__ = [
    "TRANSLATION_SET_EVENT",
    "EventDispatcher",
    "TranslationChangeRecord",
    "TranslationEvent",
    "clear_handlers",
    "dispatch_event",
    "register_event_handler",
]
