"""Change sinks notified after every translation write."""

from typing import Optional, Protocol

from translatable.events import (
    TRANSLATION_SET_EVENT,
    EventDispatcher,
    TranslationChangeRecord,
    TranslationEvent,
)


class ChangeSink(Protocol):
    """Receives a TranslationChangeRecord; the return value is ignored."""

    def __call__(self, change: TranslationChangeRecord) -> None: ...


class EventDispatcherSink:
    """Forward translation changes to the event dispatcher.

    Each change becomes a TranslationEvent of type
    ``translation.has_been_set``. Handler failures are logged by the
    dispatcher and never reach the writer.

    Usage:
        @register_event_handler(TRANSLATION_SET_EVENT)
        def reindex(event):
            search.refresh(event.change.record)

        record = Article(policy, sink=EventDispatcherSink())
    """

    def __init__(self, dispatcher: Optional[EventDispatcher] = None):
        self.dispatcher = dispatcher or EventDispatcher()

    def __call__(self, change: TranslationChangeRecord) -> None:
        self.dispatcher.dispatch(
            TranslationEvent(change=change, event_type=TRANSLATION_SET_EVENT)
        )
