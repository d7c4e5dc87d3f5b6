"""Dispatcher for translation change events.

Handlers are registered with decorators and called synchronously when an
event is dispatched. A failing handler is logged and skipped so it can
never undo or interrupt the write that triggered it.
"""

from typing import Any, Callable, Dict, List

from translatable.events.models import TranslationEvent
from translatable.logging import get_module_logger

logger = get_module_logger()

# Event handler registry: event_type -> list of handlers
EVENT_HANDLERS: Dict[str, List[Callable[[TranslationEvent], Any]]] = {}


def register_event_handler(event_type: str):
    """Decorator to register a handler for an event type.

    Args:
        event_type: The type of event to handle (e.g., 'translation.has_been_set').

    Returns:
        Decorator function that registers the handler.
    """

    def decorator(handler_func: Callable) -> Callable:
        EVENT_HANDLERS.setdefault(event_type, []).append(handler_func)
        logger.debug(
            "registered_event_handler",
            handler=getattr(handler_func, "__name__", "unknown"),
            event_type=event_type,
        )
        return handler_func

    return decorator


def dispatch_event(event: TranslationEvent) -> List[Any]:
    """Call every handler registered for the event type, in order.

    Args:
        event: The event to dispatch.

    Returns:
        Return values of the handlers that succeeded.
    """
    results = []
    handlers = EVENT_HANDLERS.get(event.event_type, [])
    change = event.change

    logger.debug(
        "dispatching_translation_event",
        event_type=event.event_type,
        key=change.key,
        locale=change.locale,
        handler_count=len(handlers),
        correlation_id=str(event.correlation_id),
    )

    for handler in handlers:
        try:
            results.append(handler(event))
        except Exception as e:
            logger.error(
                "event_handler_failed",
                handler=getattr(handler, "__name__", "unknown"),
                event_type=event.event_type,
                key=change.key,
                locale=change.locale,
                error=str(e),
                correlation_id=str(event.correlation_id),
            )

    return results


def clear_handlers() -> None:
    """Clear all registered handlers.

    WARNING: This is intended for testing only.
    """
    EVENT_HANDLERS.clear()
