"""Attribute storage used by translatable records.

The persistence layer that loads and saves rows is not part of this
package; a record only needs a key/value view of one row's attributes.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class AttributeStore(Protocol):
    """Key/value view over one persisted record's attributes."""

    def get(self, key: str) -> Any:
        """Return the raw value for key, or None when absent."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Write the raw value for key."""
        ...

    def all_keys(self) -> List[str]:
        """Return every attribute key currently present."""
        ...


class DictAttributeStore:
    """In-memory AttributeStore backed by an ordered dict.

    Usage:
        store = DictAttributeStore({"title": "Hello", "titleTranslations": ""})
        store.set("title", "Hi")
        row = store.to_dict()
    """

    def __init__(self, attributes: Optional[Dict[str, Any]] = None):
        self._attributes: Dict[str, Any] = dict(attributes or {})

    def get(self, key: str) -> Any:
        return self._attributes.get(key)

    def set(self, key: str, value: Any) -> None:
        self._attributes[key] = value

    def all_keys(self) -> List[str]:
        return list(self._attributes.keys())

    def to_dict(self) -> Dict[str, Any]:
        """Return a copy of the stored attributes."""
        return dict(self._attributes)

    def __repr__(self) -> str:
        return f"DictAttributeStore({self._attributes!r})"
