"""Key/value store for values captured during a scenario.

Steps put values under a key and later steps refer to them with
``(the <property> of the <key>)`` tokens, which ``inject_stored_values``
replaces with the stored property.
"""

import re
from collections.abc import Callable, Mapping
from typing import Any

from browser_contexts.exceptions import StoreLookupError

# (the <property> of the <key>)
INJECTION_PATTERN = re.compile(r"\(the ([^)]+) of the ([^)]+)\)")


class StoreContext:
    """Holds values stored by steps for the duration of a scenario."""

    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        self._registry[key] = value

    def get(self, key: str) -> Any:
        if key not in self._registry:
            raise StoreLookupError(f"Entry '{key}' was not found in the store")
        return self._registry[key]

    def has(self, key: str) -> bool:
        return key in self._registry

    def clear(self) -> None:
        self._registry.clear()

    def get_thing_property(self, key: str, prop: str) -> Any:
        """
        Get a property of a stored value.

        Mappings are looked up by key, everything else by attribute.

        Raises:
            StoreLookupError: If the key is not stored or the value lacks the property
        """
        thing = self.get(key)
        if isinstance(thing, Mapping):
            if prop in thing:
                return thing[prop]
        elif hasattr(thing, prop):
            return getattr(thing, prop)
        raise StoreLookupError(f"'{key}' does not have a '{prop}' property")

    def inject_stored_values(
        self, value: Any, on_get: Callable[[Any], Any] | None = None
    ) -> Any:
        """
        Replace ``(the <property> of the <key>)`` tokens with stored values.

        Args:
            value: The string to inject into; other types are returned as-is
            on_get: Optional transform applied to each property before injection

        Returns:
            The string with every token replaced
        """
        if not isinstance(value, str):
            return value

        def replace(match: re.Match) -> str:
            prop, key = match.group(1), match.group(2)
            found = self.get_thing_property(key, prop)
            if on_get is not None:
                found = on_get(found)
            return str(found)

        return INJECTION_PATTERN.sub(replace, value)
