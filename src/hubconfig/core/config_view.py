"""Casing-tolerant, read-only view over a decoded JSON object.

A ConfigView always wraps a mapping. Navigating to a member whose value is an
object yields a view over that object; any other value (scalar, null, array)
is wrapped as ``{"value": <v>}`` so leaves and branches share one shape.

Lookups try the exact member name first and then its snake_case form, so a
``config.json`` written with ``hidden_size`` can be read as::

    view.navigate("hiddenSize").int_value
    view.hiddenSize.int_value

Missing members and type mismatches are reported as ``None``, never raised.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .casing import uncamel_case
from .json_value import JSONObject, JSONValue, freeze, is_array, is_object, thaw

VALUE_KEY = "value"


def resolve_key(mapping: JSONObject, name: str) -> str | None:
    """Return the key ``name`` matches in ``mapping``: exact first, then snake_case."""
    if name in mapping:
        return name
    key = uncamel_case(name)
    if key in mapping:
        return key
    return None


class ConfigView:
    """Immutable wrapper around one JSON object."""

    __slots__ = ("_mapping",)

    def __init__(self, mapping: Mapping[str, JSONValue]):
        if not is_object(mapping):
            raise TypeError(f"ConfigView wraps a mapping, got {type(mapping).__name__}")
        object.__setattr__(self, "_mapping", freeze(mapping))

    @classmethod
    def _from_frozen(cls, mapping: JSONObject) -> ConfigView:
        view = cls.__new__(cls)
        object.__setattr__(view, "_mapping", mapping)
        return view

    def navigate(self, name: str) -> ConfigView | None:
        """Return a view over member ``name``, or None when it is absent."""
        key = resolve_key(self._mapping, name)
        if key is None:
            return None
        member = self._mapping[key]
        if is_object(member):
            return ConfigView._from_frozen(member)
        return ConfigView._from_frozen(MappingProxyType({VALUE_KEY: member}))

    def __getattr__(self, name: str) -> ConfigView:
        # Only reached when normal attribute lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        view = self.navigate(name)
        if view is None:
            raise AttributeError(f"{type(self).__name__} has no member {name!r}")
        return view

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __copy__(self) -> ConfigView:
        return self

    def __deepcopy__(self, memo) -> ConfigView:
        return self

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and resolve_key(self._mapping, name) is not None

    @property
    def mapping(self) -> JSONObject:
        return self._mapping

    def keys(self) -> Iterator[str]:
        return iter(self._mapping.keys())

    @property
    def value(self) -> JSONValue:
        """The wrapped leaf value, or None when this view is not a leaf."""
        return self._mapping.get(VALUE_KEY)

    @property
    def int_value(self) -> int | None:
        value = self.value
        # bool is an int subclass; JSON true/false is not a number
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    @property
    def float_value(self) -> float | None:
        value = self.value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError:
                return None
        return None

    @property
    def bool_value(self) -> bool | None:
        value = self.value
        return value if isinstance(value, bool) else None

    @property
    def string_value(self) -> str | None:
        value = self.value
        return value if isinstance(value, str) else None

    @property
    def array_value(self) -> list[ConfigView] | None:
        """One view per element of an array of objects.

        Returns None if the leaf is not an array or if any element is not an
        object.
        """
        value = self.value
        if not is_array(value):
            return None
        if not all(is_object(item) for item in value):
            return None
        return [ConfigView._from_frozen(item) for item in value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigView):
            return NotImplemented
        return thaw(self._mapping) == thaw(other._mapping)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({thaw(self._mapping)!r})"
