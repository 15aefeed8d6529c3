"""JSON value types for decoded hub documents.

Decoded documents are deep-frozen before a ConfigView wraps them: objects
become read-only mapping proxies and arrays become tuples.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import TypeAlias, Union

JSONScalar: TypeAlias = Union[str, int, float, bool, None]
JSONValue: TypeAlias = Union[JSONScalar, Sequence["JSONValue"], Mapping[str, "JSONValue"]]
JSONObject: TypeAlias = Mapping[str, JSONValue]


def is_object(value: object) -> bool:
    return isinstance(value, Mapping)


def is_array(value: object) -> bool:
    # str is a Sequence too
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_container(value: object) -> bool:
    return is_object(value) or is_array(value)


def _members(value):
    if is_object(value):
        return iter(value.items())
    return enumerate(value)


def _rebuild(
    value: JSONValue,
    make_object: Callable[[dict], JSONValue],
    make_array: Callable[[Iterable], JSONValue],
) -> JSONValue:
    """Copy a JSON tree bottom-up without recursion.

    Each stack frame holds (container, member iterator, rebuilt members,
    key in parent). Nesting depth is bounded by memory, not the call stack.
    """
    if not _is_container(value):
        return value

    stack = [(value, _members(value), [], None)]
    while True:
        source, members, rebuilt, key = stack[-1]
        for member_key, member in members:
            if _is_container(member):
                stack.append((member, _members(member), [], member_key))
                break
            rebuilt.append((member_key, member))
        else:
            stack.pop()
            if is_object(source):
                result = make_object({str(k): v for k, v in rebuilt})
            else:
                result = make_array(v for _, v in rebuilt)
            if not stack:
                return result
            stack[-1][2].append((key, result))


def freeze(value: JSONValue) -> JSONValue:
    """Return a read-only deep copy of a decoded JSON value."""
    return _rebuild(value, MappingProxyType, tuple)


def thaw(value: JSONValue) -> JSONValue:
    """Inverse of freeze: plain dicts and lists."""
    return _rebuild(value, dict, list)
