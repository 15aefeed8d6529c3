"""Key casing bridge between camelCase names and snake_case JSON keys."""

from __future__ import annotations

import unicodedata

_UPPERCASE_CATEGORIES = frozenset({"Lu", "Lt"})


def _is_uppercase(char: str) -> bool:
    return unicodedata.category(char) in _UPPERCASE_CATEGORIES


def uncamel_case(name: str) -> str:
    """Convert a camelCase name to snake_case.

    Works per code point. An underscore is inserted before an uppercase
    letter only when the previous character was not itself uppercase, so
    runs of capitals collapse into one word:

        >>> uncamel_case("hiddenSize")
        'hidden_size'
        >>> uncamel_case("modelID")
        'model_id'
    """
    parts: list[str] = []
    previous_is_lowercase = False
    for char in name:
        if _is_uppercase(char):
            if previous_is_lowercase:
                parts.append("_")
            parts.append(char.lower())
            previous_is_lowercase = False
        else:
            parts.append(char)
            previous_is_lowercase = True
    return "".join(parts)


def camel_case(name: str) -> str:
    """Convert a snake_case key to camelCase (``hidden_size`` -> ``hiddenSize``)."""
    words = [word for word in name.split("_") if word]
    return "".join(
        word.lower() if index == 0 else word.capitalize() for index, word in enumerate(words)
    )
