"""The decoded value model.

A decoded Bencode value is one of four native types: ``bytes`` for strings,
``int`` for integers, ``list`` for lists and ``dict`` with ``bytes`` keys for
dictionaries. Dictionary key order is not significant: the decoder neither
checks nor restores the sorted order canonical Bencode requires.
"""

from typing import TypeAlias

Value: TypeAlias = bytes | int | list["Value"] | dict[bytes, "Value"]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def kind_of(value: Value) -> str:
    """Name the variant of a decoded value."""
    match value:
        case bytes():
            return "string"

        case bool():
            raise TypeError(f"{value!r} is not a bencode value")

        case int():
            return "integer"

        case list():
            return "list"

        case dict():
            return "dictionary"

        case _:
            raise TypeError(f"{value!r} is not a bencode value")
