import enum
import io
import logging
from typing import BinaryIO

from . import config
from .cursor import ByteCursor
from .errors import (
    InvalidNumberError,
    KeyNotStringError,
    LeadingZeroError,
    NegativeZeroError,
    NestingTooDeepError,
    NumberOverflowError,
    UnknownSymbolError,
)
from .value import INT64_MAX, INT64_MIN, Value, kind_of

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class _Marker(enum.Enum):
    END = enum.auto()


END = _Marker.END


class Decoder:
    """Recursive-descent decoder reading one Bencode value from a binary stream.

    Only the bytes of the value are consumed, anything after it is left in
    the stream. Dictionaries are returned with their keys in wire order, the
    sorted order canonical Bencode requires is not checked.
    """

    def __init__(self, stream: BinaryIO, max_depth: int | None = config.MAX_DEPTH):
        self.cursor = ByteCursor(stream)
        self.max_depth = max_depth
        self.depth = 0

    def decode(self) -> Value:
        value = self.decode_one()
        if value is END:
            raise UnknownSymbolError("e")

        logger.debug(f"Decoded {kind_of(value)} from {self.cursor.position} bytes")
        return value

    def decode_one(self) -> Value | _Marker:
        c = self.read_char()
        match c:
            case _ if c in DIGITS:
                return self.read_string(c)

            case "i":
                return self.read_integer()

            case "l":
                return self.read_list()

            case "d":
                return self.read_dict()

            case "e":
                return END

            case _:
                raise UnknownSymbolError(c)

    def read_string(self, first: str) -> bytes:
        text = first
        while (c := self.read_char()) != ":":
            if c not in DIGITS:
                raise InvalidNumberError(c)
            text += c

        length = int(text)
        if length > INT64_MAX:
            raise NumberOverflowError(text)

        return self.cursor.read_exact(length)

    def read_integer(self) -> int:
        first = self.read_char()
        second = self.read_char()

        match first:
            case "0":
                if second != "e":
                    raise LeadingZeroError()
                return 0

            case "-":
                if second == "0":
                    raise NegativeZeroError()
                if second not in DIGITS:
                    raise InvalidNumberError(second)

            case _ if first in DIGITS:
                if second == "e":
                    return int(first)
                if second not in DIGITS:
                    raise InvalidNumberError(second)

            case _:
                raise InvalidNumberError(first)

        text = first + second
        while (c := self.read_char()) != "e":
            if c not in DIGITS:
                raise InvalidNumberError(c)
            text += c

        n = int(text)
        if not INT64_MIN <= n <= INT64_MAX:
            raise NumberOverflowError(text)

        return n

    def read_list(self) -> list:
        self.enter()

        lst = []
        while (item := self.decode_one()) is not END:
            lst.append(item)

        self.leave()
        logger.debug(f"List of {len(lst)} items ends at byte {self.cursor.position}")

        return lst

    def read_dict(self) -> dict:
        self.enter()

        d = {}
        while (key := self.decode_one()) is not END:
            if not isinstance(key, bytes):
                raise KeyNotStringError(key)

            value = self.decode_one()
            if value is END:
                raise UnknownSymbolError("e")

            # Duplicate keys: the last value wins
            d[key] = value

        self.leave()
        logger.debug(f"Dictionary of {len(d)} keys ends at byte {self.cursor.position}")

        return d

    def enter(self):
        self.depth += 1
        if self.max_depth is not None and self.depth > self.max_depth:
            raise NestingTooDeepError(self.max_depth)

    def leave(self):
        self.depth -= 1

    def read_char(self) -> str:
        return chr(self.cursor.read_one_byte())


def load(stream: BinaryIO, max_depth: int | None = config.MAX_DEPTH) -> Value:
    """Decode one Bencode value from a readable binary stream."""
    return Decoder(stream, max_depth).decode()


def loads(data: bytes, max_depth: int | None = config.MAX_DEPTH) -> Value:
    """Decode one Bencode value from the start of ``data``."""
    return load(io.BytesIO(data), max_depth)
