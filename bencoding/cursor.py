from typing import BinaryIO

from .errors import DecodeIOError

READ_CHUNK_SIZE = 64 * 2**10


class ByteCursor:
    """Reads a binary stream strictly forward, one byte or one run at a time."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.position = 0

    def read_one_byte(self) -> int:
        return self.read_exact(1)[0]

    def read_exact(self, n: int) -> bytes:
        data = bytearray()
        while len(data) < n:
            try:
                chunk = self.stream.read(min(n - len(data), READ_CHUNK_SIZE))
            except OSError as exc:
                raise DecodeIOError(
                    f"Read failed at byte {self.position + len(data)}: {exc}"
                ) from exc

            # None from a non-blocking stream counts as exhausted
            if not chunk:
                raise DecodeIOError(
                    f"Unexpected end of stream at byte {self.position + len(data)},"
                    f" wanted {n - len(data)} more"
                )
            data += chunk

        self.position += n
        return bytes(data)
