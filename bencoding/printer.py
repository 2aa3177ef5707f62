import io
import logging
import sys
from pathlib import Path

import requests

from . import config
from .bencode import load
from .errors import DecodeError
from .value import Value

logger = logging.getLogger(__name__)

USAGE = "Usage: {} FILE|URL -- prints a bencoded file as an indented tree"


def render(value: Value, indent: int = 0) -> str:
    """Render a decoded value as a human readable, indented tree"""
    match value:
        case bytes():
            try:
                return f"String ({len(value)}): '{value.decode()}'"
            except UnicodeDecodeError:
                return f"String ({len(value)}): [redacted]"

        case int():
            return f"Integer {value}"

        case list():
            text = f"List ({len(value)}):"
            for item in value:
                text += f"\n{' ' * (indent + 2)}{render(item, indent + 2)}"
            return text

        case dict():
            text = f"Dictionary ({len(value)}):"
            for key, item in value.items():
                name = key.decode(errors="backslashreplace")
                text += f"\n{' ' * (indent + 2)}Key '{name}': {render(item, indent + 2)}"
            return text

        case _:
            raise NotImplementedError


def fetch(url: str) -> bytes:
    r = requests.get(url, timeout=config.HTTP_TIMEOUT)
    r.raise_for_status()

    logger.debug(f"Fetched {len(r.content)} bytes from {url}")
    return r.content


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    logging.basicConfig(format=config.LOG_FORMAT, level=config.LOG_LEVEL)

    if len(argv) != 2 or argv[1].startswith("-"):
        print(USAGE.format(Path(argv[0]).name), file=sys.stderr)
        return 2

    source = argv[1]
    try:
        if source.startswith(("http://", "https://")):
            try:
                data = load(io.BytesIO(fetch(source)))
            except requests.RequestException as e:
                print(f"Error: Could not fetch {source}: {e}", file=sys.stderr)
                return 1
        else:
            path = Path(source)
            if not path.is_file():
                print(
                    "Error: The specified input file does not exist or is unaccessible.",
                    file=sys.stderr,
                )
                return 1
            with open(path, "rb") as f:
                data = load(f)
    except DecodeError as e:
        logger.error(f"{source} is not valid bencode: {e}")
        return 1

    print(render(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())
