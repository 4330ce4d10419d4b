"""Load a Turtle document from a file, one line at a time.

Files ending in `.gz` are decompressed on the fly; the whole file is never
held in memory, only the document being assembled.
"""

import gzip
import io
import logging
from pathlib import Path
from typing import IO, Iterator

from .accumulator import ParseResult, parse_lines
from .config import ParserConfig

logger = logging.getLogger(__name__)

READ_BUFFER_SIZE = 1024 * 1024


def open_text_lines(path: str | Path, encoding: str = "utf-8-sig") -> IO[str]:
    """Open a plain or gzip-compressed text file for line iteration."""
    path = Path(path)
    if path.suffix == ".gz":
        raw = gzip.open(path, "rb")
        buffered = io.BufferedReader(raw, buffer_size=READ_BUFFER_SIZE)
        return io.TextIOWrapper(buffered, encoding=encoding)
    return open(path, "r", encoding=encoding, buffering=READ_BUFFER_SIZE)


def iter_lines(path: str | Path, encoding: str = "utf-8-sig") -> Iterator[str]:
    with open_text_lines(path, encoding=encoding) as f:
        yield from f


def load_turtle_document(path: str | Path, config: ParserConfig | None = None) -> ParseResult:
    """Parse the Turtle file at `path` into a document.

    Raises:
        OSError: If the file cannot be read.
        NotATurtleError: If the config's unrecognized-line policy rejects the file.
    """
    config = config or ParserConfig()
    logger.info("Loading turtle document %s", path)
    result = parse_lines(iter_lines(path, encoding=config.encoding), config=config)
    diagnostics = result.diagnostics
    logger.info(
        "Loaded %s: %d headers, %d statements, %d unrecognized lines%s",
        path,
        len(result.document.headers),
        len(result.document.body),
        diagnostics.unrecognized_count,
        ", truncated" if diagnostics.truncated else "",
    )
    return result
