"""Output destinations for the ls-option CLI.

Listings are often piped into ``head``, which closes the pipe before all lines
have been written. The helpers here turn that into a normal early stop so the
CLI can exit with the conventional status instead of a traceback.
"""

import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO


@contextmanager
def open_output(path: Optional[Path] = None) -> Iterator[TextIO]:
    """Yield the stream a listing is written to.

    Args:
        path: File to write to, created or truncated. None selects stdout,
            which is left open on exit.

    Raises:
        OSError: If the file cannot be opened for writing.
    """
    if path is None:
        yield sys.stdout
        return

    with path.open("w", encoding="utf-8", errors="surrogateescape") as stream:
        yield stream


def silence_stdout() -> None:
    """Point stdout at the null device.

    Used after the reader of a pipe has gone away, so the interpreter does not
    report a second broken pipe while flushing stdout during shutdown.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def write_listing(stream: TextIO, lines: Iterable[str]) -> bool:
    """Write each line followed by a newline.

    Returns:
        True if every line was written, False if the reading end of a pipe was
        closed first.
    """
    try:
        for line in lines:
            stream.write(f"{line}\n")
        stream.flush()
    except BrokenPipeError:
        if stream is sys.stdout:
            silence_stdout()
        return False
    return True
