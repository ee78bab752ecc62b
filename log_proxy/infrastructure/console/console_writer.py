import sys
from typing import Iterable, Optional, TextIO


class ConsoleWriter:
    """Append-only sink for rendered lines, standard output by default."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved per write so a swapped sys.stdout is honored
        return self._stream if self._stream is not None else sys.stdout

    def write_lines(self, lines: Iterable[str]) -> None:
        """Write ``lines`` as one contiguous block."""
        block = "".join(f"{line}\n" for line in lines)
        if not block:
            return
        stream = self.stream
        stream.write(block)
        stream.flush()
