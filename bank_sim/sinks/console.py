"""Console sink for command results."""

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class ConsoleSink:
    """Output result lines to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Destination stream. ``None`` resolves ``sys.stdout`` on every
            write so redirections made after construction are honoured.
        """
        self.stream = stream
        self._counts: dict[str, int] = {}

    def write(self, category: str, line: str) -> None:
        """Write a single result line, counted under ``category``."""
        print(line, file=self.stream or sys.stdout)
        self._counts[category] = self._counts.get(category, 0) + 1

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def close(self) -> dict[str, int]:
        """Flush the stream, log a summary and return per-category counts."""
        (self.stream or sys.stdout).flush()
        total = sum(self._counts.values())
        logger.info("Console sink wrote %d lines", total)
        for category, count in self._counts.items():
            logger.info("  %s: %d", category, count)
        return self.counts
