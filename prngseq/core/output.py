"""
CSV serialization for generated sequences.

A sequence is written as a one-column table: the header ``x`` followed by
one newline-terminated row per value, in generation order.
"""

import csv
import io
import logging
from typing import Iterator, Optional, TextIO

from .generator import BaseGenerator

logger = logging.getLogger(__name__)

HEADER = "x"


def format_value(value: float, float_format: Optional[str] = None) -> str:
    """Render one value; ``repr`` unless a format spec is given."""
    if float_format is None:
        return repr(value)
    return format(value, float_format)


def _new_writer(sink: TextIO):
    return csv.writer(sink, lineterminator="\n")


def write_sequence(generator: BaseGenerator, sink: TextIO) -> int:
    """Write the header and ``generator.config.count`` rows to ``sink``.

    Returns the number of values written.
    """
    fmt = generator.config.float_format
    writer = _new_writer(sink)
    writer.writerow([HEADER])

    written = 0
    for value in generator.stream():
        writer.writerow([format_value(value, fmt)])
        written += 1

    logger.debug("Wrote %d values from %s", written, generator.name)
    return written


def iter_lines(generator: BaseGenerator) -> Iterator[str]:
    """Yield the same text ``write_sequence`` produces, one line at a time."""
    fmt = generator.config.float_format
    buffer = io.StringIO()
    writer = _new_writer(buffer)

    def drain() -> str:
        line = buffer.getvalue()
        buffer.seek(0)
        buffer.truncate()
        return line

    writer.writerow([HEADER])
    yield drain()
    for value in generator.stream():
        writer.writerow([format_value(value, fmt)])
        yield drain()
