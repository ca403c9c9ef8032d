"""
Extended ASCII Reporter.

Prints each code in the extended range with its glyph, then computes the
derived values of the report:

    - integer expression over the range bounds
    - floating-point literal sum
    - fixed-capacity sequence filled by seq[i] = seq[i-1] * i * i
    - date record set to 2018/10/1 (plus a second, unassigned record)

Line format:
    3-character right-justified decimal code, optional separator,
    2-character right-justified glyph.

Glyphs depend on the code page. The default is cp437, which maps every
byte 128-255 to a printable character.
"""

import codecs
import sys
import warnings
from typing import Iterator, Optional, TextIO, Tuple

from extascii.model import DateRecord, ReportState


FROM_CODE = 128
TO_CODE = 255
SEQUENCE_CAPACITY = 10
DEFAULT_ENCODING = "cp437"
DEFAULT_TITLE = "Extended ASCII codes"
START_DATE = (2018, 10, 1)

REPLACEMENT_GLYPH = "?"


class ReporterError(Exception):
    """Raised when the reporter is called with an unusable range, code page or capacity."""
    pass


def _check_encoding(encoding: str) -> str:
    try:
        name = codecs.lookup(encoding).name
    except LookupError:
        raise ReporterError(f"Unknown code page: {encoding}")
    # rot13, hex, base64 and friends resolve but cannot decode bytes to text
    try:
        b"".decode(encoding)
    except LookupError:
        raise ReporterError(f"Not a text code page: {encoding}")
    return name


def _check_code(code: int) -> None:
    if not 0 <= code <= 255:
        raise ReporterError(f"Code out of byte range: {code}")


def glyph_for_code(code: int, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Return the glyph of a single byte code in the given code page.

    Bytes the code page leaves undefined are reported with a UserWarning
    and rendered as REPLACEMENT_GLYPH.

    Raises:
        ReporterError: If the code is outside 0-255 or the code page is unknown
    """
    _check_code(code)
    _check_encoding(encoding)
    try:
        return bytes([code]).decode(encoding)
    except UnicodeDecodeError:
        warnings.warn(f"Code {code} is undefined in {encoding}", UserWarning)
        return REPLACEMENT_GLYPH


def format_code_line(code: int, encoding: str = DEFAULT_ENCODING, separator: str = "") -> str:
    """Format one code as '%3d' + separator + '%2c' (no newline)."""
    glyph = glyph_for_code(code, encoding)
    return f"{code:>3}{separator}{glyph:>2}"


def iter_code_lines(
    start: int = FROM_CODE,
    end: int = TO_CODE,
    encoding: str = DEFAULT_ENCODING,
    separator: str = "",
) -> Iterator[str]:
    """
    Yield one formatted line per code from start to end inclusive, ascending.

    Args:
        start: First code (default 128)
        end: Last code (default 255)
        encoding: Code page used for glyphs
        separator: Text between the code and glyph columns

    Raises:
        ReporterError: If the bounds are outside 0-255 or start > end
    """
    _check_code(start)
    _check_code(end)
    if start > end:
        raise ReporterError(f"Empty code range: {start} > {end}")
    _check_encoding(encoding)

    for code in range(start, end + 1):
        yield format_code_line(code, encoding=encoding, separator=separator)


def print_extended_ascii(
    stream: Optional[TextIO] = None,
    start: int = FROM_CODE,
    end: int = TO_CODE,
    encoding: str = DEFAULT_ENCODING,
    separator: str = "",
    title: Optional[str] = None,
) -> int:
    """
    Write the code table to stream (stdout by default).

    If title is given, it is written first followed by a blank line.

    Returns:
        Number of code lines written
    """
    if stream is None:
        stream = sys.stdout

    lines = list(iter_code_lines(start, end, encoding=encoding, separator=separator))

    if title is not None:
        stream.write(f"{title}\n\n")
    for line in lines:
        stream.write(line + "\n")
    return len(lines)


def compute_integer_expression(start: int = FROM_CODE, end: int = TO_CODE) -> int:
    """Integer expression over the range bounds, 678 for 128-255."""
    return start + 2 * (20 + end)


def compute_real_expression() -> float:
    """Sum of an exponent, a fractional and a trailing-dot literal."""
    return 12.34e-12 + .56 + 78.


def fill_sequence(capacity: int = SEQUENCE_CAPACITY) -> Tuple[int, ...]:
    """
    Fill a fixed-capacity sequence: seq[0] = 1, seq[i] = seq[i-1] * i * i.

    The loop bound is the capacity itself, so the fill can never run past
    the end of the sequence.

    Raises:
        ReporterError: If capacity < 1
    """
    if capacity < 1:
        raise ReporterError(f"Sequence capacity must be at least 1, got {capacity}")

    sequence = [0] * capacity
    sequence[0] = 1
    for i in range(1, capacity):
        sequence[i] = sequence[i - 1] * i * i
    return tuple(sequence)


def populate_start_date() -> DateRecord:
    record = DateRecord()
    record.year, record.month, record.day = START_DATE
    return record


def run_report(
    stream: Optional[TextIO] = None,
    encoding: str = DEFAULT_ENCODING,
    separator: str = "",
    title: Optional[str] = None,
) -> ReportState:
    """
    Run the whole report: print the table, then compute the derived values.

    Nothing after the table is printed. The computed values are returned
    as a ReportState for callers that want them.
    """
    print_extended_ascii(stream, encoding=encoding, separator=separator, title=title)

    integer_value = compute_integer_expression(FROM_CODE, TO_CODE)
    real_value = compute_real_expression()
    sequence = fill_sequence(SEQUENCE_CAPACITY)

    start_date = populate_start_date()
    # Declared alongside start_date, never assigned
    end_date = DateRecord()

    return ReportState(
        integer_value=integer_value,
        real_value=real_value,
        sequence=sequence,
        start_date=start_date,
        end_date=end_date,
    )


__all__ = [
    "FROM_CODE",
    "TO_CODE",
    "SEQUENCE_CAPACITY",
    "DEFAULT_ENCODING",
    "DEFAULT_TITLE",
    "START_DATE",
    "ReporterError",
    "glyph_for_code",
    "format_code_line",
    "iter_code_lines",
    "print_extended_ascii",
    "compute_integer_expression",
    "compute_real_expression",
    "fill_sequence",
    "populate_start_date",
    "run_report",
]
