"""Sequential allocation of fixed-width tag codes.

Codes are five digit, zero padded decimal strings ("00001".."99999"), so
lexicographic order equals numeric order. The allocator is pure: the caller
passes the current highest code and gets the next codes back.
"""

from pipo.core.errors import FormatError, InvalidCountError

CODE_WIDTH = 5
MAX_CODE = 10**CODE_WIDTH - 1
MAX_BATCH_SIZE = 100


def parse_code(code: str) -> int:
    """Parse a stored code, refusing anything that is not exactly CODE_WIDTH digits."""
    if len(code) != CODE_WIDTH or not (code.isascii() and code.isdigit()):
        raise FormatError(
            f"Tag code {code!r} is not a {CODE_WIDTH}-digit zero-padded number"
        )
    return int(code)


def format_code(value: int) -> str:
    """Render a numeric value as a fixed-width code."""
    if value < 1 or value > MAX_CODE:
        raise FormatError(f"Tag code value {value} does not fit in {CODE_WIDTH} digits")
    return str(value).zfill(CODE_WIDTH)


def validate_batch_count(count: int) -> None:
    """Reject batch sizes outside 1..MAX_BATCH_SIZE."""
    if count < 1 or count > MAX_BATCH_SIZE:
        raise InvalidCountError(count, MAX_BATCH_SIZE)


def allocate_next(last_code: str | None) -> str:
    """Return the code following ``last_code``, or "00001" when there is none.

    Raises:
        FormatError: If ``last_code`` is malformed or the sequence is exhausted
    """
    if last_code is None:
        return format_code(1)
    return format_code(parse_code(last_code) + 1)


def allocate_batch(last_code: str | None, count: int) -> list[str]:
    """Return ``count`` consecutive codes after ``last_code``.

    Raises:
        InvalidCountError: If ``count`` is outside 1..MAX_BATCH_SIZE
        FormatError: If ``last_code`` is malformed or the sequence is exhausted
    """
    validate_batch_count(count)

    codes: list[str] = []
    current = last_code
    for _ in range(count):
        current = allocate_next(current)
        codes.append(current)
    return codes
