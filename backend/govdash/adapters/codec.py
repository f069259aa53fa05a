"""Display identifier codec: numeric surrogate keys <-> ``PREFIX-NNN`` strings."""
import re

DEFAULT_WIDTH = 3

# Zero-padding width per entity prefix; anything not listed uses DEFAULT_WIDTH
ID_WIDTHS: dict[str, int] = {
    "ACT": 6,
}

_DIGITS = re.compile(r"[0-9]+")


def _as_int(value) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        return int(value.strip())
    return 0


def encode(numeric_id, prefix: str, width: int | None = None) -> str:
    """Format a persistence key as a display identifier, e.g. ``RISK-007``.

    Args:
        numeric_id: Non-negative integer key. Anything that is not an
            integer (or an integral string/float) encodes as 0.
        prefix: Entity prefix such as ``RISK`` or ``ACT``.
        width: Zero-padding width. Defaults to the prefix's entry in
            ``ID_WIDTHS``, else ``DEFAULT_WIDTH``.
    """
    if width is None:
        width = ID_WIDTHS.get(prefix, DEFAULT_WIDTH)
    return f"{prefix}-{str(_as_int(numeric_id)).zfill(width)}"


def decode(display_id) -> int:
    """Return the first run of digits in ``display_id`` as an int, else 0.

    The prefix is not checked: ``decode("ACT-000123") == 123`` and
    ``decode("no-digits-here") == 0``.
    """
    if display_id is None:
        return 0
    match = _DIGITS.search(str(display_id))
    return int(match.group(0)) if match else 0
