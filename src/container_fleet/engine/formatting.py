"""Number formatting for the text reports."""

from __future__ import annotations


def format_number(value: float) -> str:
    """Render a quantity without a trailing ``.0`` (``1500``, ``13.3``, ``-15``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
