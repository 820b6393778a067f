"""Number formatting for transform descriptors. No engine imports."""

from __future__ import annotations

import re

import numpy as np

_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")

# JS Number#toString uses exponent form outside [1e-6, 1e21)
_SMALL_THRESHOLD = 1e-6
_LARGE_THRESHOLD = 1e21


def format_number(value: float) -> str:
    """Render a number the way SVG/JS consumers print it.

    10.0 -> "10", -0.0 -> "0", 0.5 -> "0.5", 1e-05 -> "0.00001", 1e-07 -> "1e-7".
    """
    value = float(value)
    magnitude = abs(value)
    if value.is_integer() and magnitude < _LARGE_THRESHOLD:
        return str(int(value))
    if _SMALL_THRESHOLD <= magnitude < _LARGE_THRESHOLD:
        # Shortest round-trip digits, never in exponent form
        return np.format_float_positional(value, trim="-")
    return _EXPONENT_RE.sub(r"e\1\2", repr(value))


def format_args(values) -> str:
    """Join numbers with single spaces, in input order."""
    return " ".join(format_number(v) for v in values)
