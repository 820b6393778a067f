"""Transform descriptor: an ordered, append-only list of transform fragments.

The descriptor is kept as structured fragments in memory and rendered to the
SVG transform-list string (``translate(10 20) rotate(45)``) only at the
boundary.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from vectordiff.utils.formatting import format_args

# name(args) with optional whitespace/comma separation between functions
_FUNCTION_RE = re.compile(r"\s*([A-Za-z][A-Za-z0-9]*)\s*\(([^()]*)\)\s*,?")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_ARG_SEPARATOR_RE = re.compile(r"\s*,\s*|\s+")


@dataclass(frozen=True)
class TransformFragment:
    """One rendered transformation instruction, e.g. ``translate(10 20)``."""

    name: str
    args: tuple[float, ...] = ()

    def render(self) -> str:
        return f"{self.name}({format_args(self.args)})"


def append_transform(existing: str | None, fragment: str) -> str:
    """Append a fragment to a descriptor string, preserving application order.

    Blank or missing descriptors are replaced by the fragment alone; otherwise
    the existing text is stripped and the fragment follows after one space.
    """
    if existing is not None and existing.strip():
        return f"{existing.strip()} {fragment}"
    return fragment


def render_descriptor(fragments: list[TransformFragment]) -> str:
    return " ".join(f.render() for f in fragments)


def parse_descriptor(text: str | None) -> list[TransformFragment]:
    """Parse an SVG transform list into fragments.

    Accepts whitespace- or comma-separated arguments. Raises ValueError on
    anything that is not a sequence of ``name(numbers)`` calls.
    """
    if text is None or not text.strip():
        return []

    fragments: list[TransformFragment] = []
    pos = 0
    while pos < len(text):
        if not text[pos:].strip():
            break
        m = _FUNCTION_RE.match(text, pos)
        if m is None:
            raise ValueError(f"Malformed transform list at offset {pos}: {text[pos:]!r}")
        fragments.append(TransformFragment(m.group(1), _parse_args(m.group(2))))
        pos = m.end()

    return fragments


def _parse_args(raw: str) -> tuple[float, ...]:
    raw = raw.strip()
    if not raw:
        return ()
    values: list[float] = []
    for token in _ARG_SEPARATOR_RE.split(raw):
        if not _NUMBER_RE.fullmatch(token):
            raise ValueError(f"Malformed transform argument: {token!r}")
        values.append(float(token))
    return tuple(values)
