"""
Safe nested-field lookup by dotted/bracketed path.

``get(container, "items[0].name", default)`` never raises: a missing
segment substitutes the default and keeps walking, an un-indexable
accumulator returns the default immediately.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from dynui.formatting import to_string

_BRACKET_RE = re.compile(r"\[([^\]]+)\]")

_MISSING = object()


def normalize_path(path: Any) -> list[str]:
    """Split a path into segments, rewriting ``a[0]`` as ``a.0``."""
    text = _BRACKET_RE.sub(r".\1", to_string(path))
    return text.split(".")


def _index(acc: Any, segment: str) -> Any:
    """Index one level deep. Returns _MISSING for an absent member, raises if un-indexable."""
    if acc is None:
        raise TypeError(f"cannot read {segment!r} of None")

    if isinstance(acc, Mapping):
        if segment in acc:
            return acc[segment]
        if segment.isdigit() and int(segment) in acc:
            return acc[int(segment)]
        return _MISSING

    if isinstance(acc, (list, tuple, str)):
        if segment == "length":
            return len(acc)
        if segment.isdigit():
            position = int(segment)
            return acc[position] if position < len(acc) else _MISSING
        return _MISSING

    return getattr(acc, segment, _MISSING)


def get(container: Any, path: Any, default: Any = None) -> Any:
    """
    Look up ``path`` inside ``container``.

    Args:
        container: Any nested structure of mappings, sequences and objects.
        path: Dotted path, bracket indexing allowed (``"a.b[2].c"``).
        default: Value substituted for missing segments and returned on failure.

    Returns:
        The value found, or ``default``.
    """
    acc = container
    for segment in normalize_path(path):
        try:
            value = _index(acc, segment)
        except Exception:
            return default
        acc = default if value is _MISSING else value
    return acc
