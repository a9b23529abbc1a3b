"""Visit every string held anywhere inside a nested value."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from typing import Any


def walk(x: Any, fn: Callable[[str], object]) -> None:
    """Call ``fn`` on every string found by descending through ``x``.

    Dataclass fields, sequence and iterator items and mapping values are
    visited in order; functions are called without arguments and their
    results are visited.
    """
    if isinstance(x, str):
        fn(x)
    elif dataclasses.is_dataclass(x) and not isinstance(x, type):
        for f in dataclasses.fields(x):
            walk(getattr(x, f.name), fn)
    elif isinstance(x, Mapping):
        for value in x.values():
            walk(value, fn)
    elif callable(x) and not isinstance(x, type):
        walk(x(), fn)
    elif isinstance(x, Iterable) and not isinstance(x, (bytes, bytearray)):
        for item in x:
            walk(item, fn)