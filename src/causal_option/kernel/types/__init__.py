"""Kernel option types — public re-export surface.

Modules:
  option.py      — Option, Some, Nothing, none, wrap, wrap_fn
  combinators.py — map, process, flatten, from_nullable
  display.py     — describe
"""

from causal_option.kernel.types.combinators import flatten, from_nullable, process
from causal_option.kernel.types.combinators import map as map_option
from causal_option.kernel.types.display import NONE_MARKER, describe
from causal_option.kernel.types.option import (
    Nothing,
    Option,
    Some,
    is_none,
    is_some,
    none,
    wrap,
    wrap_fn,
)

__all__ = [
    "NONE_MARKER",
    "Nothing",
    "Option",
    "Some",
    "describe",
    "flatten",
    "from_nullable",
    "is_none",
    "is_some",
    "map_option",
    "none",
    "process",
    "wrap",
    "wrap_fn",
]
