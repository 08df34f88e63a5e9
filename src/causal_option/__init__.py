"""
causal_option – Option values that remember why they are empty.

Import path convention::

    from causal_option import Some, none, matches
    from causal_option.kernel.types import combinators
    from causal_option.codec import OptionCodec
"""

from causal_option.codec import OptionCodec, decode, encode
from causal_option.kernel.errors import ERR_EMPTY_OPTION, matches
from causal_option.kernel.types import (
    Nothing,
    Option,
    Some,
    describe,
    flatten,
    from_nullable,
    is_none,
    is_some,
    map_option,
    none,
    process,
    wrap,
    wrap_fn,
)

__version__ = "0.1.0"
__all__ = [
    "ERR_EMPTY_OPTION",
    "Nothing",
    "Option",
    "OptionCodec",
    "Some",
    "__version__",
    "decode",
    "describe",
    "encode",
    "flatten",
    "from_nullable",
    "is_none",
    "is_some",
    "map_option",
    "matches",
    "none",
    "process",
    "wrap",
    "wrap_fn",
]
