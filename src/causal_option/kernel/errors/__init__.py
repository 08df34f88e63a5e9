"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── OptionError              (option.py)
    │   ├── EmptyOptionError     ERR_EMPTY_OPTION sentinel
    │   ├── SkippedTransformError
    │   └── UnwrapError
    └── InfrastructureError      (infrastructure.py)
        └── SerializationError

    JoinedCause(ExceptionGroup)  several causes joined by join_causes()
"""

from causal_option.kernel.errors.base import BaseError
from causal_option.kernel.errors.infrastructure import InfrastructureError, SerializationError
from causal_option.kernel.errors.option import (
    ERR_EMPTY_OPTION,
    EmptyOptionError,
    JoinedCause,
    OptionError,
    SkippedTransformError,
    UnwrapError,
    join_causes,
    matches,
)

__all__ = [
    "BaseError",
    "ERR_EMPTY_OPTION",
    "EmptyOptionError",
    "InfrastructureError",
    "JoinedCause",
    "OptionError",
    "SerializationError",
    "SkippedTransformError",
    "UnwrapError",
    "join_causes",
    "matches",
]
