"""Codec – JsonCoder port."""
from __future__ import annotations

import abc
from typing import Any


class JsonCoder(abc.ABC):
    """Port: turn a present value into JSON bytes and back.

    Implementations raise on failure; :class:`~causal_option.codec.OptionCodec`
    converts those failures into ``SerializationError``.
    """

    @abc.abstractmethod
    def marshal(self, value: Any) -> bytes: ...

    @abc.abstractmethod
    def unmarshal(self, data: bytes, target_type: type[Any] | None = None) -> Any: ...


__all__ = ["JsonCoder"]
