"""Codec – PydanticJsonCoder, typed decoding through ``pydantic.TypeAdapter``."""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from causal_option.codec.port import JsonCoder


class PydanticJsonCoder(JsonCoder):
    """JSON coder that validates decoded payloads against *target_type*.

    Requires the ``pydantic`` extra. Unlike :class:`StdJsonCoder`, a payload
    of ``"42"`` decoded with ``target_type=int`` fails instead of passing
    through as a string.
    """

    def __init__(self) -> None:
        try:
            import pydantic
        except ImportError as exc:
            raise ImportError("Install 'causal-option[pydantic]' to use PydanticJsonCoder") from exc
        self._pydantic = pydantic

    def marshal(self, value: Any) -> bytes:
        return self._adapter(type(value)).dump_json(value)

    def unmarshal(self, data: bytes, target_type: type[Any] | None = None) -> Any:
        return self._adapter(Any if target_type is None else target_type).validate_json(data)

    def _adapter(self, tp: Any) -> Any:
        return _type_adapter(self._pydantic.TypeAdapter, tp)


@lru_cache(maxsize=256)
def _type_adapter(factory: Any, tp: Any) -> Any:
    return factory(tp)


__all__ = ["PydanticJsonCoder"]
