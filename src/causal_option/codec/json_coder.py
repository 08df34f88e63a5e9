"""Codec – StdJsonCoder, the default stdlib ``json`` implementation."""
from __future__ import annotations

import json
from typing import Any, get_origin

from causal_option.codec.port import JsonCoder
from causal_option.codec.settings import CodecSettings
from causal_option.config import EnvSettingsLoader


class StdJsonCoder(JsonCoder):
    """JSON coder backed by :mod:`json`.

    When *target_type* exposes ``model_validate`` (pydantic models) the parsed
    document is validated through it. For other plain classes the parsed
    document must already be an instance (an int is accepted for ``float``),
    else :class:`TypeError` is raised. Generic aliases such as ``list[int]``
    pass through unchecked.
    """

    def __init__(self, settings: CodecSettings | None = None) -> None:
        self._settings = settings or CodecSettings()

    @classmethod
    def from_settings(cls, settings: CodecSettings | None = None) -> "StdJsonCoder":
        """Build a coder, reading ``OPTION_CODEC_*`` from the environment when *settings* is omitted."""
        return cls(settings or EnvSettingsLoader().load(CodecSettings))

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def marshal(self, value: Any) -> bytes:
        s = self._settings
        if s.indent:
            text = json.dumps(value, ensure_ascii=s.ensure_ascii, sort_keys=s.sort_keys, indent=s.indent)
        else:
            text = json.dumps(value, ensure_ascii=s.ensure_ascii, sort_keys=s.sort_keys, separators=(",", ":"))
        return text.encode()

    def unmarshal(self, data: bytes, target_type: type[Any] | None = None) -> Any:
        parsed = json.loads(data)
        if target_type is None:
            return parsed
        if hasattr(target_type, "model_validate"):
            return target_type.model_validate(parsed)
        if get_origin(target_type) is None and isinstance(target_type, type):
            _check_type(parsed, target_type)
        return parsed


def _check_type(parsed: Any, target_type: type[Any]) -> None:
    # JSON has one number type: ints are acceptable floats, bools are not ints.
    if target_type is float and isinstance(parsed, int) and not isinstance(parsed, bool):
        return
    if isinstance(parsed, bool) and target_type is not bool and target_type is not object:
        raise TypeError(f"expected {target_type.__name__}, got bool")
    if not isinstance(parsed, target_type):
        raise TypeError(f"expected {target_type.__name__}, got {type(parsed).__name__}")


__all__ = ["StdJsonCoder"]
