"""Codec settings – JSON output options read from ``OPTION_CODEC_*``."""
from __future__ import annotations

import dataclasses

from causal_option.config import InvalidSettingValueError, Settings


@dataclasses.dataclass
class CodecSettings(Settings):
    """Settings for :class:`~causal_option.codec.json_coder.StdJsonCoder`.

    ``indent`` of ``0`` means compact single-line output.
    """

    _prefix: dataclasses.ClassVar[str] = "OPTION_CODEC"

    ensure_ascii: bool = False
    sort_keys: bool = False
    indent: int = 0

    def _validate(self) -> None:
        if self.indent < 0:
            raise InvalidSettingValueError("indent", self.indent, "must be >= 0")


__all__ = ["CodecSettings"]
