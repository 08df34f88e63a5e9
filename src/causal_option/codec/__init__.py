"""Codec – JSON adapter for options.

Modules:
  port.py           — JsonCoder (marshal / unmarshal port)
  json_coder.py     — StdJsonCoder (stdlib json, default)
  pydantic_coder.py — PydanticJsonCoder (``pydantic`` extra)
  settings.py       — CodecSettings (``OPTION_CODEC_*``)
  option_codec.py   — OptionCodec and the process-wide default
"""
from causal_option.codec.json_coder import StdJsonCoder
from causal_option.codec.option_codec import (
    EMPTY_PAYLOADS,
    NULL_PAYLOAD,
    OptionCodec,
    decode,
    encode,
    get_default_codec,
    is_empty_payload,
    set_default_codec,
)
from causal_option.codec.port import JsonCoder
from causal_option.codec.pydantic_coder import PydanticJsonCoder
from causal_option.codec.settings import CodecSettings

__all__ = [
    "CodecSettings",
    "EMPTY_PAYLOADS",
    "JsonCoder",
    "NULL_PAYLOAD",
    "OptionCodec",
    "PydanticJsonCoder",
    "StdJsonCoder",
    "decode",
    "encode",
    "get_default_codec",
    "is_empty_payload",
    "set_default_codec",
]
