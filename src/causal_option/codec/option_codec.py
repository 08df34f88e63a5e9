"""Codec – OptionCodec: options to JSON bytes and back.

Empty options encode as ``null``. On the way back, every "empty-ish" payload
(nothing at all, ``null``, ``{}``, ``[]``) decodes to an empty option with
the ``ERR_EMPTY_OPTION`` cause, so producers that omit a field, send an
explicit null or send an empty structure all mean the same thing.
"""
from __future__ import annotations

from typing import Any, TypeVar

from causal_option.codec.json_coder import StdJsonCoder
from causal_option.codec.port import JsonCoder
from causal_option.kernel.errors import ERR_EMPTY_OPTION, SerializationError
from causal_option.kernel.types import Nothing, Option, Some
from causal_option.observability.logging import get_logger

T = TypeVar("T")

NULL_PAYLOAD = b"null"
EMPTY_PAYLOADS: frozenset[bytes] = frozenset({b"", NULL_PAYLOAD, b"{}", b"[]"})

# JSON insignificant whitespace (RFC 8259 section 2)
_JSON_WS = b" \t\n\r"

_log = get_logger(__name__)


class OptionCodec:
    """Encode and decode options with a pluggable :class:`JsonCoder`.

    Parameters
    ----------
    coder:
        Value coder for present values. Defaults to
        :meth:`StdJsonCoder.from_settings`, which reads ``OPTION_CODEC_*``.
    """

    def __init__(self, coder: JsonCoder | None = None) -> None:
        self._coder = coder if coder is not None else StdJsonCoder.from_settings()

    @property
    def coder(self) -> JsonCoder:
        return self._coder

    def encode(self, opt: Option[Any]) -> bytes:
        """Return ``b"null"`` for an empty option, else the coder's encoding of the value."""
        if opt.is_none():
            return NULL_PAYLOAD
        value = opt.ok()
        try:
            return self._coder.marshal(value)
        except Exception as exc:
            _log.warning("option.codec_failed", op="encode", payload_type=type(value).__name__, cause=exc)
            raise SerializationError(
                f"Failed to encode {type(value).__name__}: {exc}",
                payload_type=type(value).__name__,
                cause=exc,
            ) from exc

    def decode(self, data: bytes | str, target_type: type[T] | None = None) -> Option[T]:
        """Decode *data* into a fresh option.

        Raises
        ------
        SerializationError
            When the payload is not empty-ish and the coder rejects it, or a
            ``str`` payload cannot be UTF-8 encoded.
        """
        type_name = getattr(target_type, "__name__", None)
        try:
            if isinstance(data, str):
                data = data.encode()
            if is_empty_payload(data):
                return Nothing(ERR_EMPTY_OPTION)
            value = self._coder.unmarshal(data, target_type)
        except Exception as exc:
            _log.warning("option.codec_failed", op="decode", payload_type=type_name, cause=exc)
            raise SerializationError(
                f"Failed to decode option payload: {exc}",
                payload_type=type_name,
                cause=exc,
            ) from exc
        return Some(value)


def is_empty_payload(data: bytes) -> bool:
    """True for payloads that mean "no value": empty, ``null``, ``{}`` or ``[]``."""
    return bytes(data).strip(_JSON_WS) in EMPTY_PAYLOADS


_default_codec: OptionCodec | None = None


def get_default_codec() -> OptionCodec:
    """Return the process-wide codec, creating it from the environment on first use."""
    global _default_codec
    if _default_codec is None:
        _default_codec = OptionCodec()
    return _default_codec


def set_default_codec(codec: OptionCodec | None) -> None:
    """Replace the process-wide codec; ``None`` resets it to be rebuilt lazily."""
    global _default_codec
    _default_codec = codec


def encode(opt: Option[Any], codec: OptionCodec | None = None) -> bytes:
    return (codec or get_default_codec()).encode(opt)


def decode(
    data: bytes | str,
    target_type: type[T] | None = None,
    codec: OptionCodec | None = None,
) -> Option[T]:
    return (codec or get_default_codec()).decode(data, target_type)


__all__ = [
    "EMPTY_PAYLOADS",
    "NULL_PAYLOAD",
    "OptionCodec",
    "decode",
    "encode",
    "get_default_codec",
    "is_empty_payload",
    "set_default_codec",
]
