"""Infrastructure errors — encoding and decoding failures."""

from __future__ import annotations

from typing import Any

from causal_option.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O or codec failure that is not an absence cause."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to encode or decode an option payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type
        if payload_type is not None:
            self.detail.setdefault("payload_type", payload_type)


__all__ = ["InfrastructureError", "SerializationError"]
