"""Infrastructure errors – I/O failures and remote services."""

from __future__ import annotations

from typing import Any

from beaver.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure outside the caller's control."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """A payload could not be encoded or decoded."""

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


class ExternalServiceError(InfrastructureError):
    """A remote HTTP service failed or answered with a non-2xx status."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["service"] = self.service
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        return payload


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "SerializationError",
]
