"""Application-layer errors – misuse of the toolkit by its caller."""

from __future__ import annotations

from beaver.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """The caller asked for something the toolkit cannot do."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
