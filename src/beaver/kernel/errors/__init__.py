"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError       (application.py)
    │   └── ConfigError        (beaver.config.validation)
    │       ├── InvalidSinkError
    │       └── LogFileError
    └── InfrastructureError    (infrastructure.py)
        ├── SerializationError
        └── ExternalServiceError
"""

from beaver.kernel.errors.application import ApplicationError
from beaver.kernel.errors.base import BaseError
from beaver.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ExternalServiceError",
    "InfrastructureError",
    "SerializationError",
]
