"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   ├── InvalidInputError
    │   │   └── InvalidKeyError
    │   └── MalformedEncodingError
    ├── ApplicationError       (application.py)
    └── InfrastructureError    (infrastructure.py)
        └── SerializationError

Business rejections (unknown tenant, invalid sign, handler error) are not
exceptions; see :class:`mics_hooks.application.dispatch.RejectReason`.
"""

from mics_hooks.kernel.errors.application import ApplicationError
from mics_hooks.kernel.errors.base import BaseError
from mics_hooks.kernel.errors.domain import (
    DomainError,
    InvalidInputError,
    InvalidKeyError,
    MalformedEncodingError,
)
from mics_hooks.kernel.errors.infrastructure import InfrastructureError, SerializationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidInputError",
    "InvalidKeyError",
    "MalformedEncodingError",
    "SerializationError",
]
