from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class MalformedTypeError(DomainError, ValueError):
    """Type string does not have the expected on-chain shape."""


class PoolObjectMissingError(DomainError):
    """A trading pair points at a pool object the node did not return."""
