"""
Error types raised by repositories and services.

The HTTP layer (`api/main.py`) is the only place that turns these into status
codes; everything below it lets them propagate unchanged.
"""

from __future__ import annotations


class PortierError(RuntimeError):
    pass


class ValidationError(PortierError):
    """Bad input: gender string, pagination or path parameter, request body."""


class QueryError(PortierError):
    """Any database failure."""


class NotFoundError(QueryError):
    """A get-by-id lookup returned zero rows."""

    def __init__(self, resource: str, resource_id: int) -> None:
        super().__init__(f"{resource} {resource_id} not found.")
        self.resource = resource
        self.resource_id = resource_id


class DependencyMissingError(PortierError):
    """A create needed a parent row (tenant, key) but none exists."""
