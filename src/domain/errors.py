"""Domain error taxonomy."""

from __future__ import annotations


class ValidationError(Exception):
    """Caller-supplied data violates domain constraints.

    ``errors`` holds every human-readable reason, not just the first one.
    """

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class StoreError(Exception):
    """The record store could not complete an operation."""
