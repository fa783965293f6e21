"""Caller identity as seen by the domain."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class Identity:
    """The authenticated subject making a request."""

    id: UUID
    email: str = ""
