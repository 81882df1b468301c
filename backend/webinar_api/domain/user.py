"""User as seen by the webinars module: only the id is ever compared."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: str
    email: str | None = None
