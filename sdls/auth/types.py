"""Typed values for authentication."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Username and password for a single run. Never persisted."""

    username: str
    password: str = field(repr=False)

    @property
    def complete(self) -> bool:
        return bool(self.username.strip()) and bool(self.password.strip())
