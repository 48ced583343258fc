from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KataError(Exception):
    """Base error envelope shared by every kata and the CLI."""

    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.file:
            parts.append(self.file)
        if self.path:
            parts.append(self.path)
        loc = ":".join(parts) if parts else "<kata>"
        return f"{loc}: {self.code}: {self.message}"


class KataLoadError(KataError):
    pass


class KataValidationError(KataError):
    pass


class MalformedBracesError(KataValidationError):
    pass


class SelectorError(KataValidationError):
    pass


class DuplicateSingletonError(SelectorError):
    pass


class OutOfOrderError(SelectorError):
    pass


class InvalidCombinatorError(SelectorError):
    pass
