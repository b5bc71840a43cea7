"""
Defines shared type aliases for the atlas composer.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

NotificationLevel = Literal["success", "error"]
StrPath = str | Path


@dataclass(frozen=True, slots=True)
class LoadedImage:
    """A decoded image and the file it came from."""

    source: Path
    image: Image.Image

    @property
    def size(self) -> tuple[int, int]:
        """Return (width, height) of the decoded bitmap."""
        return self.image.size


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """A file that could not be decoded and the reason."""

    source: Path
    reason: str
