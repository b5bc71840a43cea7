"""
Export the composite texture and its tileset descriptor.

One call is one export round trip: pick a directory, encode, write two
files concurrently, and notify once per file. A failed write is
reported on its own and never cancels, retries or rolls back the other.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import atlas_composer.image_io as ac_image_io
from atlas_composer.constants import JSON_ENCODING
from atlas_composer.image_grid.naming import atlas_output_paths
from atlas_composer.logging_utils import logger
from atlas_composer.runtime.output import write_bytes
from atlas_composer.tileset import descriptor_to_json

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from atlas_composer.composer import AtlasComposer
    from atlas_composer.type_defs import NotificationLevel, StrPath

    DirectoryChooser = Callable[[], StrPath | None]
    FileWriter = Callable[[Path, bytes], None]
    Notifier = Callable[["Notification"], None]

__all__ = [
    "ExportReport",
    "FileOutcome",
    "Notification",
    "export_atlas",
    "log_notification",
]


@dataclass(frozen=True, slots=True)
class Notification:
    """A short user-facing message about one exported file."""

    level: NotificationLevel
    message: str


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of writing one file."""

    path: Path
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the file was written."""
        return self.error is None


@dataclass(frozen=True, slots=True)
class ExportReport:
    """Directory used and per-file outcomes (texture first)."""

    directory: Path
    outcomes: tuple[FileOutcome, ...]

    @property
    def ok(self) -> bool:
        """True when every file was written."""
        return all(outcome.ok for outcome in self.outcomes)


def log_notification(note: Notification) -> None:
    """Default notifier: successes at INFO, errors at ERROR."""
    if note.level == "success":
        logger.info("%s", note.message)
    else:
        logger.error("%s", note.message)


def _write_one(
    path: Path,
    payload: Callable[[], bytes],
    writer: FileWriter,
) -> None:
    """Build the payload and hand it to ``writer``."""
    writer(path, payload())


def export_atlas(
    composer: AtlasComposer,
    *,
    choose_directory: DirectoryChooser,
    writer: FileWriter = write_bytes,
    notify: Notifier = log_notification,
) -> ExportReport | None:
    """
    Write ``<name>_texture.png`` and ``<name>_tileset.json``.

    Returns ``None`` without writing anything when ``choose_directory``
    is cancelled (returns ``None`` or an empty string). Encoding errors
    count as a failed texture write; the descriptor is still written.
    """
    chosen = choose_directory()
    if not chosen:
        logger.debug("Export cancelled: no directory chosen")
        return None

    directory = Path(chosen)
    texture_path, tileset_path = atlas_output_paths(
        composer.base_name, directory,
    )
    composite = composer.render()
    descriptor = composer.descriptor()

    jobs: list[tuple[Path, Callable[[], bytes]]] = [
        (texture_path, lambda: ac_image_io.encode_png(composite)),
        (tileset_path,
         lambda: descriptor_to_json(descriptor).encode(JSON_ENCODING)),
    ]

    outcomes: list[FileOutcome] = []
    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        futures = [
            pool.submit(_write_one, path, payload, writer)
            for path, payload in jobs
        ]
        for (path, _), future in zip(jobs, futures, strict=True):
            try:
                future.result()
            except (OSError, ValueError) as exc:
                logger.debug("Writing %s failed: %s", path, exc)
                outcomes.append(FileOutcome(path, str(exc)))
                notify(Notification("error", f"Error: {path.name}"))
            else:
                outcomes.append(FileOutcome(path))
                notify(Notification("success", f"File created: {path.name}"))

    return ExportReport(directory=directory, outcomes=tuple(outcomes))
