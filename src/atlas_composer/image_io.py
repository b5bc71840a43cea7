"""Image decoding and PNG encoding for the atlas composer."""
from __future__ import annotations

import io
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from atlas_composer.config_defaults import DEFAULT_DECODE_WORKERS
from atlas_composer.constants import COLOR_MODE_RGBA, PNG_FORMAT
from atlas_composer.logging_utils import logger
from atlas_composer.type_defs import DecodeFailure, LoadedImage

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from atlas_composer.type_defs import StrPath


@dataclass
class DecodeResult:
    """Outcome of decoding one batch of files, in input order."""

    images: list[LoadedImage] = field(default_factory=list)
    failures: list[DecodeFailure] = field(default_factory=list)


def load_image(path: StrPath) -> Image.Image:
    """
    Load an image from a file path and convert to RGBA.

    The returned image is fully decoded and no longer tied to the file.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in RGBA mode

    Raises:
        FileNotFoundError: If the image file does not exist
        OSError: If the image cannot be opened or decoded, or exceeds
            Pillow's decompression bomb limit

    """
    try:
        with Image.open(path) as img:
            return img.convert(COLOR_MODE_RGBA)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except Image.DecompressionBombError as e:
        msg = f"Image too large to load '{path}': {e!s}"
        raise OSError(msg) from e
    except OSError as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e


def decode_images(
    paths: Sequence[StrPath],
    *,
    max_workers: int | None = None,
) -> DecodeResult:
    """
    Decode a batch of files concurrently and join before returning.

    Results keep the order of ``paths`` regardless of which decode
    finishes first. A file that fails to decode is dropped from the
    batch and reported in ``failures``.
    """
    result = DecodeResult()
    if not paths:
        return result

    sources = [Path(p) for p in paths]
    workers = max_workers or min(DEFAULT_DECODE_WORKERS, len(sources))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(load_image, src) for src in sources]

        for src, future in zip(sources, futures, strict=True):
            try:
                img = future.result()
            except OSError as exc:
                logger.warning("Skipping %s: %s", src, exc)
                result.failures.append(DecodeFailure(src, str(exc)))
                continue
            result.images.append(LoadedImage(source=src, image=img))

    logger.debug(
        "Decoded %d of %d images", len(result.images), len(sources),
    )
    return result


def encode_png(img: Image.Image) -> bytes:
    """Encode ``img`` to PNG bytes; an empty image cannot be encoded."""
    if img.width == 0 or img.height == 0:
        msg = f"Cannot encode an empty {img.width}x{img.height} image"
        raise ValueError(msg)
    buffer = io.BytesIO()
    img.save(buffer, format=PNG_FORMAT)
    return buffer.getvalue()
