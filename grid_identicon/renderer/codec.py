"""Canvas encoding and output.

Pillow does the actual PNG / JPEG / GIF encoding; this module only maps
format names, wraps encoder errors and writes files atomically. Output is
encoded fully in memory first, then written to a temporary sibling file
that is renamed into place, so a failed write never leaves a partial file.
"""

import base64
import io
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from PIL import Image

from grid_identicon.errors import EncodingFailure, InvalidInput, IOFailure
from grid_identicon.renderer.raster import Canvas
from grid_identicon.types import ImageFormat
from grid_identicon.utils.logging import get_logger

LOGGER = get_logger(__name__)

JPEG_QUALITY = 95

FORMAT_ALIASES: Dict[str, ImageFormat] = {
    "png": ImageFormat.PNG,
    "jpeg": ImageFormat.JPEG,
    "jpg": ImageFormat.JPEG,
    "gif": ImageFormat.GIF,
}

PIL_FORMAT_NAMES: Dict[ImageFormat, str] = {
    ImageFormat.PNG: "PNG",
    ImageFormat.JPEG: "JPEG",
    ImageFormat.GIF: "GIF",
}


def parse_format(name: Union[str, ImageFormat]) -> ImageFormat:
    """Resolve an encoding name (case-insensitive, ``jpg`` allowed)."""
    if isinstance(name, ImageFormat):
        return name
    fmt = FORMAT_ALIASES.get(name.strip().lower())
    if fmt is None:
        choices = ", ".join(sorted(FORMAT_ALIASES))
        raise InvalidInput(f"Unknown image format {name!r}; expected one of {choices}")
    return fmt


def format_from_path(path: Union[str, Path]) -> ImageFormat:
    """Infer the encoding from the file extension of ``path``."""
    suffix = Path(path).suffix
    if not suffix:
        raise InvalidInput(f"Cannot infer image format: {str(path)!r} has no extension")
    return parse_format(suffix[1:])


def _save_kwargs(fmt: ImageFormat) -> Dict[str, object]:
    if fmt is ImageFormat.JPEG:
        return {"quality": JPEG_QUALITY}
    return {}


def encode(canvas: Canvas, fmt: Union[str, ImageFormat] = ImageFormat.PNG) -> bytes:
    """Encode ``canvas`` into ``fmt`` and return the raw file bytes.

    Raises:
        InvalidInput: If ``fmt`` is not a supported format name.
        EncodingFailure: If Pillow rejects the canvas.
    """
    fmt = parse_format(fmt)
    image: Image.Image = canvas.to_image()
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=PIL_FORMAT_NAMES[fmt], **_save_kwargs(fmt))
    except (OSError, ValueError) as e:
        raise EncodingFailure(f"Failed to encode canvas as {fmt}: {e}") from e
    data = buffer.getvalue()
    LOGGER.debug(
        "Encoded %dx%d canvas as %s (%d bytes)",
        canvas.width,
        canvas.height,
        fmt,
        len(data),
    )
    return data


def to_base64(data: bytes) -> str:
    """Standard Base64 (RFC 4648 alphabet, padded, no line breaks)."""
    return base64.b64encode(data).decode("ascii")


def _new_file_mode() -> int:
    """Mode a plain ``open(path, "wb")`` would create under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_bytes_atomic(data: bytes, path: Union[str, Path]) -> Path:
    """Write ``data`` to ``path`` via a temporary file and rename.

    Raises:
        IOFailure: If any step fails; the temporary file is removed.
    """
    target = Path(path)
    tmp_name: Optional[str] = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        # mkstemp creates 0600 files; match regular file creation instead
        os.chmod(tmp_name, _new_file_mode())
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise IOFailure(f"Failed to write {target}: {e}") from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    return target


def write_image(
    canvas: Canvas,
    path: Union[str, Path],
    fmt: Optional[Union[str, ImageFormat]] = None,
) -> Path:
    """Encode ``canvas`` and write it to ``path``.

    The format defaults to the one implied by the file extension. Format
    errors are raised before anything touches the filesystem.
    """
    resolved = format_from_path(path) if fmt is None else parse_format(fmt)
    data = encode(canvas, resolved)
    target = write_bytes_atomic(data, path)
    LOGGER.debug("Wrote %s identicon to %s", resolved, target)
    return target


__all__ = [
    "JPEG_QUALITY",
    "parse_format",
    "format_from_path",
    "encode",
    "to_base64",
    "write_bytes_atomic",
    "write_image",
]
