"""End-to-end generation: identifier -> digest -> descriptor -> canvas.

Every stage is a pure function, so the helpers here hold no state beyond
the layout an :class:`IdenticonRenderer` is configured with. Input and
layout are validated before any raster work starts.
"""

from pathlib import Path
from typing import Optional, Union

from PIL import Image

from grid_identicon.hasher import hash_identifier
from grid_identicon.layout import LayoutConfig
from grid_identicon.pattern import IdenticonDescriptor, derive
from grid_identicon.renderer.codec import (
    encode,
    format_from_path,
    parse_format,
    to_base64,
    write_image,
)
from grid_identicon.renderer.raster import Canvas, rasterize
from grid_identicon.types import ImageFormat

IdentifierLike = Union[int, str]
FormatLike = Union[str, ImageFormat]


def describe(identifier: IdentifierLike) -> IdenticonDescriptor:
    """Return the descriptor for ``identifier``."""
    return derive(hash_identifier(identifier))


def generate(
    identifier: IdentifierLike, layout: Optional[LayoutConfig] = None
) -> Canvas:
    """Return the rasterized identicon for ``identifier``."""
    return rasterize(describe(identifier), layout)


class IdenticonRenderer:
    """Convenience wrapper binding a :class:`LayoutConfig` to the pipeline."""

    layout: LayoutConfig

    def __init__(self, layout: Optional[LayoutConfig] = None):
        self.layout = layout or LayoutConfig()

    def canvas(self, identifier: IdentifierLike) -> Canvas:
        return generate(identifier, self.layout)

    def image(self, identifier: IdentifierLike) -> Image.Image:
        return self.canvas(identifier).to_image()

    def encode(
        self, identifier: IdentifierLike, fmt: FormatLike = ImageFormat.PNG
    ) -> bytes:
        resolved = parse_format(fmt)
        return encode(self.canvas(identifier), resolved)

    def base64(
        self, identifier: IdentifierLike, fmt: FormatLike = ImageFormat.PNG
    ) -> str:
        """Base64 text of the encoded image, as printed by ``encode`` mode."""
        return to_base64(self.encode(identifier, fmt))

    def render(
        self,
        identifier: IdentifierLike,
        path: Union[str, Path],
        fmt: Optional[FormatLike] = None,
    ) -> Path:
        """Write the identicon to ``path`` (format from extension by default)."""
        resolved = format_from_path(path) if fmt is None else parse_format(fmt)
        return write_image(self.canvas(identifier), path, resolved)


__all__ = ["describe", "generate", "IdenticonRenderer"]
