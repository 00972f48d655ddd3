"""Rendering subpackage.

Turns immutable :class:`~grid_identicon.pattern.IdenticonDescriptor` values
into pixels and encoded images:

* :mod:`grid_identicon.renderer.raster` paints the grid onto a NumPy canvas.
* :mod:`grid_identicon.renderer.codec` hands the canvas to Pillow and
  writes or Base64-encodes the result.
"""

from grid_identicon.renderer.raster import Canvas, rasterize
from grid_identicon.renderer.codec import (
    encode,
    format_from_path,
    parse_format,
    to_base64,
    write_image,
)

__all__ = [
    "Canvas",
    "rasterize",
    "encode",
    "format_from_path",
    "parse_format",
    "to_base64",
    "write_image",
]
