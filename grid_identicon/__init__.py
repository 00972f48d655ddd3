"""Deterministic 5x5 identicon generator.

An integer identifier is hashed (MD5 over its decimal string), the digest is
turned into an :class:`~grid_identicon.pattern.IdenticonDescriptor` (a color
plus a left-right symmetric occupancy grid), and the descriptor is
rasterized into a :class:`~grid_identicon.renderer.raster.Canvas` that
Pillow encodes as PNG, JPEG or GIF.

Examples
--------
>>> from grid_identicon import IdenticonRenderer, LayoutConfig
>>> renderer = IdenticonRenderer(LayoutConfig(cell_size=50, margin=2))
>>> renderer.canvas(21012146).width
450
"""

from grid_identicon.errors import (
    EncodingFailure,
    IdenticonError,
    InvalidConfig,
    InvalidInput,
    IOFailure,
)
from grid_identicon.hasher import hash_identifier, parse_identifier
from grid_identicon.layout import LayoutConfig
from grid_identicon.pattern import IdenticonDescriptor, derive
from grid_identicon.pipeline import IdenticonRenderer, describe, generate
from grid_identicon.renderer import Canvas, encode, rasterize, to_base64, write_image
from grid_identicon.types import ImageFormat

__version__ = "0.1.0"

__all__ = [
    "EncodingFailure",
    "IdenticonError",
    "InvalidConfig",
    "InvalidInput",
    "IOFailure",
    "hash_identifier",
    "parse_identifier",
    "LayoutConfig",
    "IdenticonDescriptor",
    "derive",
    "IdenticonRenderer",
    "describe",
    "generate",
    "Canvas",
    "encode",
    "rasterize",
    "to_base64",
    "write_image",
    "ImageFormat",
]
