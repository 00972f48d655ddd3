"""RGB helpers: validation and ``"r,g,b"`` parsing for the CLI."""

import re
from typing import Sequence

from grid_identicon.errors import InvalidConfig
from grid_identicon.types import RGB

RGB_MAX = 255
COLOR_DELIMITER = ","

_COMPONENT_RE = re.compile(r"[0-9]{1,3}")


def validate_rgb(color: Sequence[int], name: str = "color") -> RGB:
    """Return ``color`` as an ``RGB`` tuple, checking arity and range."""
    if not isinstance(color, (tuple, list)) or len(color) != 3:
        raise InvalidConfig(f"{name} must be a sequence of 3 components, got {color!r}")
    for component in color:
        if isinstance(component, bool) or not isinstance(component, int):
            raise InvalidConfig(f"{name} components must be integers, got {color!r}")
        if not 0 <= component <= RGB_MAX:
            raise InvalidConfig(
                f"{name} components must be between 0 and {RGB_MAX}, got {color!r}"
            )
    r, g, b = color
    return (r, g, b)


def parse_rgb(text: str) -> RGB:
    """Parse ``"255,0,0"`` into ``(255, 0, 0)``."""
    parts = [part.strip() for part in text.split(COLOR_DELIMITER)]
    if len(parts) != 3 or not all(_COMPONENT_RE.fullmatch(part) for part in parts):
        raise InvalidConfig(f"Invalid color {text!r}, expected format R,G,B")
    return validate_rgb([int(part) for part in parts])


def format_rgb(color: RGB) -> str:
    return COLOR_DELIMITER.join(str(component) for component in color)


__all__ = ["RGB_MAX", "validate_rgb", "parse_rgb", "format_rgb"]
