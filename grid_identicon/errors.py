"""Error hierarchy.

Every failure surfaced by the package derives from :class:`IdenticonError`
so callers (and the CLI) can catch a single base class. Input and config
errors also subclass ``ValueError``; write failures subclass ``OSError``.
"""


class IdenticonError(Exception):
    """Base class for all identicon generation errors."""


class InvalidInput(IdenticonError, ValueError):
    """Identifier, mode or encoding name is not acceptable."""


class InvalidConfig(IdenticonError, ValueError):
    """Layout parameters violate their constraints."""


class EncodingFailure(IdenticonError):
    """The image encoder rejected a canvas."""


class IOFailure(IdenticonError, OSError):
    """Writing the encoded image failed."""
