"""Exceptions raised while building HTML trees."""


class InvalidTagError(ValueError):
    """Raised when an element is created with an empty or malformed tag name."""


class UnsupportedListTypeError(ValueError):
    """Raised when a listing is requested for a tag other than ``ol``/``ul``."""


class UnimplementedFeatureError(NotImplementedError):
    pass


class UnknownMacroError(KeyError):
    pass


class ConfigurationError(Exception):
    """Raised when settings cannot be loaded or validated."""


__all__ = [
    "ConfigurationError",
    "InvalidTagError",
    "UnimplementedFeatureError",
    "UnknownMacroError",
    "UnsupportedListTypeError",
]
