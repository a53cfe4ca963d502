"""Typed exceptions for mask handling and run configuration."""


class MaskToolsError(ValueError):
    """Base class for package errors."""


class ConfigurationError(MaskToolsError):
    """Raised when a run is configured with unusable parameters."""


class ChunkSizeError(ConfigurationError):
    """Raised when a chunk or token size is not a positive integer."""


class ClassSpecError(ConfigurationError):
    """Raised when a class specification contains unknown flags."""


class InvalidMaskError(MaskToolsError):
    """Raised when a string is not a well formed mask."""
