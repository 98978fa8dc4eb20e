"""Custom exceptions for service and rendering operations."""


class AssetDownloadError(Exception):
    """Raised when downloading an external asset (e.g., image) fails."""


class DecodeError(Exception):
    """Raised when an image source cannot be fetched or decoded."""


class RenderError(Exception):
    """Raised when compositing fails (invalid image or surface geometry)."""


class ExportError(Exception):
    """Raised when an export cannot be produced (no image, render or encode failure)."""
