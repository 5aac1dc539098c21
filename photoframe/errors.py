# errors.py


class PhotoFrameError(Exception):
    """Base class for everything the compositing core raises."""


class DecodeError(PhotoFrameError):
    """Image bytes could not be decoded (malformed, unsupported, or too large)."""


class DegenerateGeometryError(PhotoFrameError, ValueError):
    """A source image or frame with zero area was handed to the geometry code."""


class InvalidShapeKind(PhotoFrameError, ValueError):
    """Unknown shape identifier. Callers going through ShapeKind.parse never see this."""
