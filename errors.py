# errors.py


class ImageLoadError(Exception):
    """Raised when a source image cannot be read or decoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not load image '{path}': {reason}")
        self.path = path
        self.reason = reason
