# renderer/exceptions.py


class GradientError(Exception):
    def __init__(self, *args):
        super().__init__(*args)


class ConfigurationError(GradientError):
    """Raised when a render configuration file cannot be read or validated."""
    message: str

    def __init__(self, message: str, *args):
        super().__init__(message, *args)
        self.message = message


class ImageWriteError(GradientError):
    """Raised when a pixel buffer cannot be encoded or written to disk."""
    path: str
    message: str

    def __init__(self, path: str, message: str, *args):
        super().__init__(f"Failed to write {path}: {message}", *args)
        self.path = path
        self.message = message
