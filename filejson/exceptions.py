"""
filejson.exceptions - Custom exception classes.

I/O, parse and encoding failures surface as the builtin exceptions raised by
the file system and the json module. Only configuration problems get a
filejson-specific type.
"""


class FileJSONError(Exception):
    """Base exception for all filejson errors."""

    pass


class ConfigError(FileJSONError):
    """Configuration loading or validation error."""

    def __init__(self, path: object, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")
