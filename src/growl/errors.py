from typing import List, Optional


class GrowlError(Exception):
    """Base class for every fatal growl condition."""
    pass

class ConfigError(GrowlError):
    """Raised when growl.yaml is missing, malformed, or already exists on init."""
    pass

class CommandError(GrowlError):
    """Raised when a command cannot be resolved or its subprocess fails."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode

class CommandNotFoundError(CommandError):
    """Raised when the requested name is not defined in growl.yaml."""
    pass

class MissingArgumentError(CommandError):
    """Raised when a command line still holds %N placeholders after substitution."""

    def __init__(self, missing: List[str]):
        super().__init__(f"Missing argument(s): {', '.join(missing)}")
        self.missing = missing
