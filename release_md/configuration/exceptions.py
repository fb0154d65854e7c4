"""Contains exceptions raised when validating configuration and hook input."""


class HookContextError(Exception):
    """Raised when a release hook receives a context it cannot validate."""

    def __init__(self, hook: str, errors: list) -> None:
        """Initializes the exception with the hook name and validation errors."""
        super().__init__(f"Invalid context passed to the {hook} hook")
        self.hook = hook
        self.errors = errors


class InvalidReleaseDateError(Exception):
    """Raised when a release date is not a valid ISO-8601 date."""

    pass


class InvalidTagFormatError(ValueError):
    """Raised when a tag format does not have exactly one {version} field."""

    pass
