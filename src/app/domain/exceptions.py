class TaskValidationError(Exception):
    """Raised when a task creation request fails validation."""

    def __init__(self, message: str = "Title is required") -> None:
        super().__init__(message)
        self.message = message


class TaskCreationError(Exception):
    """Raised when a task creation request body cannot be parsed."""

    def __init__(self, message: str = "Failed to create task") -> None:
        super().__init__(message)
        self.message = message


class IdentityProviderError(Exception):
    """Raised when the identity provider cannot resolve the current user."""

    def __init__(self, provider: str, reason: str) -> None:
        super().__init__(f"Identity provider '{provider}' failed: {reason}")
        self.provider = provider
        self.reason = reason
