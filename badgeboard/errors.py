"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Validation failed."):
        """Initialize the error."""
        super().__init__(message, 400)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Resource not found."):
        """Initialize the error."""
        super().__init__(message, 404)


class PersistenceError(AppError):
    """Raised when the badge collection cannot be written to disk."""

    def __init__(self, message="Failed to save badges."):
        """Initialize the error."""
        super().__init__(message, 500)


class UploadError(AppError):
    """Raised when the image host rejects or fails an upload."""

    def __init__(self, message="Failed to upload image."):
        """Initialize the error."""
        super().__init__(message, 500)
