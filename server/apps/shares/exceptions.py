"""Exceptions for shares app."""


class ShareError(Exception):
    """Base class for upload and link resolution failures."""


class ConfigurationError(ShareError):
    """Raised when the blob gateway is missing credentials or a bucket.

    Not retryable without operator action.
    """


class NotFoundInStorageError(ShareError):
    """Raised when no object exists under the given object name."""

    def __init__(self, object_name: str) -> None:
        """Initialize NotFoundInStorageError.

        Args:
            object_name: Storage key that was looked up.
        """
        self.object_name = object_name
        super().__init__(f'File not found in storage: {object_name}')


class PayloadTooLargeError(ShareError):
    """Raised when an uploaded object exceeds the size ceiling."""

    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        """Initialize PayloadTooLargeError.

        Args:
            size_bytes: Actual size of the stored object.
            max_bytes: Maximum allowed size.
        """
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(
            f'File size {size_bytes} bytes exceeds maximum allowed '
            f'size of {max_bytes} bytes',
        )


class ConflictError(ShareError):
    """Raised when a slug or object name is already committed.

    Happens when two finalize calls race for the same slug. Retrying
    finalize is safe and returns the committed record.
    """


class LinkNotFoundError(ShareError):
    """Raised when no file record exists for a slug."""

    def __init__(self, slug: str) -> None:
        """Initialize LinkNotFoundError.

        Args:
            slug: Public identifier that was looked up.
        """
        self.slug = slug
        super().__init__(f'File with slug {slug} not found')
