"""Database models for shares app."""

from typing import ClassVar, Final, final, override

from django.db import models

LINK_PATH_PREFIX: Final = '/f/'


@final
class FileRecord(models.Model):
    """Committed metadata for a file uploaded to object storage.

    A record exists only after a successful finalize. The slug is the
    public identifier used in share links; the object name is the
    storage key of the uploaded bytes. Both are unique and never
    change once the record is created.

    Text columns are unbounded: slugs and object names come from
    clients and content types come from storage as-is.
    """

    slug = models.TextField(
        primary_key=True,
        help_text='Public identifier used in /f/<slug> links',
    )

    object_name = models.TextField(
        unique=True,
        help_text='Storage key of the uploaded object',
    )

    size_bytes = models.BigIntegerField(
        help_text='Object size in bytes, captured at finalize time',
    )

    content_type = models.TextField(
        null=True,
        blank=True,
        help_text='Content type reported by storage, if any',
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'File Record'  # type: ignore[mutable-override]
        verbose_name_plural = 'File Records'  # type: ignore[mutable-override]
        ordering: ClassVar[list[str]] = ['-created_at']

        indexes: ClassVar[list[models.Index]] = [
            # Optimize recent files queries
            models.Index(
                fields=['-created_at'],
                name='shares_created_at_idx',
            ),
        ]

        constraints: ClassVar[list[models.BaseConstraint]] = [
            models.CheckConstraint(
                condition=models.Q(size_bytes__gte=0),
                name='size_bytes_non_negative',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.slug}:{self.object_name}'

    @property
    def link_path(self) -> str:
        """Public link path for this file.

        Returns:
            Path in the form '/f/<slug>'.
        """
        return f'{LINK_PATH_PREFIX}{self.slug}'
