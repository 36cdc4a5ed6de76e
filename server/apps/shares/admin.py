"""Django admin configuration for shares app."""

from typing import Final

from django.contrib import admin
from django.http import HttpRequest

from server.apps.shares.models import FileRecord

_KIB: Final = 1024


def _format_bytes(size_bytes: int) -> str:
    """Format bytes in human-readable format.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Formatted size string (e.g., '1.5 MB', '234 KB').
    """
    if size_bytes < _KIB:
        return f'{size_bytes} B'
    if size_bytes < _KIB ** 2:
        return f'{size_bytes / _KIB:.1f} KB'
    if size_bytes < _KIB ** 3:
        return f'{size_bytes / _KIB ** 2:.1f} MB'
    return f'{size_bytes / _KIB ** 3:.1f} GB'


@admin.register(FileRecord)
class FileRecordAdmin(admin.ModelAdmin[FileRecord]):
    """Read-only admin interface for committed file records.

    Records are created only by finalize and never change afterwards.
    """

    list_display = [
        'slug',
        'object_name',
        'size_display',
        'content_type',
        'created_at',
    ]

    list_filter = [
        'content_type',
        'created_at',
    ]

    search_fields = [
        'slug',
        'object_name',
    ]

    readonly_fields = [
        'slug',
        'object_name',
        'size_bytes',
        'content_type',
        'created_at',
    ]

    def size_display(self, obj: FileRecord) -> str:
        """Display file size in human-readable format.

        Args:
            obj: FileRecord instance.

        Returns:
            Formatted size string.
        """
        return _format_bytes(obj.size_bytes)
    size_display.short_description = 'Size'  # type: ignore[attr-defined]

    def has_add_permission(self, request: HttpRequest) -> bool:
        """Records are only created by finalize."""
        return False

    def has_delete_permission(
        self,
        request: HttpRequest,
        obj: FileRecord | None = None,
    ) -> bool:
        """Records have no delete path."""
        return False
