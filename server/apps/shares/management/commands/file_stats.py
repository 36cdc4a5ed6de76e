"""Management command to report committed file statistics."""

import logging
from typing import Any, final, override

from django.core.management.base import BaseCommand

from server.apps.shares.logic.link_operations import get_stats

logger = logging.getLogger(__name__)


@final
class Command(BaseCommand):
    """Print the number of files that have a share link."""

    help = 'Show how many files have been finalized'

    @override
    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the command.

        Args:
            args: Positional arguments (unused).
            options: Command options (unused).
        """
        stats = get_stats()
        logger.debug('File stats requested: %d files', stats.total_files)
        self.stdout.write(
            self.style.SUCCESS(f'Total files: {stats.total_files}'),
        )
