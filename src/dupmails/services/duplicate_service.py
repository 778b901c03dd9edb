import logging
from typing import List, Callable, Optional

from dupmails.core.models import DuplicateIndex, RunStatistics
from dupmails.services.file_service import FileService

logger = logging.getLogger(__name__)


class DuplicateService:
    @staticmethod
    def files_to_remove(index: DuplicateIndex) -> List[str]:
        """
        Lists every file that removal would delete: all members of each
        duplicate group except the first-discovered one.
        """
        files_to_delete = []
        for group in index.duplicate_groups():
            files_to_delete.extend(group.duplicates)
        return files_to_delete

    @staticmethod
    def remove_duplicates(
            index: DuplicateIndex,
            stats: RunStatistics,
            remove_func: Optional[Callable[[str], None]] = None
    ) -> List[str]:
        """
        Keeps the first file of every duplicate group and deletes the rest.

        Args:
            index: Completed duplicate index (read-only here).
            stats: duplicates_removed is incremented once per deleted file.
            remove_func: Deletion primitive, FileService.remove_file by default.

        Returns:
            Paths that were deleted, in deletion order.

        Raises:
            MaildirAccessError: On the first failed deletion; files removed
                before the failure stay removed.
        """
        remove_func = remove_func or FileService.remove_file
        removed = []
        for path in DuplicateService.files_to_remove(index):
            remove_func(path)
            stats.duplicates_removed += 1
            removed.append(path)
            logger.info(f"Removed mail '{path}'")
        return removed

    @staticmethod
    def format_report(index: DuplicateIndex) -> List[str]:
        """One line per duplicate group: original first, then its copies."""
        return [
            "Duplicates: " + " ".join(group.paths)
            for group in index.duplicate_groups()
        ]
