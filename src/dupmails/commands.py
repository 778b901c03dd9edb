"""
Unified command orchestrator for duplicate mail detection.
This is the single place where the walker, the fingerprinting strategy,
the duplicate index and the remover are wired together.
"""
from typing import List, Optional, Callable, Tuple
from dupmails.core.models import DeduplicationParams, DuplicateIndex, RunStatistics
from dupmails.core.fingerprint import create_fingerprinter
from dupmails.core.scanner import MaildirWalkerImpl
from dupmails.services.duplicate_service import DuplicateService


class DeduplicationCommand:
    """
    Orchestrates one run:
    1. Build the fingerprinting strategy for the selected mode
    2. Walk the Maildir into a fresh DuplicateIndex
    3. Optionally remove all duplicates but the first of each group

    Usage:
        params = DeduplicationParams(root_dir="~/Maildir", mode=FingerprintMode.MESSAGE_ID)
        command = DeduplicationCommand()
        index, stats = command.execute(params)
        if params.force:
            command.remove_duplicates()
    """

    def __init__(self):
        self._index: Optional[DuplicateIndex] = None
        self._stats: Optional[RunStatistics] = None

    def execute(
            self,
            params: DeduplicationParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[DuplicateIndex, RunStatistics]:
        """
        Scan the Maildir with the given parameters.

        Args:
            params: Validated run parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (duplicate_index, statistics)

        Raises:
            MaildirAccessError: If a directory or mail file cannot be read
        """
        self._index = DuplicateIndex()
        self._stats = RunStatistics()

        walker = MaildirWalkerImpl(
            root_dir=params.root_dir,
            fingerprinter=create_fingerprinter(params.mode, params.hash_algorithm),
            index=self._index,
            stats=self._stats,
            progress_callback=progress_callback
        )
        walker.walk()

        return self._index, self._stats

    def remove_duplicates(self) -> List[str]:
        """
        Delete every duplicate found by the last execute() call.

        Raises:
            RuntimeError: If execute() has not been called yet
            MaildirAccessError: If a file cannot be removed
        """
        if self._index is None:
            raise RuntimeError("Nothing to remove: execute() must run first")
        return DuplicateService.remove_duplicates(self._index, self._stats)

    def report(self) -> List[str]:
        """Report lines for the last execute() call."""
        if self._index is None:
            return []
        return DuplicateService.format_report(self._index)
