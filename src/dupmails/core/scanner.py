"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

Based on dup_mails.pl, Copyright (c) 2016 Kurt Kanzenbach <kurt@kmk-computers.de>
Redistributed under the BSD 2-clause license, see LICENSE

core/scanner.py
Recursive Maildir traversal feeding the duplicate index.
Features:
- Skips every entry whose name starts with a dot (., .., .Trash, .hidden, ...)
- Recurses into real directories, processes regular files, ignores anything else (symlinks included)
- Fails fast: an unreadable directory or mail file aborts the whole walk
"""

import os
import time
import logging
from typing import Optional, Callable

from dupmails.core.exceptions import MaildirAccessError
from dupmails.core.interfaces import MaildirWalker, Fingerprinter
from dupmails.core.models import DuplicateIndex, RunStatistics

logger = logging.getLogger(__name__)


class MaildirWalkerImpl(MaildirWalker):
    """
    Walks a Maildir tree and records the fingerprint of every mail file.

    Attributes:
        root_dir: Root directory to scan
        fingerprinter: Strategy producing the key for each file
        index: Duplicate index receiving (key, path) pairs
        stats: Counters for processed files and found duplicates
    """

    # Report progress every N files
    PROGRESS_INTERVAL = 1000

    def __init__(
        self,
        root_dir: str,
        fingerprinter: Fingerprinter,
        index: DuplicateIndex,
        stats: RunStatistics,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ):
        self.root_dir = root_dir
        self.fingerprinter = fingerprinter
        self.index = index
        self.stats = stats
        self.progress_callback = progress_callback

    def walk(self) -> None:
        logger.debug(f"Root directory: {self.root_dir}")

        if not os.path.exists(self.root_dir):
            raise MaildirAccessError("Failed to open directory", self.root_dir, "No such file or directory")
        if not os.path.isdir(self.root_dir):
            raise MaildirAccessError("Failed to open directory", self.root_dir, "Not a directory")

        start_time = time.time()
        self._walk_directory(self.root_dir)

        if self.progress_callback:
            self.progress_callback("scanning", self.stats.files_processed, None)

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. {self.stats.files_processed} mails processed, "
                     f"{self.stats.duplicates_found} duplicates found.")

    def _walk_directory(self, directory: str) -> None:
        logger.info(f"Processing directory '{directory}'...")

        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.name.startswith("."):
                        continue

                    if self._is_directory(entry):
                        self._walk_directory(entry.path)
                    elif self._is_regular_file(entry):
                        self._process_file(entry.path)
                    else:
                        logger.debug(f"Skipping special entry: {entry.path}")
        except OSError as e:
            # Covers opendir failures and read errors while iterating the directory
            raise MaildirAccessError.from_os_error("Failed to open directory", directory, e) from e

    def _process_file(self, path: str) -> None:
        try:
            key = self.fingerprinter.fingerprint(path)
        except OSError as e:
            raise MaildirAccessError.from_os_error("Failed to open file", path, e) from e

        if key is not None and self.index.record(key, path):
            self.stats.duplicates_found += 1
            logger.debug(f"Duplicate: {path} (key {key})")

        self.stats.files_processed += 1

        if self.progress_callback and self.stats.files_processed % self.PROGRESS_INTERVAL == 0:
            self.progress_callback("scanning", self.stats.files_processed, None)

    @staticmethod
    def _is_directory(entry: os.DirEntry) -> bool:
        # Symlinked directories are not followed, so the walk cannot loop
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError:
            return False

    @staticmethod
    def _is_regular_file(entry: os.DirEntry) -> bool:
        # Symlinks are never mail files, even when they point at one
        try:
            return entry.is_file(follow_symlinks=False)
        except OSError:
            return False
