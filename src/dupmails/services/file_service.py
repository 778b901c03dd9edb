"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

Based on dup_mails.pl, Copyright (c) 2016 Kurt Kanzenbach <kurt@kmk-computers.de>
Redistributed under the BSD 2-clause license, see LICENSE

services/file_service.py
File operations used when removing duplicate mails.
Removal is permanent: mails are unlinked, not moved to a trash can.
"""
import os
import logging

from dupmails.core.exceptions import MaildirAccessError

logger = logging.getLogger(__name__)


class FileService:
    """
    File removal with strict failure semantics.
    """

    @staticmethod
    def remove_file(file_path: str) -> None:
        """Permanently removes a file. Raises MaildirAccessError on any failure."""
        try:
            os.remove(file_path)
        except OSError as e:
            raise MaildirAccessError.from_os_error("Failed to remove file", file_path, e) from e
        logger.debug(f"Unlinked {file_path}")
