"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

Based on dup_mails.pl, Copyright (c) 2016 Kurt Kanzenbach <kurt@kmk-computers.de>
Redistributed under the BSD 2-clause license, see LICENSE

core/fingerprint.py
Fingerprinting strategies: turn one mail file into the key used by the duplicate index.

BodyFingerprinter       : hash of everything after the header block (exact match)
MessageIdFingerprinter  : text inside the angle brackets of the first Message-ID line
"""

import re
import logging
from typing import Optional

from dupmails.core.interfaces import Fingerprinter, HashAlgorithm
from dupmails.core.hasher import get_hash_algorithm, DEFAULT_HASH_ALGORITHM
from dupmails.core.models import FingerprintMode

logger = logging.getLogger(__name__)

_BLANK_LINES = (b"\n", b"\r\n")
_MESSAGE_ID_PATTERN = re.compile(rb"^Message-ID:\s*<(.*?)>$", re.IGNORECASE)


class BodyFingerprinter(Fingerprinter):
    """
    Skips the header block and hashes the remaining bytes as one blob.

    The header block ends at the first pair of consecutive blank lines
    ("\\n" or "\\r\\n"). If the file has no such pair the body is empty,
    so all such files share the digest of b"".
    """

    def __init__(self, algorithm: HashAlgorithm = None):
        self.algorithm = algorithm or get_hash_algorithm(DEFAULT_HASH_ALGORITHM)

    def fingerprint(self, path: str) -> Optional[str]:
        with open(path, "rb") as f:
            self._skip_header(f)
            body = f.read()
        key = self.algorithm.hash(body).hex()
        logger.debug(f"Body fingerprint of {path}: {key} ({len(body)} bytes)")
        return key

    @staticmethod
    def _skip_header(f) -> None:
        """Advance f past the first two consecutive blank lines, or to EOF."""
        previous = b""
        for line in iter(f.readline, b""):
            if line in _BLANK_LINES and previous in _BLANK_LINES:
                return
            previous = line


class MessageIdFingerprinter(Fingerprinter):
    """
    Extracts the Message-ID value from the first matching line of the file.

    The whole file is scanned top-down, there is no header boundary check.
    The header name is matched case-insensitively; the value is returned as written.
    """

    def fingerprint(self, path: str) -> Optional[str]:
        with open(path, "rb") as f:
            for line in f:
                message_id = self.parse_line(line)
                if message_id is not None:
                    logger.debug(f"Message-ID of {path}: {message_id}")
                    return message_id

        logger.debug(f"No Message-ID header in {path}")
        return None

    @staticmethod
    def parse_line(line: bytes) -> Optional[str]:
        """Return the Message-ID value if line is a Message-ID header, else None."""
        match = _MESSAGE_ID_PATTERN.match(line.rstrip(b"\r\n"))
        if match is None:
            return None
        return match.group(1).decode("utf-8", errors="surrogateescape")


def create_fingerprinter(
        mode: FingerprintMode,
        hash_algorithm: str = DEFAULT_HASH_ALGORITHM
) -> Fingerprinter:
    """Build the fingerprinting strategy for the selected mode."""
    if mode is FingerprintMode.BODY:
        return BodyFingerprinter(get_hash_algorithm(hash_algorithm))
    if mode is FingerprintMode.MESSAGE_ID:
        return MessageIdFingerprinter()
    raise ValueError(f"Unsupported fingerprint mode: {mode!r}")
