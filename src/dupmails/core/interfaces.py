"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

Based on dup_mails.pl, Copyright (c) 2016 Kurt Kanzenbach <kurt@kmk-computers.de>
Redistributed under the BSD 2-clause license, see LICENSE

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate mail finder.

Key Components:
---------------
- HashAlgorithm: Standardized interface for hash functions (e.g., SHA-1, xxHash).
- Fingerprinter: Interface for turning one mail file into a fingerprint key.
- MaildirWalker: Interface for traversing a Maildir and feeding the duplicate index.
"""

from typing import Protocol, Optional


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-1 or xxHash
    without affecting the rest of the detection logic.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the hash of the provided byte data."""
        ...


class Fingerprinter(Protocol):
    """
    Interface for fingerprinting strategies.

    Selected once per run and injected into the walker.
    """
    def fingerprint(self, path: str) -> Optional[str]:
        """
        Compute the fingerprint key of a mail file.

        Args:
            path: Path of the mail file.

        Returns:
            The key, or None if this strategy cannot extract one from the file.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        ...


class MaildirWalker(Protocol):
    """
    Interface for traversing a Maildir tree.
    """
    def walk(self) -> None:
        """
        Visit every non-hidden regular file under the root exactly once,
        recording its fingerprint in the duplicate index.

        Raises:
            MaildirAccessError: If a directory or file cannot be read.
        """
        ...
