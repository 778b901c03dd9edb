"""
Core duplicate mail engine: walker, fingerprinting strategies, hash algorithms and models.

This package contains the whole detection logic:
- MaildirWalkerImpl: recursive Maildir traversal that skips hidden entries
- BodyFingerprinter / MessageIdFingerprinter: the two fingerprinting strategies
- Sha1AlgorithmImpl + XXHashAlgorithmImpl: pluggable body hash algorithms
- Models: DuplicateGroup, DuplicateIndex, RunStatistics and run parameters

No terminal or argument-parsing code lives here; errors are raised, never turned into exit codes.
"""

from .exceptions import DupMailsError, MaildirAccessError
from .hasher import (
    Sha1AlgorithmImpl, XXHashAlgorithmImpl, HASH_ALGORITHMS, DEFAULT_HASH_ALGORITHM, get_hash_algorithm)
from .models import (
    FingerprintMode, RunAction, DuplicateGroup, DuplicateIndex, RunStatistics, DeduplicationParams)
from .fingerprint import BodyFingerprinter, MessageIdFingerprinter, create_fingerprinter
from .scanner import MaildirWalkerImpl

__all__ = [
    "DupMailsError",
    "MaildirAccessError",
    "Sha1AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "HASH_ALGORITHMS",
    "DEFAULT_HASH_ALGORITHM",
    "get_hash_algorithm",
    "FingerprintMode",
    "RunAction",
    "DuplicateGroup",
    "DuplicateIndex",
    "RunStatistics",
    "DeduplicationParams",
    "BodyFingerprinter",
    "MessageIdFingerprinter",
    "create_fingerprinter",
    "MaildirWalkerImpl",
]
