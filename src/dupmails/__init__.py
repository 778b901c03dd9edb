"""
DupMails: find and remove duplicate mails in a Maildir.

Core features:
- Two detection modes: BODY (hash of the message body) and MESSAGE_ID (Message-ID header)
- Print-only reports or permanent removal of every copy but the first
- CLI interface (`dupmails`) for interactive and scripted usage
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupmails")
except Exception:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API, only what users should import directly
from dupmails.commands import DeduplicationCommand
from dupmails.core import (
    DeduplicationParams, FingerprintMode, RunAction, DuplicateGroup, DuplicateIndex, RunStatistics,
    DupMailsError, MaildirAccessError)
from dupmails.services import DuplicateService
from dupmails.services.file_service import FileService

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "FingerprintMode",
    "RunAction",
    "DuplicateGroup",
    "DuplicateIndex",
    "RunStatistics",
    "DupMailsError",
    "MaildirAccessError",
    "DuplicateService",
    "FileService",
    "__version__",
]
