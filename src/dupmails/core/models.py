"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

Based on dup_mails.pl, Copyright (c) 2016 Kurt Kanzenbach <kurt@kmk-computers.de>
Redistributed under the BSD 2-clause license, see LICENSE

core/models.py
Data models for duplicate mail detection: run modes, duplicate groups,
the duplicate index and run statistics.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional
from enum import Enum


# =============================
# Enums
# =============================

class FingerprintMode(Enum):
    """
    Strategy used to decide whether two mails are the same message.
    """
    BODY = "body"
    MESSAGE_ID = "message-id"

    @property
    def display_name(self) -> str:
        """Human-readable name for output."""
        mapping = {
            FingerprintMode.BODY: "Message body",
            FingerprintMode.MESSAGE_ID: "Message-ID header",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class RunAction(Enum):
    """What to do with the duplicates once they are found."""
    PRINT_ONLY = "print-only"
    FORCE = "force"

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass
class DuplicateGroup:
    """
    Mail files sharing one fingerprint key, in the order they were discovered.
    The first path is the original that survives removal.
    """
    key: str
    paths: List[str] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.paths)

    @property
    def original(self) -> str:
        return self.paths[0]

    @property
    def duplicates(self) -> List[str]:
        """Every path except the original."""
        return self.paths[1:]

    def add_path(self, path: str) -> None:
        self.paths.append(path)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup key={self.key}, count={len(self.paths)}>"


class DuplicateIndex:
    """
    Mapping from fingerprint key to DuplicateGroup, filled while the tree is walked.
    Groups keep discovery order; keys are never removed or merged.
    """

    def __init__(self):
        self._groups: Dict[str, DuplicateGroup] = {}

    def record(self, key: str, path: str) -> bool:
        """
        Append path to the group for key, creating the group if needed.
        Returns True when the insertion made the group exceed one member.
        """
        group = self._groups.get(key)
        if group is None:
            group = DuplicateGroup(key=key)
            self._groups[key] = group
        group.add_path(path)
        return group.is_duplicate()

    def get(self, key: str) -> Optional[DuplicateGroup]:
        return self._groups.get(key)

    def groups(self) -> List[DuplicateGroup]:
        """All groups, including single-member ones."""
        return list(self._groups.values())

    def duplicate_groups(self) -> List[DuplicateGroup]:
        """Only groups with two or more members."""
        return [group for group in self._groups.values() if group.is_duplicate()]

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: str) -> bool:
        return key in self._groups

    def __repr__(self):
        return f"<DuplicateIndex keys={len(self._groups)}, duplicate_groups={len(self.duplicate_groups())}>"


@dataclass
class RunStatistics:
    """
    Counters collected during one run.
    duplicates_found counts every copy beyond the first in a group.
    """
    files_processed: int = 0
    duplicates_found: int = 0
    duplicates_removed: int = 0

    SEPARATOR_WIDTH = 80

    def print_summary(self) -> str:
        separator = "-" * self.SEPARATOR_WIDTH
        lines = [
            separator,
            f"Mails processed: {self.files_processed}",
            f"Duplicates found: {self.duplicates_found}",
            f"Duplicates removed: {self.duplicates_removed}",
            separator,
        ]
        return "\n".join(lines)


"""
DTO for run parameters with built-in validation.
Interface-agnostic: built by the CLI, consumed by DeduplicationCommand.
"""
from dupmails.core.hasher import HASH_ALGORITHMS, DEFAULT_HASH_ALGORITHM


@dataclass
class DeduplicationParams:
    """Parameters for one duplicate-mail run with validation."""
    root_dir: str
    mode: FingerprintMode = FingerprintMode.BODY
    action: RunAction = RunAction.PRINT_ONLY
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Maildir path cannot be empty")

        # Accept plain strings for the enum fields ("body", "force", ...)
        self.mode = FingerprintMode(self.mode)
        self.action = RunAction(self.action)

        self.hash_algorithm = self.hash_algorithm.strip().lower()
        if self.hash_algorithm not in HASH_ALGORITHMS:
            raise ValueError(
                f"Unknown hash algorithm: '{self.hash_algorithm}'. "
                f"Valid options: {', '.join(HASH_ALGORITHMS)}"
            )

    @property
    def force(self) -> bool:
        return self.action is RunAction.FORCE
