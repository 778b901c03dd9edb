"""
Tests for DuplicateService: the removal policy and the duplicate report.
These tests guard against deleting the wrong copy or too many copies.
"""
import pytest
from unittest import mock
from dupmails.core.exceptions import MaildirAccessError
from dupmails.core.models import DuplicateIndex, RunStatistics
from dupmails.services.duplicate_service import DuplicateService
from dupmails.services.file_service import FileService


def build_index(entries):
    index = DuplicateIndex()
    for key, path in entries:
        index.record(key, path)
    return index


class TestRemovalPolicy:

    def test_first_discovered_survives(self, tmp_path):
        """
        CRITICAL: given a group discovered as [A, B, C], B and C are deleted,
        A is kept and the removed counter grows by exactly 2.
        """
        a, b, c = (tmp_path / n for n in ("A", "B", "C"))
        for f in (a, b, c):
            f.write_bytes(b"same")

        index = build_index([("k", str(a)), ("k", str(b)), ("k", str(c))])
        stats = RunStatistics()

        removed = DuplicateService.remove_duplicates(index, stats)

        assert removed == [str(b), str(c)]
        assert a.exists()
        assert not b.exists()
        assert not c.exists()
        assert stats.duplicates_removed == 2

    def test_single_member_groups_are_untouched(self, tmp_path):
        lonely = tmp_path / "lonely"
        lonely.write_bytes(b"x")
        index = build_index([("k", str(lonely))])
        stats = RunStatistics()

        assert DuplicateService.remove_duplicates(index, stats) == []
        assert lonely.exists()
        assert stats.duplicates_removed == 0

    def test_files_to_remove_lists_all_but_first_per_group(self):
        index = build_index([
            ("k1", "/a1"), ("k2", "/b1"), ("k1", "/a2"), ("k3", "/c1"), ("k2", "/b2"), ("k1", "/a3"),
        ])
        assert DuplicateService.files_to_remove(index) == ["/a2", "/a3", "/b2"]

    def test_uses_injected_remove_function(self):
        index = build_index([("k", "/a"), ("k", "/b")])
        remove_func = mock.Mock()

        DuplicateService.remove_duplicates(index, RunStatistics(), remove_func=remove_func)

        remove_func.assert_called_once_with("/b")

    def test_defaults_to_file_service(self):
        index = build_index([("k", "/a"), ("k", "/b"), ("k", "/c")])
        with mock.patch.object(FileService, "remove_file") as mock_remove:
            DuplicateService.remove_duplicates(index, RunStatistics())

        deleted = [call.args[0] for call in mock_remove.call_args_list]
        assert deleted == ["/b", "/c"]

    def test_failure_aborts_immediately(self, tmp_path):
        """
        The first failed deletion stops the run. Files deleted before it stay deleted,
        later files are left alone, and only successful deletions are counted.
        """
        files = [tmp_path / n for n in ("1", "2", "3", "4")]
        for f in files:
            f.write_bytes(b"same")
        index = build_index([("k", str(f)) for f in files])
        stats = RunStatistics()

        real_remove = FileService.remove_file

        def flaky_remove(path):
            if path == str(files[2]):
                raise MaildirAccessError("Failed to remove file", path, "Permission denied")
            real_remove(path)

        with pytest.raises(MaildirAccessError, match="Permission denied"):
            DuplicateService.remove_duplicates(index, stats, remove_func=flaky_remove)

        assert files[0].exists()
        assert not files[1].exists()
        assert files[2].exists()
        assert files[3].exists()
        assert stats.duplicates_removed == 1


class TestReport:

    def test_one_line_per_duplicate_group(self):
        index = build_index([("k1", "/a1"), ("k2", "/b1"), ("k1", "/a2"), ("k1", "/a3")])

        assert DuplicateService.format_report(index) == ["Duplicates: /a1 /a2 /a3"]

    def test_no_duplicates_no_lines(self):
        index = build_index([("k1", "/a"), ("k2", "/b")])
        assert DuplicateService.format_report(index) == []

    def test_report_does_not_mutate_index(self):
        index = build_index([("k", "/a"), ("k", "/b")])
        DuplicateService.format_report(index)
        assert index.get("k").paths == ["/a", "/b"]
