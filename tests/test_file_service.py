"""
Tests for file service: removal is permanent and failures are never swallowed.
"""
import sys
import pytest
from unittest import mock
from dupmails.core.exceptions import MaildirAccessError
from dupmails.services.file_service import FileService


class TestRemoveFile:

    def test_removes_file(self, tmp_path):
        test_file = tmp_path / "1234.mail"
        test_file.write_text("content to delete")

        FileService.remove_file(str(test_file))

        assert not test_file.exists()

    def test_preserves_other_files_in_directory(self, tmp_path):
        keep = tmp_path / "keep"
        delete = tmp_path / "delete"
        keep.write_text("preserve this")
        delete.write_text("delete this")

        FileService.remove_file(str(delete))

        assert keep.exists(), "Sibling file must not be affected by deletion"
        assert not delete.exists()

    def test_handles_maildir_style_names(self, tmp_path):
        """Maildir names contain colons and commas (e.g. 1455:2,S)."""
        if sys.platform == "win32":
            pytest.skip("Colons are not valid in Windows filenames")

        mail = tmp_path / "1455000000.M1P2.host:2,S"
        mail.write_text("content")

        FileService.remove_file(str(mail))
        assert not mail.exists()

    def test_missing_file_raises(self, tmp_path):
        missing = tmp_path / "missing"

        with pytest.raises(MaildirAccessError, match="Failed to remove file") as exc_info:
            FileService.remove_file(str(missing))

        assert exc_info.value.path == str(missing)
        assert exc_info.value.reason == "No such file or directory"

    def test_permission_error_is_wrapped(self, tmp_path):
        mail = tmp_path / "mail"
        mail.write_text("content")

        with mock.patch("dupmails.services.file_service.os.remove",
                        side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(MaildirAccessError, match="Permission denied"):
                FileService.remove_file(str(mail))

        assert mail.exists()

    def test_refuses_directories(self, tmp_path):
        directory = tmp_path / "cur"
        directory.mkdir()

        with pytest.raises(MaildirAccessError):
            FileService.remove_file(str(directory))
        assert directory.exists()
