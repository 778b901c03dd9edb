"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

Based on dup_mails.pl, Copyright (c) 2016 Kurt Kanzenbach <kurt@kmk-computers.de>
Redistributed under the BSD 2-clause license, see LICENSE

core/exceptions.py
Errors raised by the scanning and removal engine.
"""


class DupMailsError(RuntimeError):
    """Base class for all errors raised by dupmails."""


class MaildirAccessError(DupMailsError):
    """
    Raised when a directory or mail file cannot be read or removed.
    The run is aborted: a partial duplicate index would be misleading.
    """

    def __init__(self, action: str, path: str, reason: str):
        self.action = action
        self.path = path
        self.reason = reason
        super().__init__(f"{action} '{path}': {reason}")

    @classmethod
    def from_os_error(cls, action: str, path: str, error: OSError) -> "MaildirAccessError":
        return cls(action, path, error.strerror or str(error))
