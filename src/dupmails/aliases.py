from dupmails.core.models import FingerprintMode, RunAction
from dupmails.core.hasher import HASH_ALGORITHMS

MODE_ALIASES = {
    "body": FingerprintMode.BODY,
    "message-id": FingerprintMode.MESSAGE_ID,
}

ACTION_ALIASES = {
    "print-only": RunAction.PRINT_ONLY,
    "force": RunAction.FORCE,
}

HASH_CHOICES = list(HASH_ALGORITHMS.keys())

HASH_HELP_TEXT = (
    "Hash algorithm for --body mode:\n"
    "  sha1   : 160-bit SHA-1 (default)\n"
    "  xxh128 : 128-bit xxHash3, faster but not cryptographic\n"
)

DESCRIPTION_TEXT = "DupMails: find and remove duplicate mails in a Maildir"

EPILOG_TEXT = """
--force and --printonly cannot be used together, the same holds for --body and --messageids.

Examples:
  Find duplicates via Message-ID header (printed to stdout)
  %(prog)s -p -m ~/Maildir

  Remove duplicates via message body (make a backup first, removal is permanent)
  %(prog)s -v -f -b ~/Maildir
"""

VERSION_TEXT = """{prog} -- Find and remove duplicate mails in Maildir
Version: {version}
Based on dup_mails.pl, (C) 2016 Kurt Kanzenbach <kurt@kmk-computers.de>, BSD 2-clause"""
