#!/usr/bin/env python3
"""
DupMails CLI: Command line interface for duplicate mail detection and removal.
Scans a Maildir, prints duplicate groups or removes every copy but the first,
then prints run statistics.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

logger = logging.getLogger(__name__)

from dupmails import __version__
from dupmails.core.exceptions import MaildirAccessError
from dupmails.core.models import DeduplicationParams, FingerprintMode, RunAction, RunStatistics
from dupmails.core.hasher import DEFAULT_HASH_ALGORITHM
from dupmails.commands import DeduplicationCommand
from dupmails.aliases import (
    MODE_ALIASES, ACTION_ALIASES, HASH_CHOICES, HASH_HELP_TEXT,
    DESCRIPTION_TEXT, EPILOG_TEXT, VERSION_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    PROG = "dupmails"

    def __init__(self):
        self.verbose: bool = False

        # Mail paths may carry undecodable bytes; print them back unchanged
        sys.stdout.reconfigure(encoding='utf-8', errors='surrogateescape')
        sys.stderr.reconfigure(encoding='utf-8', errors='backslashreplace')

    @classmethod
    def build_parser(cls) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=cls.PROG,
            usage="%(prog)s [options] <Maildir>",
            description=DESCRIPTION_TEXT,
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT,
            add_help=False
        )

        # Optional here so that --help and --version work without it
        parser.add_argument(
            "maildir",
            nargs="?",
            metavar="Maildir",
            help="Root of the Maildir tree to scan"
        )

        # Fingerprinting strategy
        mode_group = parser.add_mutually_exclusive_group()
        mode_group.add_argument(
            "--body", "-b",
            dest="mode",
            action="store_const",
            const="body",
            help="Compare mail bodies for finding duplicates (default)"
        )
        mode_group.add_argument(
            "--messageids", "-m",
            dest="mode",
            action="store_const",
            const="message-id",
            help="Compare Message-ID headers for finding duplicates"
        )

        # Actions
        action_group = parser.add_mutually_exclusive_group()
        action_group.add_argument(
            "--force", "-f",
            dest="action",
            action="store_const",
            const="force",
            help="Remove duplicate mails, keeping the first one found in each group"
        )
        action_group.add_argument(
            "--printonly", "-p",
            dest="action",
            action="store_const",
            const="print-only",
            help="Print duplicates to stdout (default behaviour)"
        )

        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default=DEFAULT_HASH_ALGORITHM,
            type=str,
            dest="hash_algorithm",
            help=HASH_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose logging"
        )
        parser.add_argument(
            "--help", "-h",
            action="store_true",
            help="Print this help text"
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Print the version information"
        )
        return parser

    @classmethod
    def build_info_parser(cls) -> argparse.ArgumentParser:
        """Parser that only knows --help and --version, everything else is left over."""
        parser = argparse.ArgumentParser(prog=cls.PROG, add_help=False, allow_abbrev=False)
        parser.add_argument("--help", "-h", action="store_true")
        parser.add_argument("--version", action="store_true")
        return parser

    @classmethod
    def parse_args(cls, args=None) -> argparse.Namespace:
        """Parse command-line arguments. Conflicting flags are rejected by argparse."""
        return cls.build_parser().parse_args(args)

    def handle_info_flags(self, argv=None) -> None:
        """Help and version short-circuit all other processing, conflicting flags included."""
        info, _ = self.build_info_parser().parse_known_args(argv)

        if info.help:
            self.build_parser().print_help(file=sys.stderr)
            sys.exit(1)

        if info.version:
            print(VERSION_TEXT.format(prog=self.PROG, version=__version__), file=sys.stderr)
            sys.exit(1)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Reject a missing Maildir before any scanning."""
        if not args.maildir:
            self.build_parser().error("the Maildir argument is required")

    def create_params(self, args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        try:
            mode = MODE_ALIASES.get(args.mode, FingerprintMode.BODY)
            action = ACTION_ALIASES.get(args.action, RunAction.PRINT_ONLY)

            return DeduplicationParams(
                root_dir=args.maildir,
                mode=mode,
                action=action,
                hash_algorithm=args.hash_algorithm
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        if verbose:
            logging.getLogger("dupmails").setLevel(logging.INFO)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - logs progress in verbose mode."""
        if not self.verbose:
            return

        logger.info(f"[{stage}] {current} mails processed...")

    @staticmethod
    def output_results(lines: List[str]) -> None:
        """Print one line per duplicate group."""
        for line in lines:
            print(line)

    @staticmethod
    def output_statistics(stats: RunStatistics) -> None:
        print(stats.print_summary())

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point: scan, then report or remove, then print statistics."""
        self.handle_info_flags(argv)
        args = self.parse_args(argv)
        self.validate_args(args)

        self.verbose = args.verbose
        self.configure_logging(self.verbose)

        params = self.create_params(args)
        logger.info(f"Scanning '{params.root_dir}' (mode: {params.mode.display_name}, "
                    f"action: {params.action.value})")

        command = DeduplicationCommand()
        try:
            _, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )

            if params.force:
                command.remove_duplicates()
            else:
                self.output_results(command.report())
        except MaildirAccessError as e:
            self.error_exit(str(e))

        self.output_statistics(stats)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
