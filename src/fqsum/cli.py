#!/usr/bin/env python3
"""
fqsum CLI — order-independent checksum of single-end or paired-end FASTQ files.
Prints "<hex sum>\\t<read count>" on success; in --debug mode prints every hashed
record instead. Diagnostics always go to stderr.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import Optional, NoReturn
import logging

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

logging.basicConfig(
    level=logging.ERROR,
    format=LOG_FORMAT
)

from fqsum import __version__
from fqsum.commands import ChecksumCommand
from fqsum.core.errors import (
    ChecksumError, ConfigurationError, MateMismatchError, TruncatedStreamError)
from fqsum.core.models import ChecksumParams, ChecksumResult, HashAlgorithmName
from fqsum.aliases import HASH_ALIASES, HASH_CHOICES, HASH_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="fqsum",
            description="Checksum of a set of FASTQ files, independent of read order",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "fastqfiles",
            nargs="+",
            type=str,
            metavar="FASTQ",
            help="Input files (.fq, .fq.gz, .fastq, .fastq.gz). "
                 "In paired mode, consecutive files are mates: R1 R2 [R1 R2 ...]"
        )

        # Checksum options
        parser.add_argument(
            "--debug", "-d",
            action="store_true",
            help="Debug mode. Prints the hashed string and digest of each read to stdout"
        )
        parser.add_argument(
            "--no-readnames", "-R",
            action="store_true",
            dest="no_readnames",
            help="Do not use read names as part of checksum (also skips mate name checks)"
        )
        parser.add_argument(
            "--no-quality", "-Q",
            action="store_true",
            dest="no_quality",
            help="Do not use read quality as part of checksum"
        )
        parser.add_argument(
            "--no-paired", "-P",
            action="store_true",
            dest="no_paired",
            help="List of fastq files are not paired-end reads"
        )
        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default="md5",
            type=str,
            help=HASH_HELP_TEXT
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and per-file statistics on stderr"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before any file is opened."""
        if args.verbose and args.quiet:
            self.error_exit("--verbose and --quiet cannot be used together")

    def create_params(self, args: argparse.Namespace) -> ChecksumParams:
        """Create ChecksumParams from CLI arguments."""
        try:
            return ChecksumParams(
                input_files=tuple(args.fastqfiles),
                paired=not args.no_paired,
                include_read_names=not args.no_readnames,
                include_quality=not args.no_quality,
                debug=args.debug,
                algorithm=HASH_ALIASES.get(args.hash, HashAlgorithmName.MD5),
            )
        except ConfigurationError as e:
            self.error_exit(str(e))

    def progress_callback(self, group: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows finished input groups on stderr."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"  [{current}/{total}] ({percent:.1f}%) {group}\n")
        else:
            sys.stderr.write(f"  [{current}] {group}\n")
        sys.stderr.flush()

    def run_checksum(self, params: ChecksumParams) -> ChecksumResult:
        """Execute the checksum workflow; any checksum failure ends the process."""
        command = ChecksumCommand()
        if self.verbose:
            mode = "paired-end" if params.paired else "single-end"
            print(f"Checksumming {len(params.input_files)} file(s) ({mode}, "
                  f"{params.algorithm.display_name})...", file=sys.stderr)

        try:
            result = command.execute(
                params,
                stream=sys.stdout,
                progress_callback=self.progress_callback if self.verbose else None,
            )
        except (TruncatedStreamError, MateMismatchError) as e:
            self.fatal_warning(str(e))
        except ChecksumError as e:
            self.error_exit(str(e))

        if self.verbose:
            print(result.stats.print_summary(), file=sys.stderr)
        return result

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def fatal_warning(message: str, code: int = 1) -> NoReturn:
        """Print a warning-level diagnostic that still fails the run."""
        print(f"⚠️  WARNING: {message}", file=sys.stderr)
        sys.exit(code)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("fqsum").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        if params.paired and not params.include_read_names:
            self.warning("Mate names are not checked with --no-readnames; "
                         "pairs are matched by position only")

        self.run_checksum(params)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


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
