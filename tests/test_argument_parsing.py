"""
Tests for CLI argument parsing and parameter creation.
"""
import sys
from unittest import mock
import pytest
from fqsum.cli import CLIApplication
from fqsum.core.models import HashAlgorithmName


class TestArgumentParsing:
    """Test CLI argument parsing with argparse."""

    def test_positional_files(self):
        args = CLIApplication.parse_args(["a_R1.fq", "a_R2.fq"])
        assert args.fastqfiles == ["a_R1.fq", "a_R2.fq"]

    def test_defaults(self):
        args = CLIApplication.parse_args(["a.fq"])
        assert args.debug is False
        assert args.no_readnames is False
        assert args.no_quality is False
        assert args.no_paired is False
        assert args.hash == "md5"

    @pytest.mark.parametrize("long_flag,short_flag,dest", [
        ("--debug", "-d", "debug"),
        ("--no-readnames", "-R", "no_readnames"),
        ("--no-quality", "-Q", "no_quality"),
        ("--no-paired", "-P", "no_paired"),
    ])
    def test_flag_variants(self, long_flag, short_flag, dest):
        """Test both long and short forms."""
        assert getattr(CLIApplication.parse_args([long_flag, "a.fq"]), dest) is True
        assert getattr(CLIApplication.parse_args([short_flag, "a.fq"]), dest) is True

    def test_at_least_one_file_required(self):
        with pytest.raises(SystemExit):
            CLIApplication.parse_args([])

    def test_invalid_hash_rejected(self):
        """Invalid hash names are rejected by argparse."""
        with pytest.raises(SystemExit):
            CLIApplication.parse_args(["--hash", "sha1", "a.fq"])

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc:
            CLIApplication.parse_args(["--version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out.startswith("fqsum ")

    def test_parse_args_reads_sys_argv(self):
        with mock.patch.object(sys, 'argv', ['fqsum', '-P', 'x.fq']):
            args = CLIApplication.parse_args()
        assert args.fastqfiles == ["x.fq"]


class TestCreateParams:

    def test_flags_map_to_params(self):
        app = CLIApplication()
        args = app.parse_args(["-R", "-Q", "-d", "--hash", "xxh128", "a_R1.fq.gz", "a_R2.fq.gz"])
        params = app.create_params(args)

        assert params.input_files == ("a_R1.fq.gz", "a_R2.fq.gz")
        assert params.paired is True
        assert params.include_read_names is False
        assert params.include_quality is False
        assert params.debug is True
        assert params.algorithm is HashAlgorithmName.XXH128

    def test_no_paired_allows_odd_count(self):
        app = CLIApplication()
        params = app.create_params(app.parse_args(["-P", "a.fq", "b.fq", "c.fq"]))
        assert params.paired is False
        assert len(params.groups) == 3

    def test_odd_count_exits(self, capsys):
        app = CLIApplication()
        with pytest.raises(SystemExit) as exc:
            app.create_params(app.parse_args(["a.fq"]))
        assert exc.value.code == 1
        assert "odd number" in capsys.readouterr().err


class TestValidateArgs:

    def test_verbose_and_quiet_conflict(self):
        app = CLIApplication()
        with pytest.raises(SystemExit):
            app.validate_args(app.parse_args(["-v", "-q", "-P", "a.fq"]))

    def test_extensions_left_to_params(self):
        app = CLIApplication()
        app.validate_args(app.parse_args(["-P", "a.sam"]))

    def test_extension_checked_case_insensitively(self):
        app = CLIApplication()
        params = app.create_params(app.parse_args(["-P", "A.FASTQ.GZ"]))
        assert params.input_files == ("A.FASTQ.GZ",)

    def test_bad_extension_exits(self, capsys):
        app = CLIApplication()
        with pytest.raises(SystemExit) as exc:
            app.create_params(app.parse_args(["-P", "a.sam"]))
        assert exc.value.code == 1
        assert "Unsupported file extension: a.sam" in capsys.readouterr().err
