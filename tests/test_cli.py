# tests/test_cli.py
"""
Tests for the command-line entry point.
"""

import logging
from unittest.mock import patch

import pytest
from featuretour import __version__
from featuretour.cli import build_parser, main


class TestCli:
    """Test argument handling."""

    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.section is None
        assert args.size == 1_000_000
        assert args.workers == 0
        assert args.no_zones is False
        assert args.verbose is False

    def test_single_section(self, capsys):
        main(["--section", "3"])
        assert capsys.readouterr().out == "+-- 3. Functional Interfaces\nconverted: 1234\n"

    def test_config_passed_through(self):
        with patch("featuretour.cli.run_tour") as run_tour:
            main(["--section", "8", "--section", "10", "--size", "500",
                  "--workers", "3", "--no-zones"])

        config = run_tour.call_args[0][0]
        assert config.sections == (8, 10)
        assert config.parallel_sort_size == 500
        assert config.workers == 3
        assert config.show_all_zones is False

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])

        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_section(self):
        with pytest.raises(SystemExit) as exc:
            main(["--section", "13"])
        assert exc.value.code == 2

    @pytest.mark.parametrize("flag", ["--size", "--workers"])
    def test_negative_counts_rejected(self, flag, capsys):
        """Test argparse rejects negative counts before any output."""
        with patch("featuretour.cli.run_tour") as run_tour:
            with pytest.raises(SystemExit) as exc:
                main(["--section", "8", flag, "-5"])

        assert exc.value.code == 2
        run_tour.assert_not_called()
        assert capsys.readouterr().out == ""

    def test_non_integer_count_rejected(self):
        with pytest.raises(SystemExit) as exc:
            main(["--size", "many"])
        assert exc.value.code == 2

    def test_zero_counts_accepted(self):
        args = build_parser().parse_args(["--size", "0", "--workers", "0"])
        assert (args.size, args.workers) == (0, 0)

    def test_verbose_logging(self):
        with patch("featuretour.cli.run_tour"):
            main(["-v"])
        assert logging.getLogger("featuretour").level == logging.DEBUG

        with patch("featuretour.cli.run_tour"):
            main([])
        assert logging.getLogger("featuretour").level == logging.WARNING
