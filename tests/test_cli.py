"""
Tests for the command-line entry point.

Run with: pytest tests/test_cli.py -v
"""

import pytest

from matrix_game_cfr.cli import build_parser, main


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.algorithm == 2
        assert args.size == 1000
        assert args.epsilon == 0.0001
        assert args.runs == 1
        assert args.seed is None

    def test_short_flags(self):
        args = build_parser().parse_args(["-a", "0", "-s", "10", "-e", "0.01", "-n", "3"])
        assert (args.algorithm, args.size, args.epsilon, args.runs) == (0, 10, 0.01, 3)


class TestMain:

    def test_single_run(self, capsys):
        assert main(["-a", "2", "-s", "4", "-e", "0.01", "--seed", "1"]) == 0

        out = capsys.readouterr().out
        assert "Algorithm: CFR+" in out
        assert "Matrix size: 4" in out
        assert "Epsilon: 0.010000" in out
        assert "N: 1" in out
        assert "start" in out
        assert "i=1 t=" in out

    def test_batch_run(self, capsys):
        assert main(["-a", "1", "-s", "3", "-e", "0.05", "-n", "3", "--seed", "5"]) == 0

        out = capsys.readouterr().out
        assert "Algorithm: CFR" in out
        assert "N: 3" in out
        assert "min " in out and " | max " in out and " | avg " in out

    @pytest.mark.parametrize("argv", [
        ["-a", "5"],
        ["-s", "1"],
        ["-e", "2"],
        ["-n", "0"],
    ])
    def test_invalid_values_exit(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2
        assert "must be in" in capsys.readouterr().err
