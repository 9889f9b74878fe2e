"""Tests for CLI interface."""

import json

import pytest

from puzzle_solver.cli.main import main_cli, create_parser
from puzzle_solver.cli.utils import format_duration, read_puzzle_input, save_results
from puzzle_solver.core.data_models import InputSelection, PuzzleRequest

ELEVATOR_EXAMPLE = """\
The first floor contains a hydrogen-compatible microchip and a lithium-compatible microchip.
The second floor contains a hydrogen generator.
The third floor contains a lithium generator.
The fourth floor contains nothing relevant.
"""


@pytest.fixture
def inputs_dir(tmp_path):
    """Inputs tree with the elevator example as test input 1 and a real vault passcode."""
    day11 = tmp_path / "day11"
    day11.mkdir()
    (day11 / "data1.txt").write_text(ELEVATOR_EXAMPLE)
    day17 = tmp_path / "day17"
    day17.mkdir()
    (day17 / "data.txt").write_text("ihgpwlah\n")
    return tmp_path


class TestCLIParser:
    """Test CLI argument parsing."""

    def test_create_parser(self):
        parser = create_parser()
        assert parser.prog == 'puzzle-solver'

    def test_solve_command_parsing(self):
        parser = create_parser()

        args = parser.parse_args(['solve', '11', '1'])
        assert args.command == 'solve'
        assert args.day == 11
        assert args.part == 1
        assert args.data is None
        assert args.extra == []
        assert args.max_nodes is None
        assert args.timeout is None

        args = parser.parse_args([
            'solve', '17', '2', '3', 'a', 'b',
            '--inputs-dir', 'elsewhere',
            '--max-nodes', '1000',
            '--timeout', '2.5'
        ])
        assert args.data == '3'
        assert args.extra == ['a', 'b']
        assert args.inputs_dir == 'elsewhere'
        assert args.max_nodes == 1000
        assert args.timeout == 2.5

    def test_config_command_parsing(self):
        parser = create_parser()

        args = parser.parse_args(['config', 'show'])
        assert args.command == 'config'
        assert args.config_action == 'show'

        args = parser.parse_args(['config', 'validate'])
        assert args.config_action == 'validate'

    def test_global_options(self):
        parser = create_parser()

        args = parser.parse_args(['-v', 'list'])
        assert args.verbose == 1

        args = parser.parse_args(['-vv', 'list'])
        assert args.verbose == 2

        args = parser.parse_args(['-q', 'list'])
        assert args.quiet is True

        args = parser.parse_args(['-c', 'a.b=1', '-c', 'c.d=2', 'list'])
        assert args.config == ['a.b=1', 'c.d=2']


class TestCLIUtils:
    """Test CLI utility functions."""

    def test_read_puzzle_input(self, inputs_dir):
        request = PuzzleRequest(11, 1, InputSelection(1))

        assert read_puzzle_input(request, inputs_dir) == ELEVATOR_EXAMPLE

    def test_read_missing_input(self, inputs_dir):
        with pytest.raises(FileNotFoundError):
            read_puzzle_input(PuzzleRequest(11, 1), inputs_dir)

    def test_save_results(self, tmp_path):
        output = tmp_path / "nested" / "results.json"
        save_results({'solution': '11'}, output)

        with open(output) as f:
            assert json.load(f) == {'solution': '11'}

    def test_format_duration(self):
        assert format_duration(0.0123) == "12.3ms"
        assert format_duration(1.5) == "1.50s"
        assert format_duration(90) == "1m 30.0s"


@pytest.mark.usefixtures("project_conf")
class TestCLICommands:
    """Test command dispatch end to end."""

    def test_no_command(self, capsys):
        assert main_cli([]) == 1

    def test_solve_test_input(self, inputs_dir, capsys):
        exit_code = main_cli(['solve', '11', '1', '1', '--inputs-dir', str(inputs_dir)])

        assert exit_code == 0
        assert "The solution for day 11 part 1 is: 11!" in capsys.readouterr().out

    def test_solve_real_input(self, inputs_dir, capsys):
        exit_code = main_cli(['solve', '17', '1', '--inputs-dir', str(inputs_dir)])

        assert exit_code == 0
        assert "The solution for day 17 part 1 is: DDRRRD!" in capsys.readouterr().out

    def test_solve_writes_output(self, inputs_dir, tmp_path):
        output = tmp_path / "result.json"
        exit_code = main_cli(['-o', str(output), 'solve', '11', '1', '1',
                              '--inputs-dir', str(inputs_dir)])

        assert exit_code == 0
        with open(output) as f:
            results = json.load(f)
        assert results['solution'] == '11'
        assert results['data'] == 'test data 1'

    def test_solve_with_overrides(self, inputs_dir, capsys):
        exit_code = main_cli(['-c', 'puzzles.elevator.prefer_pair_up=false',
                              'solve', '11', '1', '1', '--inputs-dir', str(inputs_dir)])

        assert exit_code == 0
        assert "is: 11!" in capsys.readouterr().out

    def test_unknown_day(self, inputs_dir, capsys):
        exit_code = main_cli(['solve', '3', '1', '--inputs-dir', str(inputs_dir)])

        assert exit_code == 1
        assert "Day 3 not implemented yet" in capsys.readouterr().out

    def test_bad_data_selection(self, inputs_dir, capsys):
        exit_code = main_cli(['solve', '11', '1', 'fake', '--inputs-dir', str(inputs_dir)])

        assert exit_code == 1
        assert "Problem parsing arguments" in capsys.readouterr().out

    def test_missing_input_file(self, inputs_dir, capsys):
        exit_code = main_cli(['solve', '11', '1', '--inputs-dir', str(inputs_dir)])

        assert exit_code == 1
        assert "Cannot read input file" in capsys.readouterr().out

    def test_node_budget_exhausted(self, inputs_dir, capsys):
        exit_code = main_cli(['solve', '11', '1', '1', '--max-nodes', '1',
                              '--inputs-dir', str(inputs_dir)])

        assert exit_code == 1
        assert "The solution" not in capsys.readouterr().out

    def test_invalid_override(self, inputs_dir):
        exit_code = main_cli(['-c', 'puzzles.elevator.floor_count=1',
                              'solve', '11', '1', '1', '--inputs-dir', str(inputs_dir)])

        assert exit_code == 1

    def test_list(self, capsys):
        assert main_cli(['list']) == 0

        out = capsys.readouterr().out
        assert "day 11  Radioisotope Thermoelectric Generators" in out
        assert "day 17  Two Steps Forward" in out
        assert "day 22  Grid Computing" in out

    def test_config_show(self, capsys):
        assert main_cli(['config', 'show']) == 0
        assert "floor_count: 4" in capsys.readouterr().out

    def test_config_validate(self, capsys):
        assert main_cli(['config', 'validate']) == 0
        assert "Configuration is valid" in capsys.readouterr().out

        assert main_cli(['-c', 'search.astar.log_interval=-5', 'config', 'validate']) == 1
        assert "Configuration validation failed" in capsys.readouterr().out

    def test_config_without_action(self, capsys):
        assert main_cli(['config']) == 1
