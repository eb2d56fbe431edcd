"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def invoke(*args):
    return runner.invoke(app, list(args))


class TestClassifyCommand:
    """Tests for the classify command."""

    def test_classify_json(self):
        result = invoke("classify", "AS", "KS", "QS", "JS", "10S", "--json")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"class": "Straight Flush", "tiebreaks": ["A"]}

    def test_classify_low_json(self):
        result = invoke("classify", "--low", "AC", "2C", "AH", "2H", "9D", "--json")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"class": "Two Pair", "tiebreaks": ["2", "A", "9"]}

    def test_classify_table(self):
        result = invoke("classify", "3S", "3H", "3D", "2C", "2S")
        assert result.exit_code == 0
        assert "Full house" in result.output

    @pytest.mark.parametrize("cards", [
        ["AS", "KS", "QS", "JS"],
        ["AS", "KS", "QS", "JS", "XX"],
    ])
    def test_classify_bad_input(self, cards):
        result = invoke("classify", *cards)
        assert result.exit_code == 1
        assert "Error" in result.output


class TestSimulateCommands:
    """Tests for the simulation commands."""

    def test_simulate_holdem_enumerates(self):
        result = invoke("simulate-holdem", "--board", "KS 7D AH 8C 8D", "--hole", "9D 7C",
                        "--players", "2", "--hands", "1000", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["hand_count"] == 990
        assert data["best_opponent_class_counts"]["Four Of A Kind"] == 1

    def test_simulate_holdem_infinite_break_even(self):
        result = invoke("simulate-holdem", "--board", "AS KS QS JS 2D", "--hole", "10S 3C",
                        "--players", "3", "--hands", "20", "--seed", "1", "--json")
        assert result.exit_code == 0
        assert json.loads(result.output)["pot_odds_break_even"] == "inf"

    def test_simulate_holdem_table(self):
        result = invoke("simulate-holdem", "--hole", "AS AH", "--players", "3",
                        "--hands", "50", "--seed", "1")
        assert result.exit_code == 0
        assert "Win %" in result.output

    def test_simulate_holdem_seed_reproducible(self):
        args = ["simulate-holdem", "--hole", "7C 2D", "--players", "4", "--hands", "100",
                "--seed", "1234", "--json"]
        assert invoke(*args).output == invoke(*args).output

    def test_simulate_holdem_duplicate_cards(self):
        result = invoke("simulate-holdem", "--board", "AS KD 2C", "--hole", "AS 3C",
                        "--players", "3", "--hands", "10")
        assert result.exit_code == 1
        assert "Duplicate" in result.output

    def test_simulate_omaha8(self):
        result = invoke("simulate-omaha8", "--hole", "AS 2S 3D KD", "--players", "3",
                        "--hands", "50", "--seed", "1", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["high"]["hand_count"] == 50
        assert data["low"]["hand_count"] == 50

    def test_simulate_omaha8_table(self):
        result = invoke("simulate-omaha8", "--players", "3", "--hands", "20", "--seed", "1")
        assert result.exit_code == 0
        assert "Low" in result.output

    def test_starting_pair(self):
        result = invoke("starting-pair", "A", "K", "--players", "3", "--hands", "50",
                        "--seed", "1", "--json")
        assert result.exit_code == 0
        assert json.loads(result.output)["hand_count"] == 50

    def test_starting_pair_suited_pair(self):
        result = invoke("starting-pair", "A", "A", "--suited", "--hands", "10")
        assert result.exit_code == 1

    def test_starting_pair_bad_rank(self):
        result = invoke("starting-pair", "T", "9", "--hands", "10")
        assert result.exit_code == 1


class TestPlayCommands:
    """Tests for dealing single hands."""

    def test_play_holdem(self):
        result = invoke("play-holdem", "--players", "3", "--seed", "5")
        assert result.exit_code == 0
        assert "Board" in result.output

    def test_play_omaha8(self):
        result = invoke("play-omaha8", "--players", "3", "--seed", "5")
        assert result.exit_code == 0
        assert "Board" in result.output

    def test_play_too_many_players(self):
        result = invoke("play-omaha8", "--players", "12")
        assert result.exit_code == 1
