"""Tests for the Monte Carlo runner and trial reports."""

import math

import pytest

from montyhall.analysis import MonteCarloRunner, play_n_games
from montyhall.exceptions import InvalidArgumentError
from montyhall.models import Outcome, Strategy


class TestMonteCarloRunner:
    """Test cases for MonteCarloRunner."""

    def test_result_count_and_order(self):
        """Test two results per game in arrival order."""
        report = MonteCarloRunner(seed=42).run(num_games=50)
        assert report.num_games == 50
        assert len(report.results) == 100
        assert [r.game for r in report.results] == [g for g in range(1, 51) for _ in range(2)]

    def test_reproducible(self):
        """Test same seed gives identical reports."""
        a = MonteCarloRunner(seed=42).run(num_games=200)
        b = MonteCarloRunner(seed=42).run(num_games=200)
        assert a.results == b.results
        assert a.seed == b.seed == 42

    def test_seed_recorded(self):
        """Test an unseeded runner still records its seed."""
        runner = MonteCarloRunner()
        report = runner.run(num_games=10)
        assert report.seed == runner.base_seed
        assert MonteCarloRunner(seed=report.seed).run(num_games=10).results == report.results

    def test_convergence(self):
        """Test switch wins about 2/3 of the time and stay about 1/3."""
        report = MonteCarloRunner(seed=2024).run(num_games=10000)
        switch = report.win_rate(Strategy.SWITCH)
        stay = report.win_rate(Strategy.STAY)
        assert 0.60 <= switch <= 0.73
        assert 0.27 <= stay <= 0.40
        assert stay + switch == pytest.approx(1.0)

    def test_zero_games(self):
        """Test zero games gives an explicit empty report."""
        report = MonteCarloRunner(seed=1).run(num_games=0)
        assert not report.has_data
        assert report.results == []
        assert math.isnan(report.win_rate(Strategy.SWITCH))
        assert report.proportion_table().isna().all().all()
        assert report.to_dataframe().empty

    @pytest.mark.parametrize("num_games", [-1, 2.5, "10", True])
    def test_invalid_num_games(self, num_games):
        """Test negative or non-integer game counts."""
        with pytest.raises(InvalidArgumentError):
            MonteCarloRunner(seed=1).run(num_games=num_games)


class TestTrialReport:
    """Test cases for TrialReport summaries."""

    def test_wins_match_rates(self):
        """Test win counts agree with win rates."""
        report = MonteCarloRunner(seed=7).run(num_games=300)
        for strategy, rate in report.get_win_rates().items():
            assert report.wins(strategy) / 300 == pytest.approx(rate)
        assert report.wins(Strategy.STAY) + report.wins(Strategy.SWITCH) == 300

    def test_dataframe(self):
        """Test the flat results frame."""
        df = MonteCarloRunner(seed=7).run(num_games=20).to_dataframe()
        assert list(df.columns) == ["game", "strategy", "outcome"]
        assert len(df) == 40
        assert set(df["strategy"]) == {"stay", "switch"}
        assert set(df["outcome"]) <= {"WIN", "LOSE"}

    def test_proportion_table(self):
        """Test rows are strategies and sum to one."""
        report = MonteCarloRunner(seed=7).run(num_games=500)
        table = report.proportion_table()
        assert list(table.index) == ["stay", "switch"]
        assert list(table.columns) == ["LOSE", "WIN"]
        assert table.sum(axis=1).tolist() == pytest.approx([1.0, 1.0])
        assert table.loc["switch", "WIN"] == pytest.approx(report.win_rate(Strategy.SWITCH))
        # Stay wins exactly when switch loses
        assert table.loc["stay", "WIN"] == pytest.approx(table.loc["switch", Outcome.LOSE.value])


class TestPlayNGames:
    """Test cases for play_n_games."""

    def test_prints_table(self, capsys):
        """Test the proportion table is printed and the report returned."""
        report = play_n_games(100, seed=3)
        out = capsys.readouterr().out
        assert "stay" in out and "switch" in out
        assert "WIN" in out and "LOSE" in out
        assert len(report.results) == 200

    def test_quiet(self, capsys):
        """Test nothing is printed when verbose is off."""
        report = play_n_games(10, seed=3, verbose=False)
        assert capsys.readouterr().out == ""
        assert report.has_data

    def test_zero(self, capsys):
        """Test zero games does not crash."""
        report = play_n_games(0)
        assert "No games played" in capsys.readouterr().out
        assert not report.has_data
