import pandas as pd
import pytest

from tictactoe_analysis.__main__ import main as analysis_main
from tictactoe_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from tictactoe_analysis.metrics.summarize import (
    SummaryConfig,
    numeric_summary,
    outcome_rates,
    top_table,
    unbeaten,
)
from tictactoe_analysis.plots import chart, plot_outcomes, plot_scatter, plot_top_bar


ROWS = [
    # name, games, wins, draws, losses, points, ppg, strength, wins_as_x, wins_as_o, moves, time_ms, nodes, ms/mv, nodes/mv
    ("Perfect", 6, 3, 3, 0, 4.5, 0.75, 0.52, 2, 1, 14, 60, 9000, 4.3, 642.9),
    ("Random", 6, 0, 2, 4, 1.0, 0.1667, 0.04, 0, 0, 16, 16, 0, 1.0, 0.0),
    ("Lucky", 6, 3, 1, 2, 3.5, 0.5833, 0.33, 3, 0, 15, 15, 0, 1.0, 0.0),
    ("Idle", 0, 0, 0, 0, 0.0, 0.0, 0.0, 0, 0, 0, 0, 0, 0.0, 0.0),
]
COLUMNS = [
    "name", "games", "wins", "draws", "losses", "points", "ppg", "strength_wilson_lcb",
    "wins_as_x", "wins_as_o", "moves", "time_ms", "nodes", "avg_ms_per_move", "avg_nodes_per_move",
]


@pytest.fixture
def results_csv(tmp_path):
    path = tmp_path / "league_results_20260101_000000.csv"
    pd.DataFrame(ROWS, columns=COLUMNS).to_csv(path, index=False)
    return path


@pytest.fixture
def df(results_csv):
    return load_results(LoadSpec(csv_path=results_csv))


class TestLoad:

    def test_loads_numeric_columns(self, df):
        assert list(df["name"]) == ["Perfect", "Random", "Lucky", "Idle"]
        assert pd.api.types.is_numeric_dtype(df["strength_wilson_lcb"])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_results(LoadSpec(csv_path=tmp_path / "nope.csv"))

    def test_missing_required_column(self, tmp_path):
        path = tmp_path / "bad.csv"
        pd.DataFrame({"name": ["a"], "games": [1]}).to_csv(path, index=False)
        with pytest.raises(ValueError):
            load_results(LoadSpec(csv_path=path))

    def test_latest_file_wins(self, tmp_path, results_csv):
        newer = tmp_path / "league_results_20270101_000000.csv"
        newer.write_text(results_csv.read_text())
        assert load_latest_from_dir(tmp_path) == newer

    def test_empty_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_latest_from_dir(tmp_path)


class TestSummaries:

    def test_top_table_ranks_by_metric(self, df):
        table = top_table(df, SummaryConfig(metric="strength_wilson_lcb", top_n=2))
        assert list(table["rk"]) == [1, 2]
        assert list(table["name"]) == ["Perfect", "Lucky"]

    def test_speed_metrics_rank_ascending(self, df):
        table = top_table(df, SummaryConfig(metric="avg_ms_per_move", min_games=1))
        assert table["name"].iloc[-1] == "Perfect"
        assert "Idle" not in set(table["name"])

    def test_unknown_metric(self, df):
        with pytest.raises(ValueError):
            top_table(df, SummaryConfig(metric="elo"))  # type: ignore[arg-type]

    def test_outcome_rates(self, df):
        rates = outcome_rates(df).set_index("name")
        assert rates.loc["Perfect", "loss_rate"] == 0.0
        assert rates.loc["Random", "loss_rate"] == pytest.approx(4 / 6)
        assert rates.loc["Lucky", "x_share_of_wins"] == pytest.approx(1.0)
        # No games: zeros, not NaN
        assert rates.loc["Idle"].tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_unbeaten_needs_games(self, df):
        assert unbeaten(df) == ["Perfect"]

    def test_numeric_summary(self, df):
        desc = numeric_summary(df)
        assert "games" in desc.index
        assert desc.loc["games", "max"] == 6


class TestPlots:

    def test_writes_pngs(self, df, tmp_path):
        outdir = tmp_path / "figs"
        bar = plot_top_bar(df, outdir, metric="ppg", top_n=3, show=False)
        scatter = plot_scatter(df, outdir, x="avg_ms_per_move", y="ppg", show=False)
        outcomes = plot_outcomes(outcome_rates(df), outdir, show=False)
        for path in (bar, scatter, outcomes):
            assert path is not None and path.exists()

    def test_skips_missing_columns(self, df, tmp_path):
        assert plot_top_bar(df, tmp_path, metric="elo", top_n=3, show=False) is None
        assert plot_outcomes(pd.DataFrame(), tmp_path, show=False) is None

    def test_top_bar_follows_table_order_for_speed_metric(self, tmp_path, monkeypatch):
        speed = pd.DataFrame({
            "name": ["Slow", "Fast", "Medium"],
            "games": [4, 4, 4], "wins": [2, 1, 0], "draws": [2, 2, 4], "losses": [0, 1, 0],
            "avg_ms_per_move": [50.0, 1.0, 5.0],
        })
        drawn = []
        monkeypatch.setattr(chart.plt, "bar", lambda names, values: drawn.extend(names))

        plot_top_bar(speed, tmp_path, metric="avg_ms_per_move", top_n=1, show=False)

        expected = top_table(speed, SummaryConfig(metric="avg_ms_per_move", top_n=1))["name"].tolist()
        assert drawn == expected == ["Fast"]


class TestCli:

    def test_analyze_tables_only(self, results_csv, capsys):
        assert analysis_main(["analyze", "--csv", str(results_csv), "--no-plots"]) == 0
        out = capsys.readouterr().out
        assert "Top by strength_wilson_lcb" in out
        assert "Unbeaten: Perfect" in out

    def test_latest_from_dir_with_plots(self, results_csv, tmp_path):
        outdir = tmp_path / "figures"
        code = analysis_main(["--results-dir", str(results_csv.parent), "--outdir", str(outdir)])
        assert code == 0
        assert (outdir / "outcomes.png").exists()

    def test_unknown_command(self):
        assert analysis_main(["bogus"]) == 2

    def test_unknown_metric_is_a_usage_error(self, results_csv, capsys):
        with pytest.raises(SystemExit) as exc:
            analysis_main(["analyze", "--csv", str(results_csv), "--metric", "elo", "--no-plots"])
        assert exc.value.code == 2
        err = capsys.readouterr().err
        assert "invalid choice" in err and "elo" in err

    def test_speed_metric_ranks_fastest_first(self, results_csv, capsys):
        args = ["analyze", "--csv", str(results_csv), "--metric", "avg_ms_per_move", "--top", "1", "--no-plots"]
        assert analysis_main(args) == 0
        out = capsys.readouterr().out
        table = out.split("=== Top by avg_ms_per_move ===")[1].split("===")[0]
        assert "Perfect" not in table
