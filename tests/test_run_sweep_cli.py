from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from ruin.cli import run_sweep


def _flat(output: str) -> str:
    # Usage errors may be drawn in a wrapped box; compare on words only.
    return " ".join(output.replace("│", " ").split())


def test_cli_prints_summary_table() -> None:
    runner = CliRunner()
    result = runner.invoke(
        run_sweep.app,
        ["--players", "5", "--max-games", "20", "--strategy", "bold", "--seed", "3"],
    )

    assert result.exit_code == 0, result.output
    assert "Results: Bold Play (Bet All)" in result.output
    assert "fraction_ruined" in result.output
    assert "0.4900" in result.output


def test_cli_distribution_view() -> None:
    runner = CliRunner()
    result = runner.invoke(
        run_sweep.app,
        [
            "--players",
            "20",
            "--max-games",
            "30",
            "--strategy",
            "kelly",
            "--kelly-pct",
            "50",
            "--seed",
            "11",
            "--workers",
            "2",
            "--distribution-index",
            "48",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Win Probability (p): 0.49 (variance = 1.000)" in result.output
    assert "20000-∞" in result.output


def test_cli_rejects_out_of_range_index() -> None:
    runner = CliRunner()
    result = runner.invoke(
        run_sweep.app,
        ["--players", "2", "--max-games", "2", "--distribution-index", "49"],
    )
    assert result.exit_code == 2
    assert "--distribution-index" in result.output
    assert "out of range" in _flat(result.output)


def test_cli_profile(tmp_path: Path) -> None:
    path = tmp_path / "profiles.yaml"
    path.write_text(
        "profiles:\n"
        "  tiny:\n"
        "    max_games: 5\n"
        "    players_per_probability: 3\n"
        "    starting_bankroll: 20\n"
        "    strategy:\n"
        "      name: flat\n"
        "      flat_bet_amount: 4\n",
        encoding="utf-8",
    )
    runner = CliRunner()
    ok = runner.invoke(run_sweep.app, ["--profile", "tiny", "--profiles-path", str(path), "--seed", "1"])
    missing = runner.invoke(run_sweep.app, ["--profile", "nope", "--profiles-path", str(path)])

    assert ok.exit_code == 0, ok.output
    assert "Results: Flat $4 Bet" in ok.output
    assert missing.exit_code == 2
    assert "--profile" in missing.output
    assert "not found" in _flat(missing.output)


def test_cli_rejects_bad_worker_hint() -> None:
    runner = CliRunner()
    result = runner.invoke(
        run_sweep.app,
        ["--players", "1", "--max-games", "1", "--workers", "many"],
    )
    assert result.exit_code == 2
    assert "--workers" in result.output
    assert "'auto' or a positive integer" in _flat(result.output)


def test_cli_rejects_negative_seed() -> None:
    runner = CliRunner()
    result = runner.invoke(
        run_sweep.app,
        ["--players", "1", "--max-games", "1", "--seed", "-1"],
    )
    assert result.exit_code == 2
    assert "--seed" in result.output


def test_cli_rejects_non_mapping_profile(tmp_path: Path) -> None:
    path = tmp_path / "profiles.yaml"
    path.write_text("profiles:\n  baseline: 5\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(run_sweep.app, ["--profile", "baseline", "--profiles-path", str(path)])

    assert result.exit_code == 2
    assert "must be a mapping" in _flat(result.output)
