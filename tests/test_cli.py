"""End-to-end tests for the pennywise CLI."""

from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pennywise.cli import app
from pennywise.state import load_state

runner = CliRunner()


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated config and database, initialized via 'pennywise init'."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    path = tmp_path / "data" / "pennywise.db"
    monkeypatch.setattr("pennywise.store.schema.DEFAULT_DB_PATH", path)

    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0, result.output
    return path


class TestInit:
    """Tests for the init command."""

    def test_creates_database_and_config(self, db_path: Path, tmp_path: Path) -> None:
        """Should create both files."""
        assert db_path.exists()
        assert (tmp_path / "config" / "pennywise" / "config.toml").exists()

    def test_refuses_to_overwrite(self, db_path: Path) -> None:
        """Should fail without --force when files exist."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_commands_require_init(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should point the user to init when no database exists."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
        monkeypatch.setattr("pennywise.store.schema.DEFAULT_DB_PATH", tmp_path / "none.db")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 1
        assert "pennywise init" in result.output

    def test_broken_config_is_reported(self, db_path: Path, tmp_path: Path) -> None:
        """Should report an unreadable config file instead of crashing."""
        config_path = tmp_path / "config" / "pennywise" / "config.toml"
        config_path.write_text("db_path = [broken", encoding="utf-8")

        for args in [["list"], ["export"], ["init", "--force"]]:
            result = runner.invoke(app, args)
            assert result.exit_code == 1, args
            assert "Config error" in result.output
            assert result.exception is None or isinstance(result.exception, SystemExit)


class TestTransactionCommands:
    """Tests for add and list."""

    def test_add_persists_transaction(self, db_path: Path) -> None:
        """Should store the transaction in the database."""
        result = runner.invoke(app, ["add", "coffee", "3.5", "--category", "food"])

        assert result.exit_code == 0, result.output
        assert "Transaction added" in result.output
        txn = load_state(db_path).ledger.transactions[0]
        assert txn.description == "coffee"
        assert txn.amount == 3.5
        assert txn.type.value == "expense"
        assert txn.date == date.today().strftime("%d/%m/%Y")

    def test_add_rejection_is_reported(self, db_path: Path) -> None:
        """Should explain the rejection and store nothing."""
        result = runner.invoke(app, ["add", "coffee", "0"])

        assert result.exit_code == 0
        assert "Not added" in result.output
        assert load_state(db_path).ledger.transactions == []

    def test_list_filters(self, db_path: Path) -> None:
        """Should only show matching transactions."""
        runner.invoke(app, ["add", "Paid rent", "800", "--category", "Housing"])
        runner.invoke(app, ["add", "bonus", "300", "--category", "Other", "--income"])

        result = runner.invoke(app, ["list", "--type", "income"])

        assert result.exit_code == 0, result.output
        assert "bonus" in result.output
        assert "Paid rent" not in result.output

    def test_list_search(self, db_path: Path) -> None:
        """Should search descriptions case-insensitively."""
        runner.invoke(app, ["add", "Paid rent", "800", "--category", "Housing"])

        result = runner.invoke(app, ["list", "--search", "RENT"])

        assert "Paid rent" in result.output

    def test_list_invalid_month(self, db_path: Path) -> None:
        """Should reject badly formatted months."""
        result = runner.invoke(app, ["list", "--month", "January"])

        assert result.exit_code == 1
        assert "Invalid month" in result.output

    def test_negative_amount_after_double_dash(self, db_path: Path) -> None:
        """Should read a leading minus as an amount after --, then reject it."""
        result = runner.invoke(app, ["add", "--", "coffee", "-5"])

        assert result.exit_code == 0, result.output
        assert "Not added" in result.output
        assert load_state(db_path).ledger.transactions == []


class TestChartAndExport:
    """Tests for chart and export."""

    def test_chart_shows_every_category(self, db_path: Path) -> None:
        """Should list all seven categories."""
        runner.invoke(app, ["add", "coffee", "3.5", "--category", "Food"])

        for kind in ["bar", "pie"]:
            result = runner.invoke(app, ["chart", "--kind", kind])
            assert result.exit_code == 0, result.output
            for name in ["Housing", "Food", "Transport", "Leisure", "Health", "Savings", "Other"]:
                assert name in result.output

    def test_chart_kind_is_validated(self, db_path: Path) -> None:
        """Should refuse unknown chart kinds and accept any case."""
        result = runner.invoke(app, ["chart", "--kind", "pi"])
        assert result.exit_code == 2

        result = runner.invoke(app, ["chart", "--kind", "PIE"])
        assert result.exit_code == 0, result.output

    def test_export_writes_file(self, db_path: Path, tmp_path: Path) -> None:
        """Should write transactions.csv to the output directory."""
        runner.invoke(app, ["add", "coffee", "3.5", "--category", "Food"])
        out_dir = tmp_path / "out"

        result = runner.invoke(app, ["export", "--output", str(out_dir)])

        assert result.exit_code == 0, result.output
        content = (out_dir / "transactions.csv").read_text(encoding="utf-8")
        today = date.today().strftime("%d/%m/%Y")
        assert content == f"Description,Montant,Catégorie,Type,Date\ncoffee,3.5,Food,expense,{today}"

    def test_export_quote_option(self, db_path: Path, tmp_path: Path) -> None:
        """Should quote descriptions containing commas when asked."""
        runner.invoke(app, ["add", "rent, march", "800", "--category", "Housing"])
        out_dir = tmp_path / "out"

        runner.invoke(app, ["export", "--output", str(out_dir), "--quote"])

        content = (out_dir / "transactions.csv").read_text(encoding="utf-8")
        assert '"rent, march",800,Housing,expense' in content


class TestGoalAndTaskCommands:
    """Tests for goal and task subcommands."""

    def test_goal_add_normalizes_deadline(self, db_path: Path) -> None:
        """Should store day-first deadlines in ISO form."""
        result = runner.invoke(app, ["goal", "add", "Holiday", "1500", "30/06/2025"])

        assert result.exit_code == 0, result.output
        goal = load_state(db_path).goals.goals[0]
        assert goal.deadline == "2025-06-30"
        assert goal.progress == 0

    def test_goal_list_shows_progress(self, db_path: Path) -> None:
        """Should derive progress from Savings expenses."""
        runner.invoke(app, ["goal", "add", "Holiday", "1000", "2025-06-30"])
        runner.invoke(app, ["add", "transfer", "250", "--category", "Savings"])

        result = runner.invoke(app, ["goal", "list"])

        assert result.exit_code == 0, result.output
        assert "Holiday" in result.output
        assert "25%" in result.output

    def test_task_lifecycle(self, db_path: Path) -> None:
        """Should add, toggle and delete tasks by 1-based number."""
        runner.invoke(app, ["task", "add", "Call bank"])
        runner.invoke(app, ["task", "add", "File taxes"])

        result = runner.invoke(app, ["task", "toggle", "2"])
        assert result.exit_code == 0, result.output
        assert load_state(db_path).tasks.tasks[1].completed is True

        result = runner.invoke(app, ["task", "delete", "1"])
        assert result.exit_code == 0, result.output
        tasks = load_state(db_path).tasks.tasks
        assert [t.text for t in tasks] == ["File taxes"]

    def test_task_out_of_range(self, db_path: Path) -> None:
        """Should report unknown task numbers without failing."""
        result = runner.invoke(app, ["task", "toggle", "9"])

        assert result.exit_code == 0
        assert "No task #9" in result.output
