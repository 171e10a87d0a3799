"""Tests for CLI commands."""

import click
import pytest

from txflow.cli.filter_options import resolve_cli_criteria, resolve_cli_window
from txflow.cli.main import cli


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_accounts_lists_sample_accounts(cli_runner):
    result = cli_runner.invoke(cli, ["accounts"])

    assert result.exit_code == 0
    assert "Nominee Account Alpha" in result.output
    assert "Offshore Account Delta" in result.output


def test_transactions_amount_filter(cli_runner):
    result = cli_runner.invoke(
        cli, ["transactions", "--min-amount", "9000", "--max-amount", "9999"]
    )

    assert result.exit_code == 0
    assert "Found 6 transaction(s)" in result.output
    assert "tx-8" in result.output


def test_transactions_no_matches(cli_runner):
    result = cli_runner.invoke(cli, ["transactions", "--min-amount", "1000000"])

    assert result.exit_code == 0
    assert "No transactions found." in result.output


def test_transactions_flag_and_filter_flagged(cli_runner):
    result = cli_runner.invoke(cli, ["transactions", "--flag", "tx-8", "--flagged"])

    assert result.exit_code == 0
    assert "Found 1 transaction(s)" in result.output
    assert "[!]" in result.output


def test_transactions_flag_unknown(cli_runner):
    result = cli_runner.invoke(cli, ["transactions", "--flag", "tx-999"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_transactions_inverted_range(cli_runner):
    result = cli_runner.invoke(
        cli, ["transactions", "--min-amount", "500", "--max-amount", "100"]
    )

    assert result.exit_code == 1
    assert "greater than maximum" in result.output


def test_tree_both_sides(cli_runner):
    result = cli_runner.invoke(cli, ["tree", "acc1"])

    assert result.exit_code == 0
    assert "Nominee Account Alpha (acc1)" in result.output
    assert "Money sent" in result.output
    assert "Money received" in result.output
    assert "-> Shell Corp Beta (acc2)" in result.output


def test_tree_by_name_outgoing_only(cli_runner):
    result = cli_runner.invoke(
        cli, ["tree", "Cash Business Gamma", "--direction", "out"]
    )

    assert result.exit_code == 0
    assert "Money sent" in result.output
    assert "Money received" not in result.output


def test_tree_with_empty_filter(cli_runner):
    result = cli_runner.invoke(cli, ["tree", "acc1", "--min-amount", "1000000"])

    assert result.exit_code == 0
    assert "No counterparties found." in result.output


def test_tree_unknown_account(cli_runner):
    result = cli_runner.invoke(cli, ["tree", "nobody"])

    assert result.exit_code == 1
    assert "Account 'nobody' not found" in result.output


def test_tree_respects_max_depth(cli_runner):
    result = cli_runner.invoke(cli, ["--max-depth", "1", "tree", "acc1", "--direction", "out"])

    assert result.exit_code == 0
    nested = [line for line in result.output.splitlines() if line.startswith("    ")]
    assert nested == []


def test_invalid_max_depth(cli_runner):
    result = cli_runner.invoke(cli, ["--max-depth", "0", "tree", "acc1"])

    assert result.exit_code == 1
    assert "max_depth must be a positive integer" in result.output


def test_flow_window(cli_runner):
    result = cli_runner.invoke(
        cli,
        [
            "flow",
            "--start-date",
            "2024-08-01",
            "--end-date",
            "2024-08-31",
            "--balances-for",
            "acc3",
        ],
    )

    assert result.exit_code == 0
    assert "flow band(s)" in result.output
    assert "2024-07-" not in result.output
    assert "Balance history for Cash Business Gamma" in result.output


def test_flow_empty_window(cli_runner):
    result = cli_runner.invoke(
        cli, ["flow", "--start-date", "2030-01-01", "--end-date", "2030-01-31"]
    )

    assert result.exit_code == 0
    assert "No flows found." in result.output


def test_flow_default_window_is_padded(cli_runner):
    result = cli_runner.invoke(cli, ["flow"])

    assert result.exit_code == 0
    assert "Window: 2024-06-29 to 2024-10-02" in result.output
    assert "flow band(s)" in result.output


def test_flow_date_padding_days_option(cli_runner):
    result = cli_runner.invoke(cli, ["--date-padding-days", "5", "flow"])

    assert result.exit_code == 0
    assert "Window: 2024-06-26 to 2024-10-05" in result.output


def test_flow_date_padding_days_from_env(cli_runner):
    result = cli_runner.invoke(cli, ["flow"], env={"TXFLOW_DATE_PADDING_DAYS": "0"})

    assert result.exit_code == 0
    assert "Window: 2024-07-01 to 2024-09-30" in result.output


def test_flow_explicit_window_is_not_padded(cli_runner):
    result = cli_runner.invoke(cli, ["flow", "--start-date", "2024-08-01"])

    assert result.exit_code == 0
    assert "Window: 2024-08-01 to open" in result.output


def test_invalid_date_padding_days(cli_runner):
    result = cli_runner.invoke(cli, ["--date-padding-days", "-1", "flow"])

    assert result.exit_code == 1
    assert "date_padding_days must be zero or positive" in result.output


def test_flow_invalid_date(cli_runner):
    result = cli_runner.invoke(cli, ["flow", "--start-date", "xyzzy"])

    assert result.exit_code == 1
    assert "Invalid start date" in result.output


def test_resolve_cli_window_rejects_reversed_range(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_window(_ctx(), start_date="2024-08-01", end_date="2024-07-01")

    assert excinfo.value.exit_code == 1
    assert "must not be after" in capsys.readouterr().err


def test_resolve_cli_window_unset():
    assert resolve_cli_window(_ctx(), start_date=None, end_date=None) is None


def test_resolve_cli_criteria_fills_missing_bound(sample_store):
    criteria = resolve_cli_criteria(
        _ctx(),
        sample_store,
        min_amount="1000",
        max_amount=None,
        min_flow=None,
        max_flow=None,
        accounts=("Shell Corp Beta",),
    )

    low, high = criteria.amount_range
    assert str(low) == "1000"
    assert str(high) == "50000.0"
    assert criteria.flow_range is None
    assert criteria.active_accounts == frozenset({"acc2"})
