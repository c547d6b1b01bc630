"""Tests for the flowcast command line."""

import json

from flowcast.cli.main import cli


class TestForecast:
    """Tests for forecast and upcoming commands."""

    def test_forecast_table(self, invoke):
        result = invoke("forecast")

        assert result.exit_code == 0
        assert "Cash flow forecast from 2024-01-15 (31 days)" in result.output
        assert "NEGATIVE" in result.output
        assert "$1,450.00" in result.output

    def test_forecast_json(self, invoke):
        result = invoke("forecast", "--days", "5", "--json")

        assert result.exit_code == 0
        days = json.loads(result.output)
        assert len(days) == 6
        assert days[0]["running_balance"] == "950.00"
        assert days[1]["running_balance"] == "-550.00"
        assert days[1]["is_negative"] is True

    def test_forecast_transactions(self, invoke):
        result = invoke("forecast", "--days", "3", "-t")

        assert result.exit_code == 0
        assert "Rent" in result.output
        assert "[Housing]" in result.output

    def test_forecast_horizon_from_environment(self, cli_runner, snapshot_file):
        result = cli_runner.invoke(
            cli,
            ["--data-path", str(snapshot_file), "--today", "2024-01-15", "forecast"],
            env={"FLOWCAST_HORIZON_DAYS": "10"},
        )

        assert result.exit_code == 0
        assert "(11 days)" in result.output

    def test_upcoming(self, invoke):
        result = invoke("upcoming")

        assert result.exit_code == 0
        assert "Gym" in result.output
        assert "Due today!" in result.output
        assert "Due tomorrow" in result.output

    def test_upcoming_none_due(self, cli_runner, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps({"current_balance": 10}), encoding="utf-8")

        result = cli_runner.invoke(cli, ["--data-path", str(path), "upcoming", "--days", "3"])

        assert result.exit_code == 0
        assert "No payments due in the next 3 days." in result.output


class TestSummary:
    """Tests for summary, overview and goals commands."""

    def test_summary_table(self, invoke):
        result = invoke("summary")

        assert result.exit_code == 0
        assert "Financial summary as of 2024-01-15" in result.output
        assert "$2,000.00" in result.output
        assert "Warning: balance goes negative in 1 day(s)" in result.output
        assert "Account overview" not in result.output

    def test_summary_json(self, invoke):
        result = invoke("summary", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "current_balance": "1000.00",
            "monthly_income": "2000.00",
            "monthly_expenses": "1550.00",
            "total_budget": "500.00",
            "net_income": "450.00",
            "end_of_month_balance": "1450.00",
            "lowest_balance": "-550.00",
            "days_until_negative": 1,
        }

    def test_summary_with_accounts(self, invoke):
        result = invoke("summary", "--accounts", "--json")

        assert result.exit_code == 0
        assert json.loads(result.output)["overview"]["net_worth"] == "-1500.00"

    def test_overview(self, invoke):
        result = invoke("overview")

        assert result.exit_code == 0
        assert "Credit utilization" in result.output
        assert "50.00%" in result.output

    def test_overview_json(self, invoke):
        result = invoke("overview", "--json")

        data = json.loads(result.output)
        assert data["weighted_apr"] == "21.20"
        assert data["liquid_cash"] == "1000.00"
        assert data["total_minimum_payments"] == "75.00"

    def test_goals(self, invoke):
        result = invoke("goals")

        assert result.exit_code == 0
        assert "Emergency Fund" in result.output
        assert "20.00%" in result.output
        assert "$800.00 to go" in result.output
        assert "needs $133.33/month for 6 month(s)" in result.output


class TestOptimize:
    """Tests for optimize command."""

    def test_optimize_table(self, invoke):
        result = invoke("optimize", "--extra", "500")

        assert result.exit_code == 0
        assert "Payment plan (avalanche)" in result.output
        assert "Highest APR (24.00%)" in result.output
        assert "Estimated debt-free in 5 month(s)" in result.output

    def test_optimize_json_with_goal(self, invoke):
        result = invoke("optimize", "--extra", "$3,000", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_extra_allocated"] == "2700.00"
        assert data["remaining_extra"] == "300.00"
        assert data["recommendations"][-1]["target_kind"] == "goal"
        assert data["recommendations"][-1]["amount"] == "200.00"

    def test_optimize_without_goals(self, invoke):
        result = invoke("optimize", "--extra", "3000", "--no-goals", "--json")

        assert json.loads(result.output)["remaining_extra"] == "500.00"

    def test_optimize_snowball(self, invoke):
        result = invoke("optimize", "--extra", "100", "--strategy", "snowball", "--json")

        data = json.loads(result.output)
        assert data["strategy_used"] == "snowball"
        assert data["recommendations"][2]["target_name"] == "Store Card"

    def test_optimize_invalid_amount(self, invoke):
        result = invoke("optimize", "--extra", "lots")

        assert result.exit_code == 1
        assert "Invalid --extra amount" in result.output

    def test_optimize_negative_amount(self, invoke):
        result = invoke("optimize", "--extra=-5")

        assert result.exit_code == 1
        assert "must not be negative" in result.output

    def test_optimize_unknown_strategy(self, invoke):
        result = invoke("optimize", "--extra", "100", "--strategy", "greedy")

        assert result.exit_code == 2


class TestCalendar:
    """Tests for calendar command."""

    def test_calendar_table(self, invoke):
        result = invoke("calendar")

        assert result.exit_code == 0
        assert "2024-01-18" in result.output
        assert "Visa" in result.output
        assert "minimum" in result.output

    def test_calendar_json(self, invoke):
        result = invoke("calendar", "--json")

        entries = json.loads(result.output)
        assert [entry["date"] for entry in entries] == [
            "2024-01-15",
            "2024-01-16",
            "2024-01-18",
            "2024-01-25",
        ]
        assert entries[2]["payments"][0]["kind"] == "minimum_payment"


class TestErrors:
    """Tests for error reporting."""

    def test_help_does_not_need_snapshot(self, cli_runner, tmp_path):
        result = cli_runner.invoke(cli, ["--data-path", str(tmp_path / "missing.json"), "--help"])

        assert result.exit_code == 0
        assert "forecast" in result.output

    def test_missing_snapshot(self, cli_runner, tmp_path):
        result = cli_runner.invoke(cli, ["--data-path", str(tmp_path / "missing.json"), "summary"])

        assert result.exit_code == 1
        assert "Error: Snapshot file not found" in result.output

    def test_invalid_record(self, cli_runner, tmp_path, snapshot_data):
        snapshot_data["income"][0]["frequency"] = "fortnightly"
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(snapshot_data), encoding="utf-8")

        result = cli_runner.invoke(cli, ["--data-path", str(path), "forecast"])

        assert result.exit_code == 1
        assert "unknown frequency 'fortnightly'" in result.output

    def test_invalid_today(self, cli_runner, snapshot_file):
        result = cli_runner.invoke(
            cli, ["--data-path", str(snapshot_file), "--today", "whenever", "forecast"]
        )

        assert result.exit_code == 1
        assert "Invalid --today date" in result.output

    def test_data_path_from_environment(self, cli_runner, snapshot_file):
        result = cli_runner.invoke(
            cli,
            ["--today", "2024-01-15", "calendar", "--json"],
            env={"FLOWCAST_DATA_PATH": str(snapshot_file)},
        )

        assert result.exit_code == 0
        assert len(json.loads(result.output)) == 4
