"""Tests for the salary-report CLI commands."""

import json

import pytest
import yaml
from click.testing import CliRunner

from salaryreport import __version__
from salaryreport.cli.__main__ import cli


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point the CLI at an empty config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("SALARY_REPORT_CONFIG_PATH", str(config_dir))
    return {"config_dir": config_dir}


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


class TestCalc:
    """Tests for 'calc'."""

    def test_json_defaults(self, runner, isolated_env):
        result = runner.invoke(cli, ["calc", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["inputs"] == {"pre_tax": 22_000_000, "dependents": 1, "non_taxable": 1_200_000}
        assert data["period"] == "annual"
        assert data["report"]["pension"] == pytest.approx(936_000)
        assert data["report"]["after_tax"] == pytest.approx(19_547_406.835472)

    def test_json_options(self, runner, isolated_env):
        result = runner.invoke(cli, [
            "calc", "--salary", "50000000", "--dependents", "3", "--non-taxable", "2400000",
            "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        report = json.loads(result.output)["report"]
        assert report["pre_tax"] == 50_000_000
        assert report["family_deduction"] == 4_500_000
        assert report["non_tax_deduction"] == 2_400_000

    def test_monthly(self, runner, isolated_env):
        result = runner.invoke(cli, ["calc", "--monthly", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["period"] == "monthly"
        assert data["report"]["pension"] == pytest.approx(78_000)

    def test_csv(self, runner, isolated_env):
        result = runner.invoke(cli, ["calc", "--format", "csv"])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0].startswith("pension,health,care,hire,")
        assert lines[1].startswith("936000.0,")

    def test_text(self, runner, isolated_env):
        result = runner.invoke(cli, ["calc"])

        assert result.exit_code == 0, result.output
        assert "Net Pay" in result.output
        assert "19,547,407" in result.output
        assert "Taxable Base" in result.output

    def test_zero_dependents_rejected(self, runner, isolated_env):
        result = runner.invoke(cli, ["calc", "--dependents", "0"])
        assert result.exit_code == 2

    def test_negative_salary_rejected(self, runner, isolated_env):
        result = runner.invoke(cli, ["calc", "--salary", "-1"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("value", ["nan", "inf"])
    def test_non_finite_salary_rejected(self, runner, isolated_env, value):
        result = runner.invoke(cli, ["calc", "--salary", value, "--format", "json"])

        assert result.exit_code == 2
        assert "not a finite number" in result.output

    def test_non_finite_allowance_rejected(self, runner, isolated_env):
        result = runner.invoke(cli, ["calc", "--non-taxable", "nan"])
        assert result.exit_code == 2

    def test_uses_profile_defaults(self, runner, isolated_env):
        profile = {"defaults": {"pre_tax": 30_000_000, "dependents": 2}}
        (isolated_env["config_dir"] / "profile.yaml").write_text(yaml.dump(profile))

        result = runner.invoke(cli, ["calc", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["inputs"]["pre_tax"] == 30_000_000
        assert data["inputs"]["dependents"] == 2

    def test_invalid_profile(self, runner, isolated_env):
        profile = {"defaults": {"dependents": 0}}
        (isolated_env["config_dir"] / "profile.yaml").write_text(yaml.dump(profile))

        result = runner.invoke(cli, ["calc"])

        assert result.exit_code == 1
        assert "defaults.dependents" in result.output

    def test_settings_format_preference(self, runner, isolated_env):
        (isolated_env["config_dir"] / "settings.json").write_text(
            json.dumps({"default_output_format": "json"})
        )

        result = runner.invoke(cli, ["calc"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["report"]["hire"] == pytest.approx(166_400)

    def test_invalid_settings_format(self, runner, isolated_env):
        (isolated_env["config_dir"] / "settings.json").write_text(
            json.dumps({"default_output_format": "xml"})
        )

        result = runner.invoke(cli, ["calc"])

        assert result.exit_code == 1
        assert "default_output_format" in result.output


class TestTable:
    """Tests for 'table'."""

    def test_csv_rows(self, runner, isolated_env):
        result = runner.invoke(cli, [
            "table", "--start", "20000000", "--stop", "40000000", "--step", "10000000",
            "--format", "csv",
        ])

        assert result.exit_code == 0, result.output
        assert len(result.output.splitlines()) == 4

    def test_json(self, runner, isolated_env):
        result = runner.invoke(cli, [
            "table", "--start", "20000000", "--stop", "30000000", "--step", "10000000",
            "--dependents", "2", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["dependents"] == 2
        assert [r["pre_tax"] for r in data["reports"]] == [20_000_000, 30_000_000]
        assert data["reports"][0]["family_deduction"] == 3_000_000

    def test_text(self, runner, isolated_env):
        result = runner.invoke(cli, ["table", "--monthly"])

        assert result.exit_code == 0, result.output
        assert "Monthly Take-Home Table" in result.output

    def test_bad_step(self, runner, isolated_env):
        result = runner.invoke(cli, ["table", "--step", "0"])

        assert result.exit_code == 2
        assert "step must be positive" in result.output

    def test_row_limit(self, runner, isolated_env):
        result = runner.invoke(cli, ["table", "--start", "0", "--stop", "1000000000000", "--step", "1"])

        assert result.exit_code == 2
        assert "more than the limit" in result.output

    def test_non_finite_step_rejected(self, runner, isolated_env):
        result = runner.invoke(cli, ["table", "--step", "inf"])
        assert result.exit_code == 2

    def test_fractional_step_includes_stop(self, runner, isolated_env):
        result = runner.invoke(cli, ["table", "--start", "0", "--stop", "1", "--step", "0.1", "--format", "json"])

        assert result.exit_code == 0, result.output
        rows = json.loads(result.output)["reports"]
        assert len(rows) == 11
        assert rows[-1]["pre_tax"] == 1


class TestCompare:
    """Tests for 'compare'."""

    def test_json_dependents(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", "--dependents", "1", "--vs-dependents", "2", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["base"]["inputs"]["dependents"] == 1
        assert data["scenario"]["inputs"]["dependents"] == 2
        assert data["scenario"]["inputs"]["pre_tax"] == 22_000_000
        assert data["deltas"]["family_deduction"] == 1_500_000
        assert data["deltas"]["after_tax"] == pytest.approx(99_000)

    def test_text(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", "--vs-salary", "30000000"])

        assert result.exit_code == 0, result.output
        assert "Salary Report Comparison" in result.output
        assert "Net Pay" in result.output

    def test_json_from_settings_preference(self, runner, isolated_env):
        runner.invoke(cli, ["settings", "format", "json"])
        result = runner.invoke(cli, ["compare", "--vs-dependents", "2"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["scenario"]["inputs"]["dependents"] == 2

    def test_csv_preference_falls_back_to_text(self, runner, isolated_env):
        runner.invoke(cli, ["settings", "format", "csv"])
        result = runner.invoke(cli, ["compare", "--vs-dependents", "2"])

        assert result.exit_code == 0, result.output
        assert "Salary Report Comparison" in result.output

    def test_csv_format_rejected(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", "--format", "csv"])
        assert result.exit_code == 2

    def test_non_finite_scenario_rejected(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", "--vs-salary", "inf"])
        assert result.exit_code == 2


class TestProfileCommands:
    """Tests for 'profile'."""

    def test_init_and_show(self, runner, isolated_env):
        result = runner.invoke(cli, ["profile", "init"])
        assert result.exit_code == 0, result.output

        profile = yaml.safe_load((isolated_env["config_dir"] / "profile.yaml").read_text())
        assert profile == {"defaults": {"pre_tax": 22_000_000, "dependents": 1, "non_taxable": 1_200_000}}

        result = runner.invoke(cli, ["profile", "show"])
        assert result.exit_code == 0, result.output
        assert "pre_tax: 22000000" in result.output

    def test_init_refuses_overwrite(self, runner, isolated_env):
        runner.invoke(cli, ["profile", "init"])
        result = runner.invoke(cli, ["profile", "init"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_set_then_calc(self, runner, isolated_env):
        result = runner.invoke(cli, ["profile", "set", "defaults.pre_tax", "45000000"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["calc", "--format", "json"])
        assert json.loads(result.output)["inputs"]["pre_tax"] == 45_000_000

    def test_set_unknown_key(self, runner, isolated_env):
        result = runner.invoke(cli, ["profile", "set", "salary", "1"])
        assert result.exit_code == 2

    def test_set_invalid_value(self, runner, isolated_env):
        result = runner.invoke(cli, ["profile", "set", "defaults.dependents", "0"])

        assert result.exit_code == 1
        assert not (isolated_env["config_dir"] / "profile.yaml").exists()

    def test_set_unparseable_value(self, runner, isolated_env):
        result = runner.invoke(cli, ["profile", "set", "defaults.dependents", "two"])
        assert result.exit_code == 2

    @pytest.mark.parametrize("value", ["inf", "nan"])
    def test_set_non_finite_value(self, runner, isolated_env, value):
        result = runner.invoke(cli, ["profile", "set", "defaults.pre_tax", value])

        assert result.exit_code == 1
        assert "finite number" in result.output
        assert not (isolated_env["config_dir"] / "profile.yaml").exists()

    def test_show_without_profile(self, runner, isolated_env):
        result = runner.invoke(cli, ["profile", "show"])

        assert result.exit_code == 0, result.output
        assert "(built-in)" in result.output


class TestSettingsCommands:
    """Tests for 'settings'."""

    def test_format_set_and_clear(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "format", "csv"])
        assert result.exit_code == 0, result.output
        settings = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert settings["default_output_format"] == "csv"

        result = runner.invoke(cli, ["settings", "format", "--clear"])
        assert result.exit_code == 0, result.output
        settings = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert "default_output_format" not in settings

    def test_format_rejects_unknown(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "format", "xml"])
        assert result.exit_code == 2

    def test_show(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 0, result.output
        assert "default_output_format: text" in result.output

    def test_profile_set_and_clear(self, runner, isolated_env, tmp_path):
        custom = tmp_path / "elsewhere" / "profile.yaml"

        result = runner.invoke(cli, ["settings", "profile", str(custom)])
        assert result.exit_code == 0, result.output
        assert "profile init" in result.output
        settings = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert settings["profile"] == str(custom.resolve())

        runner.invoke(cli, ["profile", "init"])
        assert custom.exists()

        result = runner.invoke(cli, ["settings", "profile", "--clear"])
        assert result.exit_code == 0, result.output
        settings = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert "profile" not in settings
        assert str(isolated_env["config_dir"] / "profile.yaml") in result.output

    def test_profile_show_path(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "profile"])

        assert result.exit_code == 0, result.output
        assert "profile.yaml" in result.output
