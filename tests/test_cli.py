# CLI 테스트 (Typer CliRunner)
# 실행: pytest tests/test_cli.py -v

import pytest
from typer.testing import CliRunner

from entity_agent.cli import app, convert_app

runner = CliRunner()


@pytest.mark.cli
class TestConvertCommand:

    def test_writes_file(self, sql_file, tmp_path):
        out_dir = tmp_path / "out"
        result = runner.invoke(app, ["convert", str(sql_file), "--out-dir", str(out_dir)])
        assert result.exit_code == 0, result.output
        assert (out_dir / "UserAccount.java").exists()

    def test_stdout_plain_class(self, sql_file):
        result = runner.invoke(app, [
            "convert", str(sql_file), "--stdout",
            "--no-jpa", "--no-lombok", "--no-jackson", "--accessors",
        ])
        assert result.exit_code == 0, result.output
        assert "public Long getId() {" in result.output
        assert "@Entity" not in result.output

    def test_lombok_flag_suppresses_accessors(self, sql_file):
        result = runner.invoke(app, ["convert", str(sql_file), "--stdout", "--lombok", "--accessors"])
        assert result.exit_code == 0, result.output
        assert "@Data" in result.output
        assert "getId" not in result.output

    def test_stdin(self, example_sql):
        result = runner.invoke(app, ["convert", "-", "--stdout"], input=example_sql)
        assert result.exit_code == 0, result.output
        assert "class UserAccount" in result.output

    def test_parse_failure_exits_with_1(self, tmp_path):
        bad = tmp_path / "bad.sql"
        bad.write_text("SELECT * FROM x;", encoding="utf-8")
        result = runner.invoke(app, ["convert", str(bad), "--out-dir", str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "Could not parse the SQL" in result.output

    def test_missing_path_is_usage_error(self, tmp_path):
        result = runner.invoke(app, ["convert", str(tmp_path / "nope.sql")])
        assert result.exit_code == 2

    def test_verify_and_summary(self, sql_file):
        result = runner.invoke(app, ["convert", str(sql_file), "--stdout", "--verify", "--summary"])
        assert result.exit_code == 0, result.output
        assert "LocalDateTime" in result.output


@pytest.mark.cli
class TestExampleCommand:

    def test_prints_example_sql(self):
        result = runner.invoke(app, ["example"])
        assert result.exit_code == 0
        assert "CREATE TABLE user_account" in result.output

    def test_prints_converted_example(self):
        result = runner.invoke(app, ["--log-level", "DEBUG", "example", "--convert"])
        assert result.exit_code == 0
        assert "public class UserAccount {" in result.output


@pytest.mark.cli
class TestSqlToJava:

    def test_single_command_entry_point(self, sql_file):
        result = runner.invoke(convert_app, [str(sql_file), "--stdout", "--no-lombok"])
        assert result.exit_code == 0, result.output
        assert "public String getUserName() {" in result.output
