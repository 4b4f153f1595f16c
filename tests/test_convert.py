# 변환 커맨드 / 스캐너 / 설정 테스트

import io

import pytest
from pydantic import ValidationError

from entity_agent.commands.convert import PARSE_ERROR_MESSAGE, convert_sql, run_convert
from entity_agent.config import Settings
from entity_agent.options import GenerationOptions
from entity_agent.scanner import ScanConfig, scan_sql_files


@pytest.mark.unit
class TestConvertSql:

    def test_returns_java(self, example_sql):
        assert "public class UserAccount {" in convert_sql(example_sql)

    def test_returns_fixed_message_on_failure(self):
        assert convert_sql("SELECT * FROM x;") == PARSE_ERROR_MESSAGE


@pytest.mark.unit
class TestRunConvert:

    def test_writes_java_file(self, sql_file, tmp_path, default_options):
        out_dir = tmp_path / "java"
        report = run_convert(str(sql_file), out_dir=out_dir, options=default_options)
        assert report.ok
        assert report.written == [out_dir / "UserAccount.java"]
        assert "@Entity" in (out_dir / "UserAccount.java").read_text(encoding="utf-8")

    def test_directory_input(self, tmp_path, default_options):
        src = tmp_path / "db"
        (src / "nested").mkdir(parents=True)
        (src / "a.sql").write_text("CREATE TABLE alpha (id INT);", encoding="utf-8")
        (src / "nested" / "b.sql").write_text("CREATE TABLE beta (id INT);", encoding="utf-8")
        (src / "notes.sql").write_text("SELECT 1;", encoding="utf-8")
        out_dir = tmp_path / "java"

        report = run_convert(str(src), out_dir=out_dir, options=default_options)
        assert report.ok
        assert sorted(p.name for p in report.written) == ["Alpha.java", "Beta.java"]

    def test_unparseable_file_is_reported(self, tmp_path, default_options):
        bad = tmp_path / "bad.sql"
        bad.write_text("SELECT * FROM x;", encoding="utf-8")
        report = run_convert(str(bad), out_dir=tmp_path / "java", options=default_options)
        assert not report.ok
        assert report.failed == [str(bad)]
        assert report.written == []

    def test_stdin_to_stdout(self, monkeypatch, capsys, example_sql, tmp_path):
        monkeypatch.setattr("sys.stdin", io.StringIO(example_sql))
        opts = GenerationOptions(lombok=False)
        report = run_convert("-", out_dir=tmp_path / "java", options=opts, to_stdout=True)
        assert report.ok
        assert report.written == []
        assert "public String getUserName() {" in capsys.readouterr().out
        assert not (tmp_path / "java").exists()

    def test_verify_passes(self, sql_file, tmp_path, default_options):
        report = run_convert(str(sql_file), out_dir=tmp_path / "java", options=default_options, verify=True)
        assert report.ok


@pytest.mark.unit
class TestScanner:

    def test_file_returned_as_is(self, sql_file):
        assert scan_sql_files(sql_file) == [sql_file]

    def test_excluded_dirs_and_extensions(self, tmp_path):
        (tmp_path / "node_modules").mkdir()
        (tmp_path / "node_modules" / "x.sql").write_text("CREATE TABLE x (id INT);", encoding="utf-8")
        (tmp_path / "schema.ddl").write_text("create table y (id int);", encoding="utf-8")
        (tmp_path / "readme.txt").write_text("CREATE TABLE z (id INT);", encoding="utf-8")
        assert scan_sql_files(tmp_path) == [tmp_path / "schema.ddl"]

    def test_custom_extensions(self, tmp_path):
        (tmp_path / "schema.psql").write_text("CREATE TABLE y (id INT);", encoding="utf-8")
        assert scan_sql_files(tmp_path, ScanConfig(exts=(".psql",))) == [tmp_path / "schema.psql"]


@pytest.mark.unit
class TestSettings:

    def test_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENTITY_LOMBOK", "false")
        monkeypatch.setenv("ENTITY_JACKSON", "false")
        opts = GenerationOptions.from_settings(Settings())
        assert opts.lombok is False
        assert opts.jackson is False
        assert opts.jpa is True
        assert opts.effective_generate_accessors is True

    def test_options_are_frozen(self):
        opts = GenerationOptions()
        with pytest.raises(ValidationError):
            opts.jpa = False
