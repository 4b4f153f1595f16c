"""Java 모델 생성: CREATE TABLE SQL → *.java."""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import logging
import sys

from rich.console import Console
from rich.table import Table as RichTable

from entity_agent.config import settings
from entity_agent.java_writer import to_java, write_java
from entity_agent.model import ParseFailure, TableDescription
from entity_agent.options import GenerationOptions
from entity_agent.parsers import CreateTableParser
from entity_agent.scanner import scan_sql_files
from entity_agent.verify import JavaVerificationError, verify_java_model

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

# 파싱 실패 시 사용자에게 보여주는 고정 문구 (실패 종류 분기는 ParseFailure.kind로)
PARSE_ERROR_MESSAGE = "// Error: Could not parse the SQL. Check the syntax."

EXAMPLE_SQL = """CREATE TABLE user_account (
    id BIGINT PRIMARY KEY AUTO_INCREMENT,
    user_name VARCHAR(100) NOT NULL,
    email VARCHAR(255) NOT NULL,
    created_at TIMESTAMP,
    is_active BOOLEAN DEFAULT true,
    balance DECIMAL(10,2)
);"""


@dataclass
class ConvertReport:
    written: list[Path] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def convert_sql(sql: str, options: GenerationOptions | None = None) -> str:
    """파싱 → 생성. 실패하면 고정 에러 문구를 반환한다."""
    result = CreateTableParser().parse(sql)
    if isinstance(result, ParseFailure):
        return PARSE_ERROR_MESSAGE
    return to_java(result, options)


def print_summary(table: TableDescription) -> None:
    t = RichTable(title=f"{table.name} → {table.class_name}")
    t.add_column("column")
    t.add_column("field")
    t.add_column("sql type")
    t.add_column("java type")
    t.add_column("flags")
    for col in table.columns:
        flags = []
        if col.pk: flags.append("PK")
        if col.auto_increment: flags.append("AI")
        if not col.nullable: flags.append("NOT NULL")
        if col.type_fallback: flags.append("UNKNOWN TYPE")
        t.add_row(col.name, col.java_name, col.sql_type, col.java_type.value, ", ".join(flags))
    err_console.print(t)


def _load_inputs(source: str) -> list[tuple[str, str]]:
    if source == "-":
        return [("<stdin>", sys.stdin.read())]
    files = scan_sql_files(Path(source))
    return [(str(f), f.read_text(encoding="utf-8", errors="ignore")) for f in files]


def run_convert(
    source: str,
    out_dir: Path | None = None,
    options: GenerationOptions | None = None,
    to_stdout: bool = False,
    verify: bool = False,
    summary: bool = False,
) -> ConvertReport:
    """
    SQL 파일/디렉터리/표준입력을 변환해 Java 모델을 만든다.
    반환: ConvertReport(written=생성 파일, failed=실패한 입력 이름)
    """
    options = options or GenerationOptions.from_settings(settings)
    base = out_dir or settings.java_output_dir
    report = ConvertReport()

    inputs = _load_inputs(source)
    err_console.print(f"Found [green]{len(inputs)}[/green] SQL input(s)", highlight=False, soft_wrap=True)

    for label, text in inputs:
        result = CreateTableParser().parse(text)
        if isinstance(result, ParseFailure):
            logger.info("Parse failed for %s: %s", label, result.kind.value)
            err_console.print(f"[red]{label}:[/red] {PARSE_ERROR_MESSAGE}", highlight=False, soft_wrap=True)
            report.failed.append(label)
            continue

        if summary:
            print_summary(result)

        code = to_java(result, options)

        if verify:
            try:
                verify_java_model(result, code)
            except JavaVerificationError as e:
                err_console.print(f"[red]{label}:[/red] {e}", highlight=False, soft_wrap=True)
                report.failed.append(label)
                continue

        if to_stdout:
            console.out(code, end="", highlight=False)
            continue

        out_path = write_java(result, base, options)
        report.written.append(out_path)
        err_console.print(f"[bold green]Java:[/bold green] {out_path}", soft_wrap=True)

    return report
