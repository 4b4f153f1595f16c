"""
SQL → Java 모델 변환 CLI.
- entity-agent: 서브커맨드 (convert / example / watch)
- sql-to-java: convert 단독 진입점
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from entity_agent.config import settings
from entity_agent.commands.convert import EXAMPLE_SQL, convert_sql, run_convert
from entity_agent.options import GenerationOptions
from entity_agent.watch import watch_path

console = Console()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _options(
    jpa: Optional[bool],
    lombok: Optional[bool],
    jackson: Optional[bool],
    accessors: Optional[bool],
) -> GenerationOptions:
    # 지정하지 않은 플래그는 settings(.env) 기본값
    base = GenerationOptions.from_settings(settings)
    overrides = {
        k: v
        for k, v in {
            "jpa": jpa,
            "lombok": lombok,
            "jackson": jackson,
            "generate_accessors": accessors,
        }.items()
        if v is not None
    }
    return base.model_copy(update=overrides)


def _source_arg() -> str:
    return typer.Argument(..., help=".sql 파일, 디렉터리 또는 '-'(표준입력)")


def _convert(
    source: str,
    jpa: Optional[bool],
    lombok: Optional[bool],
    jackson: Optional[bool],
    accessors: Optional[bool],
    out_dir: Optional[Path],
    stdout: bool,
    verify: bool,
    summary: bool,
) -> None:
    if source != "-" and not Path(source).exists():
        raise typer.BadParameter(f"경로가 없습니다: {source}")

    report = run_convert(
        source,
        out_dir=out_dir,
        options=_options(jpa, lombok, jackson, accessors),
        to_stdout=stdout,
        verify=verify,
        summary=summary,
    )
    if not report.ok:
        raise typer.Exit(code=1)


# ----- 통합 앱: entity-agent (서브커맨드) -----
app = typer.Typer(
    name="entity-agent",
    add_completion=False,
    help="CREATE TABLE SQL을 Java 모델 클래스(JPA/Lombok/Jackson)로 변환",
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="로그 레벨 (기본: ENTITY_LOG_LEVEL)"),
):
    configure_logging(log_level)


@app.command("convert")
def cmd_convert(
    source: str = _source_arg(),
    jpa: Optional[bool] = typer.Option(None, "--jpa/--no-jpa", help="JPA 어노테이션"),
    lombok: Optional[bool] = typer.Option(None, "--lombok/--no-lombok", help="Lombok (@Data)"),
    jackson: Optional[bool] = typer.Option(None, "--jackson/--no-jackson", help="Jackson @JsonProperty"),
    accessors: Optional[bool] = typer.Option(None, "--accessors/--no-accessors", help="Getter/Setter (Lombok 사용 시 무시)"),
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", "-o", help="출력 디렉터리 (기본: ENTITY_OUTPUT_DIR)"),
    stdout: bool = typer.Option(False, "--stdout", help="파일 대신 표준출력으로"),
    verify: bool = typer.Option(False, "--verify", help="생성 결과를 javalang으로 검증"),
    summary: bool = typer.Option(False, "--summary", help="파싱된 컬럼 표 출력"),
):
    """SQL → Java 모델 생성."""
    _convert(source, jpa, lombok, jackson, accessors, out_dir, stdout, verify, summary)


@app.command("example")
def cmd_example(
    convert: bool = typer.Option(False, "--convert", help="예제 SQL의 변환 결과를 출력"),
):
    """예제 CREATE TABLE 출력."""
    if convert:
        console.out(convert_sql(EXAMPLE_SQL, GenerationOptions.from_settings(settings)), end="", highlight=False)
    else:
        console.out(EXAMPLE_SQL, highlight=False)


@app.command("watch")
def cmd_watch(
    path: Path = typer.Argument(..., help="감시할 디렉터리"),
    jpa: Optional[bool] = typer.Option(None, "--jpa/--no-jpa"),
    lombok: Optional[bool] = typer.Option(None, "--lombok/--no-lombok"),
    jackson: Optional[bool] = typer.Option(None, "--jackson/--no-jackson"),
    accessors: Optional[bool] = typer.Option(None, "--accessors/--no-accessors"),
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", "-o"),
):
    """.sql 변경 시 Java 모델 재생성."""
    console.print(f"[bold]Watching[/bold] {path} (Ctrl+C to stop)")
    watch_path(path, out_dir, _options(jpa, lombok, jackson, accessors))


# ----- 개별 진입점: sql-to-java -----

convert_app = typer.Typer(add_completion=False)


@convert_app.command()
def convert_main(
    source: str = _source_arg(),
    jpa: Optional[bool] = typer.Option(None, "--jpa/--no-jpa", help="JPA 어노테이션"),
    lombok: Optional[bool] = typer.Option(None, "--lombok/--no-lombok", help="Lombok (@Data)"),
    jackson: Optional[bool] = typer.Option(None, "--jackson/--no-jackson", help="Jackson @JsonProperty"),
    accessors: Optional[bool] = typer.Option(None, "--accessors/--no-accessors", help="Getter/Setter (Lombok 사용 시 무시)"),
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", "-o", help="출력 디렉터리"),
    stdout: bool = typer.Option(False, "--stdout", help="파일 대신 표준출력으로"),
    verify: bool = typer.Option(False, "--verify", help="생성 결과를 javalang으로 검증"),
):
    """SQL → Java 모델 생성 (sql-to-java schema.sql)."""
    configure_logging()
    _convert(source, jpa, lombok, jackson, accessors, out_dir, stdout, verify, False)


if __name__ == "__main__":
    app()
