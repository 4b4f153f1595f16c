from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List

from entity_agent.parsers.create_table import CREATE_TABLE_RE

@dataclass
class ScanConfig:
    exts: tuple[str, ...] = (".sql", ".ddl")
    exclude_dirs: tuple[str, ...] = (".git", "node_modules", "target", "build", ".venv")

def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="ignore")

def _has_create_table(text: str) -> bool:
    return bool(CREATE_TABLE_RE.search(text))

def scan_sql_files(path: Path, cfg: ScanConfig | None = None) -> List[Path]:
    """
    변환 대상 SQL 파일 목록을 반환한다.
      - 파일이면 그대로 반환(내용 검사 없음 → 파싱 실패는 변환 단계에서 보고)
      - 디렉터리면 CREATE TABLE이 들어있는 *.sql / *.ddl 파일만
    """
    cfg = cfg or ScanConfig()
    if path.is_file():
        return [path]

    candidates: set[Path] = set()

    def consider_file(f: Path):
        if not f.is_file() or f.suffix.lower() not in cfg.exts:
            return
        if any(part in cfg.exclude_dirs for part in f.relative_to(path).parts):
            return
        if _has_create_table(_read_text(f)):
            candidates.add(f)

    for f in path.rglob("*"):
        consider_file(f)

    return sorted(candidates)
