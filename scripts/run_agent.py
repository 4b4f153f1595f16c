#!/usr/bin/env python3
"""
entity-agent convert와 동일한 진입점. pip install 없이 실행 가능.

  python scripts/run_agent.py schema.sql
  python scripts/run_agent.py ./db --no-lombok
  python scripts/run_agent.py schema.sql --stdout --no-jackson
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# 프로젝트 루트에서 실행 시 src 로드 (pip install 없이 실행 가능)
_ROOT = Path(__file__).resolve().parent.parent
_SRC = _ROOT / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


def main() -> int:
    parser = argparse.ArgumentParser(
        description="CREATE TABLE SQL → Java 모델 클래스 생성",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  python scripts/run_agent.py schema.sql
  python scripts/run_agent.py ./db --no-lombok --out-dir ./generated
        """.strip(),
    )
    parser.add_argument("source", help=".sql 파일, 디렉터리 또는 '-'(표준입력)")
    parser.add_argument("--no-jpa", action="store_true", help="JPA 어노테이션 제외")
    parser.add_argument("--no-lombok", action="store_true", help="Lombok 어노테이션 제외")
    parser.add_argument("--no-jackson", action="store_true", help="Jackson @JsonProperty 제외")
    parser.add_argument("--no-accessors", action="store_true", help="Getter/Setter 생성 안 함")
    parser.add_argument("--out-dir", "-o", type=Path, default=None, help="출력 디렉터리")
    parser.add_argument("--stdout", action="store_true", help="파일 대신 표준출력으로")

    args = parser.parse_args()

    from entity_agent.commands.convert import run_convert
    from entity_agent.options import GenerationOptions

    options = GenerationOptions(
        jpa=not args.no_jpa,
        lombok=not args.no_lombok,
        jackson=not args.no_jackson,
        generate_accessors=not args.no_accessors,
    )
    report = run_convert(args.source, out_dir=args.out_dir, options=options, to_stdout=args.stdout)
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
