"""생성된 Java 소스를 javalang으로 다시 파싱해 검증."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

import javalang

from entity_agent.model import TableDescription


class JavaVerificationError(ValueError):
    pass


@dataclass
class JavaClassSummary:
    name: str
    annotations: List[str] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    fields: List[str] = field(default_factory=list)
    methods: List[str] = field(default_factory=list)


def _import_path(imp) -> str:
    return f"{imp.path}.*" if imp.wildcard else imp.path


def verify_java(source: str) -> JavaClassSummary:
    try:
        tree = javalang.parse.parse(source)
    except (javalang.parser.JavaSyntaxError, javalang.tokenizer.LexerError) as e:
        raise JavaVerificationError(f"generated source is not valid Java: {e!r}") from e

    types = getattr(tree, "types", []) or []
    if not types:
        raise JavaVerificationError("generated source declares no class")

    cls = types[0]
    field_names = [d.name for f in (cls.fields or []) for d in f.declarators]
    return JavaClassSummary(
        name=cls.name,
        annotations=[a.name for a in (cls.annotations or [])],
        imports=[_import_path(i) for i in (tree.imports or [])],
        fields=field_names,
        methods=[m.name for m in (cls.methods or [])],
    )


def verify_java_model(table: TableDescription, source: str) -> JavaClassSummary:
    """파싱 + 클래스명/필드 순서가 테이블 정의와 일치하는지 확인."""
    summary = verify_java(source)
    if summary.name != table.class_name:
        raise JavaVerificationError(
            f"class name mismatch: expected {table.class_name}, got {summary.name}"
        )
    expected = [c.java_name for c in table.columns]
    if summary.fields != expected:
        raise JavaVerificationError(f"field mismatch: expected {expected}, got {summary.fields}")
    return summary
