"""CREATE TABLE 문 → TableDescription.

1) sqlparse로 문장을 나누고, CREATE TABLE 헤더가 있는 첫 문장을 고른다.
2) 헤더 뒤 괄호 구간을 최상위 콤마 기준으로 항목(item)으로 자른다.
3) 항목별로 컬럼 정의인지, 테이블 레벨 제약(PRIMARY KEY (...) 등)인지 판별한다.
"""
from __future__ import annotations
import logging
import re
from typing import Optional

import sqlparse

from entity_agent.model import (
    ColumnDescription,
    JavaType,
    ParseFailure,
    ParseResult,
    TableDescription,
)
from entity_agent.naming import java_identifier, snake_to_camel, snake_to_pascal
from entity_agent.parsers.base import Parser
from entity_agent.parsers.sql_lexer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

# 빠른 사전 판별용(스캐너에서도 사용)
CREATE_TABLE_RE = re.compile(r"\bCREATE\s+(?:\w+\s+)*?TABLE\b", re.IGNORECASE)

# 첫 번째로 걸린 규칙이 이긴다. BIGINT/SMALLINT/TINYINT는 INT보다 먼저,
# TIMESTAMP/DATETIME은 DATE/TIME보다 먼저 검사해야 한다.
SQL_TYPE_RULES: tuple[tuple[tuple[str, ...], JavaType], ...] = (
    (("VARCHAR", "TEXT", "CHAR"), JavaType.STRING),
    (("BIGSERIAL",), JavaType.LONG),
    (("SMALLSERIAL",), JavaType.SHORT),
    (("SERIAL",), JavaType.INTEGER),
    (("BIGINT",), JavaType.LONG),
    (("SMALLINT",), JavaType.SHORT),
    (("TINYINT",), JavaType.BYTE),
    (("INT",), JavaType.INTEGER),
    (("DECIMAL", "NUMERIC"), JavaType.BIG_DECIMAL),
    (("FLOAT",), JavaType.FLOAT),
    (("DOUBLE",), JavaType.DOUBLE),
    (("BOOLEAN", "BOOL", "BIT"), JavaType.BOOLEAN),
    (("TIMESTAMP", "DATETIME"), JavaType.LOCAL_DATE_TIME),
    (("DATE",), JavaType.LOCAL_DATE),
    (("TIME",), JavaType.LOCAL_TIME),
    (("BLOB",), JavaType.BYTES),
)

# 컬럼이 아니라 테이블 레벨 절을 시작하는 키워드 (따옴표 여부 무관)
STRUCTURAL_KEYWORDS = frozenset({"PRIMARY", "FOREIGN", "KEY", "CONSTRAINT"})
# 따옴표 없이 쓰였을 때만 절로 취급
CLAUSE_KEYWORDS = frozenset({"UNIQUE", "INDEX", "CHECK", "FULLTEXT", "SPATIAL"})

AUTO_INCREMENT_MARKERS = frozenset({"AUTO_INCREMENT", "AUTOINCREMENT", "IDENTITY"})
SERIAL_TYPE = "SERIAL"

# CREATE 와 TABLE 사이에 올 수 있는 수식어
TABLE_MODIFIERS = ("TEMPORARY", "TEMP", "GLOBAL", "LOCAL", "UNLOGGED", "OR", "REPLACE")


def resolve_java_type(sql_type: str) -> tuple[JavaType, bool]:
    """SQL 타입 토큰 → (JavaType, fallback 여부). 매칭 실패 시 String."""
    t = sql_type.upper()
    for keys, java_type in SQL_TYPE_RULES:
        if any(k in t for k in keys):
            return java_type, False
    return JavaType.STRING, True


def _has_sequence(tokens: list[Token], *words: str) -> bool:
    n = len(words)
    for i in range(len(tokens) - n + 1):
        if all(tokens[i + k].is_word(w) for k, w in enumerate(words)):
            return True
    return False


def _top_level(tokens: list[Token]) -> list[Token]:
    # 괄호 안(DEFAULT (...), CHECK (...), REFERENCES t(id))은 제외
    out: list[Token] = []
    depth = 0
    for tok in tokens:
        if tok.is_punct("("):
            depth += 1
        elif tok.is_punct(")"):
            depth = max(depth - 1, 0)
        elif depth == 0:
            out.append(tok)
    return out


def _split_items(tokens: list[Token], open_idx: int) -> list[list[Token]]:
    items: list[list[Token]] = []
    cur: list[Token] = []
    depth = 0
    for tok in tokens[open_idx + 1:]:
        if tok.is_punct("("):
            depth += 1
        elif tok.is_punct(")"):
            if depth == 0:
                break
            depth -= 1
        elif tok.is_punct(",") and depth == 0:
            items.append(cur)
            cur = []
            continue
        cur.append(tok)
    if cur:
        items.append(cur)
    return [it for it in items if it]


def _primary_key_clause_column(item: list[Token]) -> Optional[str]:
    # PRIMARY KEY (col) / CONSTRAINT pk_x PRIMARY KEY (col)
    # 복합키 PRIMARY KEY (a, b)는 어느 컬럼도 PK로 표시하지 않는다.
    for i in range(len(item) - 1):
        if item[i].is_word("PRIMARY") and item[i + 1].is_word("KEY"):
            rest = item[i + 2:]
            if (
                len(rest) >= 3
                and rest[0].is_punct("(")
                and rest[1].is_identifier
                and rest[2].is_punct(")")
            ):
                return rest[1].value
            return None
    return None


def _is_table_clause(first: Token) -> bool:
    if first.upper in STRUCTURAL_KEYWORDS:
        return True
    return first.kind == TokenKind.WORD and first.upper in CLAUSE_KEYWORDS


class CreateTableParser(Parser):
    def can_parse(self, text: str) -> bool:
        return bool(CREATE_TABLE_RE.search(text))

    def parse(self, text: str) -> ParseResult:
        for stmt in sqlparse.split(text):
            tokens = tokenize(stmt)
            header = self._find_header(tokens)
            if header is None:
                continue
            name, next_idx = header
            return self._build_table(stmt, tokens, name, next_idx)

        logger.debug("No CREATE TABLE declaration in input (%d chars)", len(text))
        return ParseFailure()

    def _find_header(self, tokens: list[Token]) -> Optional[tuple[str, int]]:
        for i, tok in enumerate(tokens):
            if not tok.is_word("CREATE"):
                continue
            j = i + 1
            while j < len(tokens) and tokens[j].is_word(*TABLE_MODIFIERS):
                j += 1
            if j >= len(tokens) or not tokens[j].is_word("TABLE"):
                continue
            j += 1
            if _has_sequence(tokens[j:j + 3], "IF", "NOT", "EXISTS"):
                j += 3
            name, j = self._qualified_name(tokens, j)
            if name:
                return name, j
        return None

    def _qualified_name(self, tokens: list[Token], j: int) -> tuple[Optional[str], int]:
        # schema.table 형태면 마지막 부분을 테이블명으로 사용
        if j >= len(tokens) or not tokens[j].is_identifier or not tokens[j].value:
            return None, j
        name = tokens[j].value
        j += 1
        while (
            j + 1 < len(tokens)
            and tokens[j].is_punct(".")
            and tokens[j + 1].is_identifier
        ):
            name = tokens[j + 1].value
            j += 2
        return name, j

    def _build_table(self, stmt: str, tokens: list[Token], name: str, idx: int) -> TableDescription:
        table = TableDescription(name=name, class_name=java_identifier(snake_to_pascal(name)))

        if idx >= len(tokens) or not tokens[idx].is_punct("("):
            logger.warning("Table %s has no column definition section", name)
            return table

        pk_from_clause: set[str] = set()
        seen: set[str] = set()

        for item in _split_items(tokens, idx):
            first = item[0]
            if not first.is_identifier:
                logger.debug("Skipping item starting with %r in table %s", first.value, name)
                continue

            if _is_table_clause(first):
                pk_col = _primary_key_clause_column(item)
                if pk_col:
                    pk_from_clause.add(pk_col.lower())
                logger.debug("Skipping table-level clause starting with %s", first.value)
                continue

            col = self._column(stmt, item)
            if col is None:
                logger.debug("Skipping item without a type: %s", first.value)
                continue
            if col.name.lower() in seen:
                logger.warning("Duplicate column %s in table %s ignored", col.name, name)
                continue
            seen.add(col.name.lower())
            table.columns.append(col)

        for col in table.columns:
            if col.name.lower() in pk_from_clause:
                col.pk = True
                col.nullable = False

        if table.is_empty:
            logger.warning("Table %s parsed with zero columns", name)
        return table

    def _column(self, stmt: str, item: list[Token]) -> Optional[ColumnDescription]:
        name_tok = item[0]
        if not name_tok.value or len(item) < 2 or item[1].kind != TokenKind.WORD:
            return None

        type_tok = item[1]
        type_end = type_tok.end
        rest_idx = 2
        # DECIMAL(10,2), VARCHAR(100) 처럼 괄호 인자가 붙은 경우 타입 토큰에 포함
        if rest_idx < len(item) and item[rest_idx].is_punct("("):
            depth = 0
            for k in range(rest_idx, len(item)):
                if item[k].is_punct("("):
                    depth += 1
                elif item[k].is_punct(")"):
                    depth -= 1
                    if depth == 0:
                        type_end = item[k].end
                        rest_idx = k + 1
                        break
            else:
                type_end = item[-1].end
                rest_idx = len(item)

        sql_type = stmt[type_tok.pos:type_end]
        constraints = _top_level(item[rest_idx:])

        java_type, fallback = resolve_java_type(sql_type)
        if fallback:
            logger.warning("Unrecognized SQL type %r for column %s, using String", sql_type, name_tok.value)

        pk = _has_sequence(constraints, "PRIMARY", "KEY")
        auto = SERIAL_TYPE in type_tok.upper or any(
            t.kind == TokenKind.WORD and t.upper in AUTO_INCREMENT_MARKERS for t in constraints
        )
        not_null = _has_sequence(constraints, "NOT", "NULL")

        return ColumnDescription(
            name=name_tok.value,
            java_name=java_identifier(snake_to_camel(name_tok.value)),
            java_type=java_type,
            sql_type=sql_type,
            pk=pk,
            auto_increment=auto,
            nullable=not not_null and not pk,
            type_fallback=fallback,
        )


def parse_create_table(text: str) -> ParseResult:
    return CreateTableParser().parse(text)
