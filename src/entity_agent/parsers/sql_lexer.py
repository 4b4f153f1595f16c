"""CREATE TABLE 문 파싱용 토큰 스트림 (sqlparse lexer 기반).

문자열 리터럴/주석/따옴표 식별자를 구분해 두면, 스캐너 쪽에서
`DEFAULT 'NOT NULL'` 같은 리터럴 안의 키워드를 제약조건으로 오인하지 않는다.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import re

from sqlparse import lexer
from sqlparse import tokens as T


class TokenKind(str, Enum):
    WORD = "word"            # 키워드 또는 따옴표 없는 식별자
    QUOTED = "quoted"        # `name`, "name", [name]
    STRING = "string"        # 'literal'
    NUMBER = "number"
    PUNCT = "punct"          # ( ) , ; .
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str
    pos: int = 0
    end: int = 0

    @property
    def upper(self) -> str:
        return self.value.upper()

    @property
    def is_identifier(self) -> bool:
        return self.kind in (TokenKind.WORD, TokenKind.QUOTED)

    def is_word(self, *words: str) -> bool:
        return self.kind == TokenKind.WORD and self.upper in words

    def is_punct(self, ch: str) -> bool:
        return self.kind == TokenKind.PUNCT and self.value == ch


# sqlparse는 NOT NULL, PRIMARY KEY, CREATE OR REPLACE 등을 토큰 하나로 묶는다
_WORD_PART_RE = re.compile(r"\S+")

_QUOTES = {"`": "`", '"': '"', "[": "]"}


def _unquote(raw: str, open_ch: str, close_ch: str) -> str:
    body = raw[1:]
    if body.endswith(close_ch):
        body = body[:-1]
    if open_ch == close_ch:
        body = body.replace(close_ch * 2, close_ch)
    return body


def _convert(ttype, value: str, pos: int) -> list[Token]:
    end = pos + len(value)
    if ttype in T.Whitespace or ttype in T.Comment:
        return []
    if ttype in T.String.Symbol or (ttype in T.Name and value[:1] in _QUOTES):
        open_ch = value[:1]
        return [Token(TokenKind.QUOTED, _unquote(value, open_ch, _QUOTES[open_ch]), pos, end)]
    if ttype in T.String:
        return [Token(TokenKind.STRING, value, pos, end)]
    if ttype in T.Number:
        return [Token(TokenKind.NUMBER, value, pos, end)]
    if ttype in T.Punctuation:
        return [Token(TokenKind.PUNCT, value, pos, end)]
    if ttype in T.Name.Placeholder:
        return [Token(TokenKind.OTHER, value, pos, end)]
    if ttype in T.Keyword or ttype in T.Name:
        return [
            Token(TokenKind.WORD, m.group(), pos + m.start(), pos + m.end())
            for m in _WORD_PART_RE.finditer(value)
        ]
    return [Token(TokenKind.OTHER, value, pos, end)]


def tokenize(sql: str) -> list[Token]:
    tokens: list[Token] = []
    pos = 0
    for ttype, value in lexer.tokenize(sql):
        tokens.extend(_convert(ttype, value, pos))
        pos += len(value)
    return tokens
