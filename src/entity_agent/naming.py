"""식별자 네이밍 변환 (snake_case / camelCase / PascalCase)."""
from __future__ import annotations
import re

# 밑줄, 공백, 기호는 단어 구분자로 취급
_SEPARATOR_RE = re.compile(r"[\W_]+")


def _split_camel(chunk: str) -> list[str]:
    words: list[str] = []
    cur = ""
    for i, ch in enumerate(chunk):
        prev = chunk[i - 1] if i else ""
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        boundary = ch.isupper() and (
            prev.islower() or prev.isdigit() or (prev.isupper() and nxt.islower())
        )
        if cur and boundary:
            words.append(cur)
            cur = ""
        cur += ch
    if cur:
        words.append(cur)
    return words


def split_words(name: str) -> list[str]:
    """user_name, USER_NAME, userName, UserName → ["user", "name"] 계열로 분리."""
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(name):
        if chunk:
            words.extend(_split_camel(chunk))
    return words


def _title(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def snake_to_camel(name: str) -> str:
    # 구분자 없이 소문자로 시작하면 이미 camelCase로 보고 그대로 둔다(재적용해도 불변)
    if name[:1].islower() and not _SEPARATOR_RE.search(name):
        return name
    words = split_words(name)
    if not words:
        return name
    return words[0].lower() + "".join(_title(w) for w in words[1:])


def snake_to_pascal(name: str) -> str:
    return capitalize(snake_to_camel(name))


def capitalize(name: str) -> str:
    # getter/setter 이름용: 첫 글자만 대문자
    return name[:1].upper() + name[1:]


JAVA_RESERVED = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null", "_",
})


def java_identifier(name: str) -> str:
    """예약어는 뒤에 `_`, 숫자로 시작하면 앞에 `_`를 붙인다 (class → class_, 1stCol → _1stCol)."""
    if name in JAVA_RESERVED:
        return name + "_"
    if name[:1].isdigit():
        return "_" + name
    return name
