from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class JavaType(str, Enum):
    STRING = "String"
    INTEGER = "Integer"
    LONG = "Long"
    SHORT = "Short"
    BYTE = "Byte"
    BIG_DECIMAL = "BigDecimal"
    FLOAT = "Float"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"
    LOCAL_DATE = "LocalDate"
    LOCAL_DATE_TIME = "LocalDateTime"
    LOCAL_TIME = "LocalTime"
    BYTES = "byte[]"


class FailureKind(str, Enum):
    NO_TABLE_DECLARATION = "NoTableDeclaration"


@dataclass
class ColumnDescription:
    name: str
    java_name: str
    java_type: JavaType
    sql_type: str = ""
    pk: bool = False
    auto_increment: bool = False
    nullable: bool = True
    type_fallback: bool = False  # 매핑 규칙에 안 걸려서 String으로 떨어진 경우


@dataclass
class TableDescription:
    name: str
    class_name: str
    columns: List[ColumnDescription] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        # 컬럼 0개도 파싱 성공으로 취급(빈 클래스 생성)
        return not self.columns


@dataclass(frozen=True)
class ParseFailure:
    kind: FailureKind = FailureKind.NO_TABLE_DECLARATION
    detail: str = "no CREATE TABLE declaration found"


ParseResult = Union[TableDescription, ParseFailure]
