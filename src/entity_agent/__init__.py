from entity_agent.model import (
    ColumnDescription,
    FailureKind,
    JavaType,
    ParseFailure,
    ParseResult,
    TableDescription,
)
from entity_agent.options import GenerationOptions
from entity_agent.parsers import parse_create_table
from entity_agent.java_writer import to_java
from entity_agent.commands.convert import PARSE_ERROR_MESSAGE, convert_sql, run_convert

__all__ = [
    "ColumnDescription",
    "FailureKind",
    "GenerationOptions",
    "JavaType",
    "PARSE_ERROR_MESSAGE",
    "ParseFailure",
    "ParseResult",
    "TableDescription",
    "convert_sql",
    "parse_create_table",
    "run_convert",
    "to_java",
]
