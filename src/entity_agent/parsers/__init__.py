from entity_agent.parsers.create_table import CreateTableParser, parse_create_table

__all__ = ["CreateTableParser", "parse_create_table"]
