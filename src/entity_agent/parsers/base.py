from __future__ import annotations
from abc import ABC, abstractmethod
from entity_agent.model import ParseResult

class Parser(ABC):
    @abstractmethod
    def can_parse(self, text: str) -> bool: ...
    @abstractmethod
    def parse(self, text: str) -> ParseResult: ...
