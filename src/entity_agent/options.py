"""Java 모델 생성 옵션."""
from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from entity_agent.config import Settings


class GenerationOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    jpa: bool = True                 # @Entity / @Table / @Id / @GeneratedValue / @Column
    lombok: bool = True              # @Data / @NoArgsConstructor / @AllArgsConstructor
    jackson: bool = True             # @JsonProperty
    generate_accessors: bool = True  # getter/setter 직접 생성

    @property
    def effective_generate_accessors(self) -> bool:
        # Lombok @Data가 이미 getter/setter를 만들어 주므로 중복 생성하지 않는다.
        return self.generate_accessors and not self.lombok

    @classmethod
    def from_settings(cls, s: Settings) -> "GenerationOptions":
        return cls(
            jpa=s.default_jpa,
            lombok=s.default_lombok,
            jackson=s.default_jackson,
            generate_accessors=s.default_accessors,
        )
