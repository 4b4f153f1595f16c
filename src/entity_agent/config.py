from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    java_output_dir: Path = Field(default=Path("./out"), alias="ENTITY_OUTPUT_DIR")

    # 생성 옵션 기본값 (CLI 플래그로 덮어씀)
    default_jpa: bool = Field(default=True, alias="ENTITY_JPA")
    default_lombok: bool = Field(default=True, alias="ENTITY_LOMBOK")
    default_jackson: bool = Field(default=True, alias="ENTITY_JACKSON")
    default_accessors: bool = Field(default=True, alias="ENTITY_ACCESSORS")

    log_level: str = Field(default="WARNING", alias="ENTITY_LOG_LEVEL")

settings = Settings()
