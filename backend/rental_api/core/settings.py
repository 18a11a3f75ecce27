from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 정의 안 된 ENV는 무시
    )
    DATABASE_URL: str = Field("sqlite:///./rental.db", alias="DATABASE_URL")
    SQL_ECHO: bool = Field(False, alias="SQL_ECHO")
    ALLOWED_ORIGINS: str = Field("*", alias="RENTAL_API_ALLOWED_ORIGINS")
    LOG_LEVEL: str = Field("INFO", alias="RENTAL_API_LOG_LEVEL")
    CREATE_TABLES: bool = Field(True, alias="RENTAL_API_CREATE_TABLES")

    @property
    def cors_origins(self) -> List[str]:
        # 콤마 구분으로 여러 개 지정 가능
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

settings = Settings()
