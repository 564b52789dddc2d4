# 读取 .env 配置
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""

    # Matching
    IGNORE_CASE: bool = False

    # Masking
    MASK_PATTERN: str = "*"
    REMOVE_OVERLAPS: bool = False

    model_config = SettingsConfigDict(
        env_prefix="ACMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore" # 忽略多余的环境变量
    )

settings = Settings()
