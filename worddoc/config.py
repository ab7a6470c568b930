from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        return v.strip().upper()

    # Text output
    filter_text: bool = True  # Translate Word control characters in section accessors

    # Container limits
    max_file_size_bytes: int = 100 * 1024 * 1024  # 100MB, 0 disables the check

    @field_validator("max_file_size_bytes")
    @classmethod
    def check_max_file_size(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_file_size_bytes must be zero or positive")
        return v

    class Config:
        env_prefix = "WORDDOC_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
