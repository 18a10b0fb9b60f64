from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./movies.db"
    DB_ECHO: bool = False
    APP_VERSION: str = "0.1.0"
    BUILD_TIME: str = "local"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]
    RATE_LIMIT: str = "100/minute"
    RATE_LIMIT_ENABLED: bool = True

    # 포스터 업로드 제한 (확장자는 대소문자 구분)
    POSTER_MAX_SIZE: int = 1048576
    POSTER_ALLOWED_EXTENSIONS: List[str] = [".jpg", ".png"]

    # False면 영화 수정 시 장르 검증 결과를 경고 로그로만 남김
    ENFORCE_GENRE_ON_UPDATE: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

settings = Settings()
