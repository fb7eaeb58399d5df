from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pricing_service_url: str = "http://localhost:5000"
    pricing_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    debug: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
