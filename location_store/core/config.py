from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./locations.db"
    sql_echo: bool = False
    default_locale: str = "en_US"
    default_location_name: str = "Unknown Location"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
