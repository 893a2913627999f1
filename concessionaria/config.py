from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str  # required: missing store endpoint aborts startup
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    frontend_dir: str = "../frontend"
    create_tables: bool = True
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
