# app/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # app
    app_env: str = Field("dev", alias="APP_ENV")
    app_version: str = Field("0.1.0", alias="APP_VERSION")
    port: int = Field(5000, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # DATABASE_URL is read by app.db.session; set to create tables on startup
    # when running without alembic (local sqlite etc.)
    auto_create_tables: bool = Field(False, alias="AUTO_CREATE_TABLES")

    cors_allow_origins: str = Field(
        "http://localhost:3000,http://localhost:5173",
        alias="CORS_ALLOW_ORIGINS",
    )

    # client side
    taskify_api_url: str = Field("http://localhost:5000", alias="TASKIFY_API_URL")

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
