"""Configuración de la aplicación mediante variables de entorno."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración cargada desde .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "MiUMC Inscripciones API"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # PostgreSQL
    postgres_host: str = "127.0.0.1"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = ""
    postgres_db: str = "miumc_db"
    # URL completa opcional (ej. sqlite+aiosqlite:///./test.db); tiene prioridad
    database_url: str | None = None

    # Pool de conexiones
    pool_size: int = 5
    max_overflow: int = 10
    pool_timeout: float = 30.0

    # Dominio académico
    current_period: str = "2026-I"
    # None = detectar al iniciar si existen las tablas del aula virtual
    classroom_enabled: bool | None = None
    create_tables: bool = True

    @property
    def database_url_async(self) -> str:
        """URL para SQLAlchemy con driver asyncpg (uso en la app)."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
