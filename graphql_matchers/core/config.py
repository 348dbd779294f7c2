# graphql_matchers/core/config.py
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    LOG_LEVEL: str = "WARNING"

    # Convertir nombres snake_case a camelCase antes de buscar el campo
    CAMELIZE_FIELD_NAMES: bool = True
    # Método de serialización propio del esquema (ej: firma de tipo)
    RENDER_METHOD: str = "to_graphql"

    class Config:
        env_file = ".env"
        env_prefix = "GRAPHQL_MATCHERS_"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Crea una instancia única de Settings que se reutiliza.
    El decorador lru_cache asegura que solo se cree una vez.
    """
    return Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Aplica el nivel de log configurado al logger raíz del paquete."""
    logger = logging.getLogger("graphql_matchers")
    logger.setLevel((level or get_settings().LOG_LEVEL).upper())
    return logger


settings = get_settings()
