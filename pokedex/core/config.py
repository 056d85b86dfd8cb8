"""
➡️ Objetivo : centralizar todos los parámetros configurables (nombre de la app,
ruta de la base, carpeta de imágenes, logs...).

Usa pydantic-settings para leer automáticamente las variables de entorno
(.env, variables del sistema...).

Expone un único objeto settings que se importa en el resto del código :

from pokedex.core.config import settings
print(settings.APP_NAME)

🔹 Ventajas :

Más limpio que constantes dispersas por el código.

Facilita el paso entre entornos (dev / prod / test).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Pokedex-Registro"
    ENV: str = "dev"  # dev | prod | test
    HOST: str = "127.0.0.1"
    PORT: int = 8080
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "formulario.db"
    # Para MySQL/PostgreSQL, definir DATABASE_URL en el entorno.
    DATABASE_URL: Optional[str] = None

    # -----------------------------
    # Imágenes
    # -----------------------------
    PUBLIC_DIR: str = "public"
    UPLOAD_DIR: str = "public/images/pokemon"
    MAX_UPLOAD_MB: int = 5

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    def model_post_init(self, __context):
        # DATABASE_URL por defecto desde SQLITE_PATH si no se define
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")


settings = Settings()
