"""
➡️ Objetivo : configurar la base de datos y gestionar las sesiones.

engine : conexión a la base (sqlite:///formulario.db por defecto).

init_db() : crea las tablas pokemon y usuarios a partir de los modelos SQLModel.

get_session() : dependencia FastAPI que abre una sesión por petición, la entrega
a los repositorios y la cierra al terminar. Es el único camino hacia el engine
desde los handlers ; los tests la sustituyen por una base en memoria.

No hay transacción que abarque varias tablas : cada escritura del repositorio
hace su propio commit.

🔹 Ventajas :

Un solo lugar para gestionar las conexiones.

Ningún handler usa una conexión global : la sesión se inyecta (Depends(get_session)).
"""

from typing import Dict, Any
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Importar todos los modelos para crear todas las tablas
from pokedex.db.models.pokemon import Pokemon
from pokedex.db.models.usuarios import Usuario

from pokedex.core.config import settings

def _build_engine() -> Engine:
    url = settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requerido por SQLite en un servidor multi-hilo
        connect_args["check_same_thread"] = False

    engine = create_engine(
        url,
        echo=(settings.ENV == "dev"),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # útil para MySQL/Postgres
    )
    return engine

engine: Engine = _build_engine()

def init_db(bind: Engine = engine) -> None:
    """
    Crea las tablas pokemon y usuarios si no existen (arranque y seed).
    `bind` permite inicializar otro engine que el de la configuración.
    """
    SQLModel.metadata.create_all(bind)


def get_session():
    """
    Dependencia FastAPI : una sesión por petición.
    Uso :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
