"""
➡️ Objetivo : definir la estructura de las tablas (ORM).

Clases que heredan de SQLModel. Aquí : las propiedades comunes de pokemon y
usuarios (clave de identidad autoincremental + marcas de tiempo).

Las marcas de tiempo son internas : PokemonOut y UsuarioOut no las exponen,
el cliente solo ve los campos del registro.

🔹 Ventajas :

Se manipulan objetos Python, no SQL crudo.

Fácil de migrar de SQLite a MySQL o PostgreSQL.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    """Hora UTC con zona (SQLAlchemy rechaza datetimes "naive" al enlazar)."""
    return datetime.now(timezone.utc)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now)
    # Actualizado por los servicios en cada PUT
    updated_at: datetime = Field(default_factory=utc_now)
