from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB

class Usuario(BaseModelDB, table=True):
    __tablename__ = "usuarios"

    nombre: str
    # Unicidad verificada por los servicios en cada escritura, no por la base.
    email: str = Field(index=True)
    password: str  # hash, nunca se devuelve al cliente
    telefono: Optional[str] = Field(default="")
