from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB

class Pokemon(BaseModelDB, table=True):
    """Registro de un Pokémon. imagen_url es una ruta relativa o None."""
    __tablename__ = "pokemon"

    numero_pokemon: int = Field(index=True, description="Número en la Pokédex (no único)")
    nombre: str
    tipo: str
    nivel: int = Field(default=1)
    habilidad: Optional[str] = Field(default="")
    imagen_url: Optional[str] = Field(default=None, description="Ruta relativa bajo el directorio público")
