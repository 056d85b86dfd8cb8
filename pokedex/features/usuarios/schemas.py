"""
➡️ Objetivo : formatos de entrada/salida de la administración de usuarios.

UsuarioUpdate → comando PUT (url-encoded, password opcional)
UsuarioOut    → respuesta de lectura (nunca incluye el hash)
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from pokedex.utils.forms import Invalid, clean_str, optional_id


ID_REQUIRED_MSG = "ID de usuario es obligatorio."
UPDATE_REQUIRED_MSG = "Nombre y email son obligatorios."


class UsuarioUpdate(BaseModel):
    id: int = Field(..., gt=0)
    nombre: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    telefono: str = ""
    # None -> se conserva el hash guardado
    password: Optional[str] = None


class UsuarioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    email: str
    telefono: Optional[str] = None


def parse_update(raw: Mapping[str, Any]) -> Union[UsuarioUpdate, Invalid]:
    ident = optional_id(raw.get("id"))
    if ident is None:
        return Invalid(ID_REQUIRED_MSG, ["id"])

    nombre = clean_str(raw.get("nombre"))
    email = clean_str(raw.get("email"))
    missing = [name for name, value in (("nombre", nombre), ("email", email)) if not value]
    if missing:
        return Invalid(UPDATE_REQUIRED_MSG, missing)

    password = raw.get("password")
    return UsuarioUpdate(
        id=ident,
        nombre=nombre,
        email=email,
        telefono=clean_str(raw.get("telefono")),
        password=password if password else None,
    )
