"""
➡️ Objetivo : definir los formatos de entrada/salida del recurso Pokémon.

PokemonCreate → comando POST (form-data / multipart)
PokemonUpdate → comando PUT (url-encoded)
PokemonOut    → respuesta de lectura

Los campos crudos se coercionan una sola vez (parse_create / parse_update)
y se devuelve o bien el comando tipado o bien un `Invalid`.

🔹 Ventajas :

El servicio solo recibe valores ya validados.

Nunca se expone por error una columna interna (created_at, updated_at).
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from pokedex.utils.forms import Invalid, clean_str, coerce_int, in_int_range


CREATE_REQUIRED_MSG = "El número, nombre y tipo del Pokémon son obligatorios."
UPDATE_REQUIRED_MSG = "ID, número, nombre y tipo del Pokémon son obligatorios para actualizar."
RANGE_MSG = "Valor numérico fuera de rango."


# ---------- IN ----------

class PokemonFields(BaseModel):
    numero_pokemon: int = Field(..., gt=0, description="Número en la Pokédex")
    nombre: str = Field(..., min_length=1)
    tipo: str = Field(..., min_length=1)
    nivel: int = 1
    habilidad: str = ""


class PokemonCreate(PokemonFields):
    pass


class PokemonUpdate(PokemonFields):
    id: int = Field(..., gt=0)
    # Eco del cliente : la imagen nunca se reemplaza por PUT.
    imagen_url_existente: Optional[str] = None


# ---------- OUT ----------

class PokemonOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    numero_pokemon: int
    nombre: str
    tipo: str
    nivel: int
    habilidad: Optional[str] = None
    imagen_url: Optional[str] = None


class PokemonCreatedOut(BaseModel):
    success: bool = True
    message: str
    id: int
    imagen_url: Optional[str] = None


# ---------- Parsing ----------

def _missing_fields(numero_pokemon: int, nombre: str, tipo: str) -> list[str]:
    missing = []
    if numero_pokemon <= 0:
        missing.append("numero_pokemon")
    if not nombre:
        missing.append("nombre")
    if not tipo:
        missing.append("tipo")
    return missing


def _out_of_range(**values: int) -> list[str]:
    return [name for name, value in values.items() if not in_int_range(value)]


def parse_create(raw: Mapping[str, Any]) -> Union[PokemonCreate, Invalid]:
    numero = coerce_int(raw.get("numero_pokemon"), default=0)
    nombre = clean_str(raw.get("nombre"))
    tipo = clean_str(raw.get("tipo"))

    missing = _missing_fields(numero, nombre, tipo)
    if missing:
        return Invalid(CREATE_REQUIRED_MSG, missing)

    nivel = coerce_int(raw.get("nivel"), default=1)
    out_of_range = _out_of_range(numero_pokemon=numero, nivel=nivel)
    if out_of_range:
        return Invalid(RANGE_MSG, out_of_range)

    return PokemonCreate(
        numero_pokemon=numero,
        nombre=nombre,
        tipo=tipo,
        nivel=nivel,
        habilidad=clean_str(raw.get("habilidad")),
    )


def parse_update(raw: Mapping[str, Any]) -> Union[PokemonUpdate, Invalid]:
    ident = coerce_int(raw.get("id"), default=0)
    numero = coerce_int(raw.get("numero_pokemon"), default=0)
    nombre = clean_str(raw.get("nombre"))
    tipo = clean_str(raw.get("tipo"))

    missing = _missing_fields(numero, nombre, tipo)
    if ident <= 0:
        missing.insert(0, "id")
    if missing:
        return Invalid(UPDATE_REQUIRED_MSG, missing)

    nivel = coerce_int(raw.get("nivel"), default=1)
    out_of_range = _out_of_range(id=ident, numero_pokemon=numero, nivel=nivel)
    if out_of_range:
        return Invalid(RANGE_MSG, out_of_range)

    return PokemonUpdate(
        id=ident,
        numero_pokemon=numero,
        nombre=nombre,
        tipo=tipo,
        nivel=nivel,
        habilidad=clean_str(raw.get("habilidad")),
        imagen_url_existente=raw.get("imagen_url_existente") or None,
    )
