"""
➡️ Objetivo : definir el endpoint /pokemon (un solo path, despacho por método).

GET ?id= (detalle) / GET (lista) / POST (multipart) / PUT (url-encoded) / DELETE ?id=

Las rutas no contienen SQL ni lógica de negocio : coercionan los campos,
deciden la respuesta 400 cuando la validación devuelve `Invalid` y delegan
en PokemonService.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from pokedex.api.v1.dependencies import get_pokemon_service
from pokedex.api.v1.responses import MessageOut, invalid_response, preflight_response
from pokedex.features.pokemon.schemas import (
    PokemonCreatedOut,
    PokemonOut,
    parse_create,
    parse_update,
)
from pokedex.features.pokemon.services import PokemonService
from pokedex.utils.forms import Invalid, optional_id

router = APIRouter(
    prefix="/pokemon",
    tags=["pokemon"],
    responses={404: {"description": "Not Found"}},
)

DELETE_ID_REQUIRED_MSG = "ID de Pokémon es obligatorio para eliminar."


# -----------------------------
# Lista / detalle
# -----------------------------
@router.get(
    "",
    summary="Listar los Pokémon o recuperar uno",
    description="Sin `id` devuelve todos los registros (id descendente); con `id`, el detalle.",
    response_model=Union[PokemonOut, List[PokemonOut]],
)
def read_pokemon(
    pokemon_id: Optional[str] = Query(None, alias="id"),
    svc: PokemonService = Depends(get_pokemon_service),
):
    if pokemon_id and pokemon_id != "0":
        return PokemonOut.model_validate(svc.get(optional_id(pokemon_id) or 0))
    return [PokemonOut.model_validate(p) for p in svc.list()]


# -----------------------------
# Creación
# -----------------------------
@router.post(
    "",
    summary="Registrar un Pokémon",
    description="Acepta form-data o multipart (campo `imagen` opcional).",
    status_code=status.HTTP_201_CREATED,
    response_model=PokemonCreatedOut,
    responses={400: {"description": "Campos obligatorios ausentes"}},
)
async def create_pokemon(
    numero_pokemon: Optional[str] = Form(None),
    nombre: Optional[str] = Form(None),
    tipo: Optional[str] = Form(None),
    nivel: Optional[str] = Form(None),
    habilidad: Optional[str] = Form(None),
    imagen: Optional[UploadFile] = File(None),
    svc: PokemonService = Depends(get_pokemon_service),
):
    cmd = parse_create({
        "numero_pokemon": numero_pokemon,
        "nombre": nombre,
        "tipo": tipo,
        "nivel": nivel,
        "habilidad": habilidad,
    })
    if isinstance(cmd, Invalid):
        return invalid_response(cmd)

    pokemon = await svc.create(cmd, imagen)
    return PokemonCreatedOut(
        message="Pokémon registrado con éxito.",
        id=pokemon.id,
        imagen_url=pokemon.imagen_url,
    )


# -----------------------------
# Actualización
# -----------------------------
@router.put(
    "",
    summary="Actualizar un Pokémon",
    description="Body url-encoded. La imagen nunca se reemplaza por esta operación.",
    response_model=MessageOut,
)
def update_pokemon(
    id: Optional[str] = Form(None),
    numero_pokemon: Optional[str] = Form(None),
    nombre: Optional[str] = Form(None),
    tipo: Optional[str] = Form(None),
    nivel: Optional[str] = Form(None),
    habilidad: Optional[str] = Form(None),
    imagen_url_existente: Optional[str] = Form(None),
    svc: PokemonService = Depends(get_pokemon_service),
):
    cmd = parse_update({
        "id": id,
        "numero_pokemon": numero_pokemon,
        "nombre": nombre,
        "tipo": tipo,
        "nivel": nivel,
        "habilidad": habilidad,
        "imagen_url_existente": imagen_url_existente,
    })
    if isinstance(cmd, Invalid):
        return invalid_response(cmd)

    svc.update(cmd)
    return MessageOut(message="Pokémon actualizado con éxito.")


# -----------------------------
# Borrado
# -----------------------------
@router.delete(
    "",
    summary="Eliminar un Pokémon",
    response_model=MessageOut,
)
def delete_pokemon(
    pokemon_id: Optional[str] = Query(None, alias="id"),
    svc: PokemonService = Depends(get_pokemon_service),
):
    # "", "0", "abc" o fuera de rango : se trata como ausente
    ident = optional_id(pokemon_id)
    if ident is None:
        return invalid_response(Invalid(DELETE_ID_REQUIRED_MSG, ["id"]))

    svc.delete(ident)
    return MessageOut(message="Pokémon eliminado con éxito.")


@router.options("", include_in_schema=False)
def preflight():
    return preflight_response()
