"""
➡️ Objetivo : endpoint /usuarios para la administración de cuentas.

GET ?id= / GET / PUT (url-encoded, password opcional) / DELETE ?id=
Nunca devuelve el hash de la contraseña.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Form, Query

from pokedex.api.v1.dependencies import get_usuario_service
from pokedex.api.v1.responses import MessageOut, invalid_response, preflight_response
from pokedex.features.usuarios.schemas import UsuarioOut, parse_update
from pokedex.features.usuarios.services import UsuarioService
from pokedex.utils.forms import Invalid, optional_id

router = APIRouter(
    prefix="/usuarios",
    tags=["usuarios"],
    responses={404: {"description": "Not Found"}},
)

DELETE_ID_REQUIRED_MSG = "ID de usuario es obligatorio para eliminar."


@router.get(
    "",
    summary="Listar usuarios o recuperar uno",
    response_model=Union[UsuarioOut, List[UsuarioOut]],
)
def read_usuarios(
    user_id: Optional[str] = Query(None, alias="id"),
    svc: UsuarioService = Depends(get_usuario_service),
):
    if user_id and user_id != "0":
        return UsuarioOut.model_validate(svc.get(optional_id(user_id) or 0))
    return [UsuarioOut.model_validate(u) for u in svc.list()]


@router.put(
    "",
    summary="Actualizar un usuario",
    description="Si `password` llega vacío, se conserva el hash guardado.",
    response_model=MessageOut,
    responses={409: {"description": "Email usado por otro usuario"}},
)
def update_usuario(
    id: Optional[str] = Form(None),
    nombre: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    telefono: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    svc: UsuarioService = Depends(get_usuario_service),
):
    cmd = parse_update({
        "id": id,
        "nombre": nombre,
        "email": email,
        "telefono": telefono,
        "password": password,
    })
    if isinstance(cmd, Invalid):
        return invalid_response(cmd)

    svc.update(cmd)
    return MessageOut(message="Usuario actualizado con éxito.")


@router.delete(
    "",
    summary="Eliminar un usuario",
    response_model=MessageOut,
)
def delete_usuario(
    user_id: Optional[str] = Query(None, alias="id"),
    svc: UsuarioService = Depends(get_usuario_service),
):
    ident = optional_id(user_id)
    if ident is None:
        return invalid_response(Invalid(DELETE_ID_REQUIRED_MSG, ["id"]))

    svc.delete(ident)
    return MessageOut(message="Usuario eliminado con éxito.")


@router.options("", include_in_schema=False)
def preflight():
    return preflight_response()
