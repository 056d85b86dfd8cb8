import json

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from pokedex.api.v1.dependencies import get_auth_service
from pokedex.api.v1.responses import MessageOut, invalid_response, preflight_response
from pokedex.features.authentication.schemas import LoginOut, RegisterCommand, parse_auth_request
from pokedex.features.authentication.services import AuthService
from pokedex.utils.forms import Invalid

router = APIRouter(
    prefix="/user",
    tags=["auth"],
)


# -----------------------------
# Registro / Login (un solo endpoint, campo `action`)
# -----------------------------
@router.post(
    "",
    summary="Registrar o autenticar un usuario",
    description='Body JSON `{"action": "register" | "login", ...}`.',
    response_model=LoginOut,
    responses={
        201: {"model": MessageOut, "description": "Usuario registrado"},
        400: {"description": "Acción o campos ausentes"},
        401: {"description": "Email o contraseña incorrectos"},
        409: {"description": "Email ya registrado"},
    },
)
async def auth_action(request: Request, svc: AuthService = Depends(get_auth_service)):
    try:
        raw = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        # Body ilegible : equivale a no haber indicado acción
        raw = None

    cmd = parse_auth_request(raw)
    if isinstance(cmd, Invalid):
        return invalid_response(cmd)

    if isinstance(cmd, RegisterCommand):
        svc.register(cmd)
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=MessageOut(message="Usuario registrado con éxito.").model_dump(),
        )

    return LoginOut(user=svc.login(cmd))


@router.options("", include_in_schema=False)
def preflight():
    return preflight_response()
