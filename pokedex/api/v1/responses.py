import logging

from pydantic import BaseModel
from fastapi import status
from fastapi.responses import JSONResponse

from pokedex.core.errors import ValidationFailed
from pokedex.utils.forms import Invalid

logger = logging.getLogger(__name__)


class MessageOut(BaseModel):
    """Sobre de éxito de las escrituras : {"success": true, "message": ...}"""
    success: bool = True
    message: str


def invalid_response(result: Invalid, *, envelope: bool = True) -> JSONResponse:
    """400 a partir del resultado de validación."""
    logger.info("Validación rechazada: %s (%s)", result.message, ", ".join(result.fields))
    error = ValidationFailed(result.message, envelope=envelope, fields=result.fields)
    return JSONResponse(status_code=error.status_code, content=error.to_body())


def preflight_response() -> JSONResponse:
    """Preflight CORS sin cabeceras Origin : 200 desnudo."""
    return JSONResponse(status_code=status.HTTP_200_OK, content=None)
