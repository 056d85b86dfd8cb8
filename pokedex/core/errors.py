"""
➡️ Objetivo : taxonomía de errores de la API y su traducción a JSON.

Los servicios lanzan estas excepciones; un único handler de FastAPI
(ver pokedex.main) las convierte en la respuesta correspondiente.

envelope=True  -> {"success": false, "error": ...}
envelope=False -> {"error": ...}   (lecturas GET y 405)
"""

from typing import Any, Dict, List, Optional

from fastapi import status


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, envelope: bool = True, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.envelope = envelope
        self.fields = fields

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False} if self.envelope else {}
        body["error"] = self.message
        if self.fields:
            body["fields"] = self.fields
        return body


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class MethodNotAllowed(ApiError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, message: str = "Método no permitido."):
        super().__init__(message, envelope=False)


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT


class StorageError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def short_diagnostic(exc: BaseException, max_len: int = 160) -> str:
    """
    Primera línea del mensaje del driver (sin URL de conexión ni SQL completo).
    Ej: "no such table: pokemon"
    """
    orig = getattr(exc, "orig", None) or exc
    text = str(orig).strip().splitlines()
    first = text[0] if text else exc.__class__.__name__
    return first[:max_len]
