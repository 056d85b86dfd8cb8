from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse, Response


class JSONCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware cuyo preflight responde JSON como el resto de la API :
    200 con cuerpo `null`, o {"error": ...} si el origen no está permitido.
    Las cabeceras Access-Control-* calculadas por Starlette se conservan.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        plain = super().preflight_response(request_headers)
        headers = {
            key: value
            for key, value in plain.headers.items()
            if key.lower() not in ("content-length", "content-type")
        }
        content = None if plain.status_code == 200 else {"error": plain.body.decode("utf-8")}
        return JSONResponse(status_code=plain.status_code, content=content, headers=headers)
