"""
➡️ Objetivo : ensamblar todas las piezas.

Crea la instancia FastAPI (app) y configura :

CORS (quién puede llamar a la API)

los handlers de error : toda respuesta, incluso un fallo inesperado, es un
único valor JSON

los routers (/api/v1/pokemon, /api/v1/user, /api/v1/usuarios)

el directorio público de imágenes (/public)

la creación de las tablas al arrancar (lifespan)

Punto único de ejecución : uvicorn pokedex.main:app --reload
"""

from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokedex.core.config import settings
from pokedex.core.cors import JSONCORSMiddleware
from pokedex.core.errors import ApiError, MethodNotAllowed
from pokedex.core.logging_config import setup_logging
from pokedex.core.openapi import custom_openapi
from pokedex.db.session import init_db

from pokedex.api.v1.routers import pokemon, authentication, usuarios

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    logger.info("%s iniciado (ENV=%s)", settings.APP_NAME, settings.ENV)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "pokemon", "description": "Registro de Pokémon"},
        {"name": "auth", "description": "Registro y login de usuarios"},
        {"name": "usuarios", "description": "Administración de usuarios"},
    ],
)


# -----------------------------
# Errores -> JSON
# -----------------------------
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error("%s %s -> %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        error = MethodNotAllowed()
        return JSONResponse(status_code=error.status_code, content=error.to_body(), headers=exc.headers)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = [str(err["loc"][-1]) for err in exc.errors() if err.get("loc")]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": "Datos de la petición inválidos.", "fields": fields},
    )


@app.middleware("http")
async def catch_all_errors(request: Request, call_next):
    # Último recurso : cualquier fallo no previsto sigue siendo un JSON
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Error no controlado en %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": f"Error interno: {exc.__class__.__name__}"},
        )


# CORS (ajustar CORS_ORIGINS en producción)
app.add_middleware(
    JSONCORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(pokemon.router, prefix=settings.API_PREFIX)
app.include_router(authentication.router, prefix=settings.API_PREFIX)
app.include_router(usuarios.router, prefix=settings.API_PREFIX)

# Imágenes subidas (imagen_url = "public/images/pokemon/...")
app.mount(
    "/" + settings.PUBLIC_DIR.strip("/"),
    StaticFiles(directory=settings.PUBLIC_DIR, check_dir=False),
    name="public",
)

app.openapi = lambda: custom_openapi(app)


def run() -> None:
    uvicorn.run("pokedex.main:app", host=settings.HOST, port=settings.PORT, reload=(settings.ENV == "dev"))


if __name__ == "__main__":
    run()
