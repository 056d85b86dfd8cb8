"""
➡️ Objetivo : personalizar la documentación Swagger/OpenAPI.

custom_openapi(app) completa el esquema generado por FastAPI con la
descripción de las convenciones de la API (sobres JSON, códigos de estado).
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "Registro de Pokémon con cuentas de usuario (FastAPI + SQLModel).\n\n"
            "### Convenciones\n"
            "- Un solo path por recurso; la operación la decide el método HTTP.\n"
            "- Escrituras: `{success, message}`; errores: `{success: false, error}`.\n"
            "- Lecturas GET: recurso o lista desnuda; error `{error}`.\n"
            "- 400 validación, 401 credenciales, 404 inexistente, 405 método, 409 email duplicado, 500 almacenamiento.\n"
            "- `imagen_url` es siempre una ruta relativa servida bajo `/public`.\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
