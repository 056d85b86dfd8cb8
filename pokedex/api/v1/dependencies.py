"""
➡️ Objetivo : centralizar las dependencias reutilizables de las rutas.

Cada servicio se construye a partir de la sesión de la petición
(Depends(get_session)) : ningún handler toca una conexión global.

🔹 Ventajas :

Rutas más limpias (sin código duplicado).

Fácil de sustituir en los tests (app.dependency_overrides).
"""

from fastapi import Depends
from sqlmodel import Session

from pokedex.db.session import get_session

from pokedex.db.repositories.pokemon import PokemonRepository
from pokedex.db.repositories.usuarios import UsuarioRepository

from pokedex.features.media.services import ImageService
from pokedex.features.pokemon.services import PokemonService
from pokedex.features.usuarios.services import UsuarioService
from pokedex.features.authentication.services import AuthService


# -----------------------------
# Repositories
# -----------------------------
def get_pokemon_repository(session: Session = Depends(get_session)) -> PokemonRepository:
    return PokemonRepository(session)

def get_usuario_repository(session: Session = Depends(get_session)) -> UsuarioRepository:
    return UsuarioRepository(session)


# -----------------------------
# Media
# -----------------------------
def get_image_service() -> ImageService:
    return ImageService()


# -----------------------------
# Services
# -----------------------------
def get_pokemon_service(
    repo: PokemonRepository = Depends(get_pokemon_repository),
    image_svc: ImageService = Depends(get_image_service),
) -> PokemonService:
    return PokemonService(repo=repo, image_svc=image_svc)

def get_usuario_service(repo: UsuarioRepository = Depends(get_usuario_repository)) -> UsuarioService:
    return UsuarioService(repo)

def get_auth_service(user_repo: UsuarioRepository = Depends(get_usuario_repository)) -> AuthService:
    return AuthService(user_repo=user_repo)
