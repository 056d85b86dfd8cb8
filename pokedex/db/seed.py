import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from sqlmodel import Session

from pokedex.core.errors import Conflict
from pokedex.db.repositories.pokemon import PokemonRepository
from pokedex.db.repositories.usuarios import UsuarioRepository
from pokedex.features.authentication.schemas import RegisterCommand
from pokedex.features.authentication.services import AuthService
from pokedex.features.pokemon.schemas import PokemonCreate

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"YAML de seed no encontrado: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("El YAML de seed debe contener un objeto raíz (mapping).")
    return data


# -----------------------------
# Seeds
# -----------------------------
def seed_usuarios(session: Session, usuarios_yaml: List[Dict[str, Any]]) -> int:
    """Crea los usuarios cuyo email aún no está registrado."""
    auth = AuthService(user_repo=UsuarioRepository(session))
    created = 0
    for u in usuarios_yaml:
        try:
            auth.register(RegisterCommand(**u))
            created += 1
        except Conflict:
            logger.info("Usuario %s ya existe, se omite", u.get("email"))
    return created


def seed_pokemon(session: Session, pokemon_yaml: List[Dict[str, Any]]) -> int:
    """Crea los Pokémon que no existen (mismo numero_pokemon + nombre)."""
    repo = PokemonRepository(session)
    created = 0
    for p in pokemon_yaml:
        cmd = PokemonCreate(**p)
        if repo.find_by_numero_and_nombre(cmd.numero_pokemon, cmd.nombre):
            continue
        repo.create(**cmd.model_dump(), imagen_url=p.get("imagen_url"))
        created += 1
    return created


def seed_all(*, session: Session, seed_path: str | Path) -> Dict[str, int]:
    data = load_seed_yaml(seed_path)
    result = {
        "usuarios": seed_usuarios(session, data.get("usuarios", [])),
        "pokemon": seed_pokemon(session, data.get("pokemon", [])),
    }
    logger.info("Seed terminado: %s", result)
    return result
