"""
➡️ Objetivo : lógica de negocio del recurso Pokémon.

PokemonService : orquesta el repositorio y la recepción de imágenes, aplica
las reglas (la imagen nunca se toca en una actualización, borrar un id
inexistente es NotFound) y traduce los fallos del driver a StorageError.

🔹 Ventajas :

Código de negocio desacoplado de la web.

Testeable sin pasar por FastAPI.
"""

import logging
from typing import Optional, Sequence

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError

from pokedex.core.errors import NotFound, StorageError, short_diagnostic
from pokedex.db.models.base import utc_now
from pokedex.db.models.pokemon import Pokemon
from pokedex.db.repositories.pokemon import PokemonRepository
from pokedex.features.media.services import ImageService
from pokedex.features.pokemon.schemas import PokemonCreate, PokemonUpdate

logger = logging.getLogger(__name__)

NOT_FOUND_MSG = "Pokémon no encontrado."


class PokemonService:
    def __init__(self, *, repo: PokemonRepository, image_svc: ImageService):
        self.repo = repo
        self.image_svc = image_svc

    def _storage_error(self, prefix: str, exc: SQLAlchemyError, *, envelope: bool = True) -> StorageError:
        self.repo.rollback()
        logger.error("%s %s", prefix, exc)
        return StorageError(f"{prefix} {short_diagnostic(exc)}", envelope=envelope)

    # ---------- Lecturas ----------

    def list(self) -> Sequence[Pokemon]:
        try:
            return self.repo.list()
        except SQLAlchemyError as e:
            raise self._storage_error("Error al obtener Pokémon:", e, envelope=False)

    def get(self, pokemon_id: int) -> Pokemon:
        try:
            pokemon = self.repo.get(pokemon_id) if pokemon_id > 0 else None
        except SQLAlchemyError as e:
            raise self._storage_error("Error al obtener el Pokémon:", e, envelope=False)
        if not pokemon:
            raise NotFound(NOT_FOUND_MSG, envelope=False)
        return pokemon

    # ---------- Escrituras ----------

    async def create(self, cmd: PokemonCreate, imagen: Optional[UploadFile] = None) -> Pokemon:
        # La imagen se guarda antes de la fila : si falla, no se escribe nada.
        # Si la inserción falla después, el archivo queda huérfano.
        imagen_url = await self.image_svc.store(imagen, nombre=cmd.nombre)
        try:
            pokemon = self.repo.create(**cmd.model_dump(), imagen_url=imagen_url)
        except SQLAlchemyError as e:
            raise self._storage_error("Error al registrar el Pokémon:", e)
        logger.info("Pokémon #%s '%s' registrado (id=%s)", cmd.numero_pokemon, cmd.nombre, pokemon.id)
        return pokemon

    def update(self, cmd: PokemonUpdate) -> Pokemon:
        try:
            pokemon = self.repo.get(cmd.id)
            if not pokemon:
                raise NotFound(NOT_FOUND_MSG)
            # imagen_url no forma parte de los cambios
            pokemon = self.repo.update(
                pokemon,
                numero_pokemon=cmd.numero_pokemon,
                nombre=cmd.nombre,
                tipo=cmd.tipo,
                nivel=cmd.nivel,
                habilidad=cmd.habilidad,
                updated_at=utc_now(),
            )
        except SQLAlchemyError as e:
            raise self._storage_error("Error al actualizar el Pokémon:", e)
        logger.info("Pokémon id=%s actualizado", cmd.id)
        return pokemon

    def delete(self, pokemon_id: int) -> None:
        try:
            pokemon = self.repo.get(pokemon_id)
            if not pokemon:
                raise NotFound(NOT_FOUND_MSG)
            self.repo.delete(pokemon)
        except SQLAlchemyError as e:
            raise self._storage_error("Error al eliminar el Pokémon:", e)
        logger.info("Pokémon id=%s eliminado", pokemon_id)
