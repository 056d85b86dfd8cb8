import logging
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError

from pokedex.core.errors import Conflict, NotFound, StorageError, short_diagnostic
from pokedex.db.models.base import utc_now
from pokedex.db.models.usuarios import Usuario
from pokedex.db.repositories.usuarios import UsuarioRepository
from pokedex.features.usuarios.schemas import UsuarioUpdate
from pokedex.security.password import hash_password

logger = logging.getLogger(__name__)

NOT_FOUND_MSG = "Usuario no encontrado."
EMAIL_TAKEN_MSG = "El email ya está registrado en otro usuario."


class UsuarioService:
    """
    Administración de usuarios : lista, detalle, actualización y borrado.
    - El email se vuelve a comprobar contra los demás usuarios en cada actualización.
    - El hash solo se reemplaza si llega una contraseña nueva.
    """

    def __init__(self, repo: UsuarioRepository):
        self.repo = repo

    def _storage_error(self, prefix: str, exc: SQLAlchemyError, *, envelope: bool = True) -> StorageError:
        self.repo.rollback()
        logger.error("%s %s", prefix, exc)
        return StorageError(f"{prefix} {short_diagnostic(exc)}", envelope=envelope)

    def list(self) -> Sequence[Usuario]:
        try:
            return self.repo.list()
        except SQLAlchemyError as e:
            raise self._storage_error("Error al obtener usuarios:", e, envelope=False)

    def get(self, user_id: int) -> Usuario:
        try:
            user = self.repo.get(user_id) if user_id > 0 else None
        except SQLAlchemyError as e:
            raise self._storage_error("Error al obtener el usuario:", e, envelope=False)
        if not user:
            raise NotFound(NOT_FOUND_MSG, envelope=False)
        return user

    def update(self, cmd: UsuarioUpdate) -> Usuario:
        try:
            if self.repo.email_taken_by_other(cmd.email, cmd.id):
                logger.info("Actualización rechazada: email duplicado (id=%s)", cmd.id)
                raise Conflict(EMAIL_TAKEN_MSG)

            user = self.repo.get(cmd.id)
            if not user:
                raise NotFound(NOT_FOUND_MSG)

            changes = {
                "nombre": cmd.nombre,
                "email": cmd.email,
                "telefono": cmd.telefono,
                "updated_at": utc_now(),
            }
            if cmd.password:
                changes["password"] = hash_password(cmd.password)
            user = self.repo.update(user, **changes)
        except SQLAlchemyError as e:
            raise self._storage_error("Error al actualizar el usuario:", e)
        logger.info("Usuario id=%s actualizado", cmd.id)
        return user

    def delete(self, user_id: int) -> None:
        try:
            user = self.repo.get(user_id)
            if not user:
                raise NotFound(NOT_FOUND_MSG)
            self.repo.delete(user)
        except SQLAlchemyError as e:
            raise self._storage_error("Error al eliminar el usuario:", e)
        logger.info("Usuario id=%s eliminado", user_id)
