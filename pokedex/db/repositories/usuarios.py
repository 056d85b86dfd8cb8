"""
➡️ Objetivo : encapsular las operaciones de base de datos sobre la tabla usuarios.

No contiene lógica de negocio, solo persistencia. La unicidad del email se
comprueba aquí (consulta) y se decide en los servicios.
"""

from __future__ import annotations

from typing import Optional
from sqlmodel import select

from pokedex.db.repositories.base import BaseRepository
from pokedex.db.models.usuarios import Usuario

class UsuarioRepository(BaseRepository[Usuario]):
    model = Usuario

    def get_by_email(self, email: str) -> Optional[Usuario]:
        """Devuelve un usuario por su email."""
        return self.session.exec(
            select(self.model).where(self.model.email == email)
        ).first()

    def email_taken_by_other(self, email: str, user_id: int) -> bool:
        """True si otro usuario (id distinto) ya usa ese email."""
        found = self.session.exec(
            select(self.model.id)
            .where(self.model.email == email)
            .where(self.model.id != user_id)
        ).first()
        return found is not None
