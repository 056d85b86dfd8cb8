from typing import Optional
from sqlmodel import select

from pokedex.db.repositories.base import BaseRepository
from pokedex.db.models.pokemon import Pokemon

class PokemonRepository(BaseRepository[Pokemon]):
    """CRUD Pokémon + consultas específicas."""
    model = Pokemon

    def find_by_numero_and_nombre(self, numero_pokemon: int, nombre: str) -> Optional[Pokemon]:
        return self.session.exec(
            select(self.model)
            .where(self.model.numero_pokemon == numero_pokemon)
            .where(self.model.nombre == nombre)
        ).first()
