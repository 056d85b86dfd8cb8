from pathlib import Path

import pytest
from sqlmodel import Session

from pokedex.db import seed
from pokedex.db.models.pokemon import Pokemon
from pokedex.db.models.usuarios import Usuario

SEED_FILE = Path(seed.__file__).parent / "seed_data.yaml"


def test_seed_all_is_repeatable(engine, db_rows):
    with Session(engine) as session:
        first = seed.seed_all(session=session, seed_path=SEED_FILE)
    with Session(engine) as session:
        second = seed.seed_all(session=session, seed_path=SEED_FILE)

    assert first == {"usuarios": 2, "pokemon": 4}
    assert second == {"usuarios": 0, "pokemon": 0}
    assert len(db_rows(Pokemon)) == 4
    assert all(u.password != "pikachu123" for u in db_rows(Usuario))


def test_seed_rejects_non_mapping(tmp_path):
    path = tmp_path / "seed.yaml"
    path.write_text("- solo\n- una lista\n", encoding="utf-8")
    with pytest.raises(ValueError):
        seed.load_seed_yaml(path)


def test_seed_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        seed.load_seed_yaml(tmp_path / "nada.yaml")
