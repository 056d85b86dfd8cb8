import os

os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine, select

from pokedex.main import app
from pokedex.db.session import get_session
from pokedex.api.v1.dependencies import get_image_service
from pokedex.features.media.services import ImageService



@pytest.fixture
def engine():
    """Base SQLite en memoria, nueva para cada test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine, tmp_path):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_image_service] = lambda: ImageService(base_dir=tmp_path)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_rows(engine):
    """Lee las filas de una tabla con una sesión nueva (sin caché)."""
    def _rows(model):
        with Session(engine) as session:
            return session.exec(select(model).order_by(model.id)).all()
    return _rows


@pytest.fixture
def pikachu():
    return {
        "numero_pokemon": "25",
        "nombre": "Pikachu",
        "tipo": "Eléctrico",
        "nivel": "5",
        "habilidad": "Estático",
    }


@pytest.fixture
def create_pokemon(client, pikachu):
    def _create(**overrides):
        data = {**pikachu, **overrides}
        resp = client.post("/api/v1/pokemon", data=data)
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]
    return _create


@pytest.fixture
def register(client):
    def _register(nombre="Ash", email="ash@pallet.town", password="pikachu123", telefono="555-0101"):
        resp = client.post("/api/v1/user", json={
            "action": "register",
            "nombre": nombre,
            "email": email,
            "password": password,
            "telefono": telefono,
        })
        return resp
    return _register
