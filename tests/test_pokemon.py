from pathlib import Path

import pytest

from pokedex.db.models.pokemon import Pokemon

URL = "/api/v1/pokemon"

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


# --- GET (lista / detalle) ---

def test_list_empty(client):
    resp = client.get(URL)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == []


def test_list_newest_first(client, create_pokemon):
    first = create_pokemon(nombre="Bulbasaur", numero_pokemon="1")
    second = create_pokemon(nombre="Charmander", numero_pokemon="4")
    ids = [p["id"] for p in client.get(URL).json()]
    assert ids == [second, first]


def test_get_returns_supplied_fields(client, create_pokemon):
    pokemon_id = create_pokemon()
    resp = client.get(URL, params={"id": pokemon_id})
    assert resp.status_code == 200
    assert resp.json() == {
        "id": pokemon_id,
        "numero_pokemon": 25,
        "nombre": "Pikachu",
        "tipo": "Eléctrico",
        "nivel": 5,
        "habilidad": "Estático",
        "imagen_url": None,
    }


def test_get_unknown_id(client):
    resp = client.get(URL, params={"id": 999})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Pokémon no encontrado."}


def test_get_non_numeric_id_is_not_found(client, create_pokemon):
    create_pokemon()
    resp = client.get(URL, params={"id": "abc"})
    assert resp.status_code == 404


def test_get_id_beyond_integer_range_is_not_found(client, create_pokemon):
    create_pokemon()
    resp = client.get(URL, params={"id": "99999999999999999999"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Pokémon no encontrado."}


def test_get_empty_id_falls_back_to_list(client, create_pokemon):
    create_pokemon()
    resp = client.get(URL, params={"id": ""})
    assert resp.status_code == 200
    assert isinstance(resp.json(), list)


# --- POST ---

def test_create_without_image(client, pikachu):
    resp = client.post(URL, data=pikachu)
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Pokémon registrado con éxito."
    assert isinstance(body["id"], int)
    assert body["imagen_url"] is None


def test_create_defaults_nivel_to_one(client, pikachu, db_rows):
    del pikachu["nivel"]
    del pikachu["habilidad"]
    assert client.post(URL, data=pikachu).status_code == 201
    row = db_rows(Pokemon)[0]
    assert row.nivel == 1
    assert row.habilidad == ""


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"nombre": ""}, "nombre"),
        ({"nombre": "   "}, "nombre"),
        ({"tipo": ""}, "tipo"),
        ({"numero_pokemon": "0"}, "numero_pokemon"),
        ({"numero_pokemon": "-3"}, "numero_pokemon"),
        ({"numero_pokemon": "abc"}, "numero_pokemon"),
    ],
)
def test_create_validation_writes_nothing(client, pikachu, db_rows, overrides, field):
    resp = client.post(URL, data={**pikachu, **overrides})
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "El número, nombre y tipo del Pokémon son obligatorios."
    assert field in body["fields"]
    assert db_rows(Pokemon) == []


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"numero_pokemon": "99999999999999999999"}, "numero_pokemon"),
        ({"nivel": "99999999999999999999"}, "nivel"),
        ({"nivel": "-99999999999999999999"}, "nivel"),
    ],
)
def test_create_rejects_numbers_beyond_integer_range(client, pikachu, db_rows, overrides, field):
    resp = client.post(URL, data={**pikachu, **overrides})
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Valor numérico fuera de rango.", "fields": [field]}
    assert db_rows(Pokemon) == []


def test_timestamps_are_timezone_aware():
    pokemon = Pokemon(numero_pokemon=25, nombre="Pikachu", tipo="Eléctrico")
    assert pokemon.created_at.tzinfo is not None
    assert pokemon.updated_at.tzinfo is not None


def test_create_with_image(client, pikachu, tmp_path):
    resp = client.post(URL, data=pikachu, files={"imagen": ("pika.PNG", PNG_BYTES, "image/png")})
    assert resp.status_code == 201
    imagen_url = resp.json()["imagen_url"]
    assert imagen_url.startswith("public/images/pokemon/")
    assert imagen_url.endswith(".png")
    assert not Path(imagen_url).is_absolute()
    assert (tmp_path / imagen_url).read_bytes() == PNG_BYTES

    detail = client.get(URL, params={"id": resp.json()["id"]}).json()
    assert detail["imagen_url"] == imagen_url


def test_same_image_twice_gets_distinct_names(client, pikachu):
    first = client.post(URL, data=pikachu, files={"imagen": ("a.png", PNG_BYTES, "image/png")})
    second = client.post(URL, data=pikachu, files={"imagen": ("a.png", PNG_BYTES, "image/png")})
    assert first.json()["imagen_url"] != second.json()["imagen_url"]


def test_oversized_image_rejected_before_insert(client, pikachu, db_rows, tmp_path):
    from pokedex.api.v1.dependencies import get_image_service
    from pokedex.features.media.services import ImageService
    from pokedex.main import app

    app.dependency_overrides[get_image_service] = lambda: ImageService(base_dir=tmp_path, max_mb=0)
    resp = client.post(URL, data=pikachu, files={"imagen": ("big.png", PNG_BYTES, "image/png")})
    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert resp.json()["error"].startswith("Error de subida de archivo")
    assert db_rows(Pokemon) == []


def test_image_directory_failure_aborts_create(client, pikachu, db_rows, tmp_path):
    from pokedex.api.v1.dependencies import get_image_service
    from pokedex.features.media.services import ImageService
    from pokedex.main import app

    blocker = tmp_path / "blocker"
    blocker.write_text("no soy un directorio")
    app.dependency_overrides[get_image_service] = lambda: ImageService(base_dir=blocker)

    resp = client.post(URL, data=pikachu, files={"imagen": ("a.png", PNG_BYTES, "image/png")})
    assert resp.status_code == 500
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "Error al crear el directorio de imágenes: public/images/pokemon"
    assert str(tmp_path) not in body["error"]
    assert db_rows(Pokemon) == []


# --- PUT ---

def test_update_scenario(client, pikachu):
    created = client.post(URL, data=pikachu)
    assert created.status_code == 201
    assert created.json()["imagen_url"] is None
    pokemon_id = created.json()["id"]

    resp = client.put(URL, data={**pikachu, "id": str(pokemon_id), "nivel": "10"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Pokémon actualizado con éxito."}

    detail = client.get(URL, params={"id": pokemon_id}).json()
    assert detail["nivel"] == 10
    assert detail["imagen_url"] is None

    assert client.delete(URL, params={"id": pokemon_id}).status_code == 200
    assert client.get(URL, params={"id": pokemon_id}).status_code == 404


def test_update_never_touches_image(client, pikachu):
    created = client.post(URL, data=pikachu, files={"imagen": ("a.png", PNG_BYTES, "image/png")}).json()
    resp = client.put(URL, data={
        **pikachu,
        "id": str(created["id"]),
        "imagen_url_existente": "public/images/pokemon/otra.png",
    })
    assert resp.status_code == 200
    detail = client.get(URL, params={"id": created["id"]}).json()
    assert detail["imagen_url"] == created["imagen_url"]


def test_update_requires_id(client, pikachu):
    resp = client.put(URL, data=pikachu)
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["error"] == "ID, número, nombre y tipo del Pokémon son obligatorios para actualizar."
    assert body["fields"] == ["id"]


def test_update_invalid_fields_leave_row_unchanged(client, create_pokemon, db_rows):
    pokemon_id = create_pokemon()
    resp = client.put(URL, data={"id": str(pokemon_id), "numero_pokemon": "25", "nombre": "", "tipo": "Agua"})
    assert resp.status_code == 400
    assert db_rows(Pokemon)[0].tipo == "Eléctrico"


def test_update_rejects_id_beyond_integer_range(client, create_pokemon, pikachu, db_rows):
    create_pokemon()
    resp = client.put(URL, data={**pikachu, "id": "99999999999999999999", "nivel": "10"})
    assert resp.status_code == 400
    assert resp.json()["fields"] == ["id"]
    assert db_rows(Pokemon)[0].nivel == 5


def test_update_unknown_id(client, pikachu):
    resp = client.put(URL, data={**pikachu, "id": "404"})
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": "Pokémon no encontrado."}


# --- DELETE ---

def test_delete_twice_is_not_found(client, create_pokemon, db_rows):
    pokemon_id = create_pokemon()
    first = client.delete(URL, params={"id": pokemon_id})
    assert first.status_code == 200
    assert first.json() == {"success": True, "message": "Pokémon eliminado con éxito."}

    second = client.delete(URL, params={"id": pokemon_id})
    assert second.status_code == 404
    assert second.json() == {"success": False, "error": "Pokémon no encontrado."}
    assert db_rows(Pokemon) == []


def test_delete_never_existed(client):
    assert client.delete(URL, params={"id": 12345}).status_code == 404


def test_delete_requires_id(client):
    resp = client.delete(URL)
    assert resp.status_code == 400
    assert resp.json()["error"] == "ID de Pokémon es obligatorio para eliminar."


@pytest.mark.parametrize("raw_id", ["0", "abc", "99999999999999999999"])
def test_delete_with_unusable_id_is_rejected(client, create_pokemon, db_rows, raw_id):
    create_pokemon()
    resp = client.delete(URL, params={"id": raw_id})
    assert resp.status_code == 400
    assert resp.json() == {
        "success": False,
        "error": "ID de Pokémon es obligatorio para eliminar.",
        "fields": ["id"],
    }
    assert len(db_rows(Pokemon)) == 1


# --- Métodos ---

def test_unsupported_method(client):
    resp = client.patch(URL, data={})
    assert resp.status_code == 405
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"error": "Método no permitido."}


def test_preflight(client):
    resp = client.options(URL)
    assert resp.status_code == 200


def test_browser_preflight_is_json(client):
    resp = client.options(
        URL,
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "x-requested-with, content-type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "PUT" in resp.headers["access-control-allow-methods"]
    assert resp.json() is None
