import pytest

from pokedex.db.models.usuarios import Usuario

URL = "/api/v1/usuarios"
AUTH_URL = "/api/v1/user"


def _login(client, email, password):
    return client.post(AUTH_URL, json={"action": "login", "email": email, "password": password})


def test_list_hides_password(client, register):
    register()
    register(nombre="Misty", email="misty@cerulean.gym")
    users = client.get(URL).json()
    assert [u["nombre"] for u in users] == ["Misty", "Ash"]
    assert all(set(u) == {"id", "nombre", "email", "telefono"} for u in users)


def test_get_detail_and_not_found(client, register, db_rows):
    register()
    user_id = db_rows(Usuario)[0].id
    assert client.get(URL, params={"id": user_id}).json()["email"] == "ash@pallet.town"

    resp = client.get(URL, params={"id": 999})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Usuario no encontrado."}


def test_update_without_password_keeps_hash(client, register, db_rows):
    register()
    before = db_rows(Usuario)[0]

    resp = client.put(URL, data={"id": str(before.id), "nombre": "Ash K.", "email": before.email, "telefono": "", "password": ""})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Usuario actualizado con éxito."}

    after = db_rows(Usuario)[0]
    assert after.nombre == "Ash K."
    assert after.password == before.password
    assert _login(client, "ash@pallet.town", "pikachu123").status_code == 200


def test_update_with_new_password(client, register, db_rows):
    register()
    user = db_rows(Usuario)[0]
    resp = client.put(URL, data={"id": str(user.id), "nombre": "Ash", "email": user.email, "password": "nueva"})
    assert resp.status_code == 200
    assert _login(client, user.email, "pikachu123").status_code == 401
    assert _login(client, user.email, "nueva").status_code == 200


def test_update_email_of_other_user_conflicts(client, register, db_rows):
    register()
    register(nombre="Misty", email="misty@cerulean.gym")
    ash, misty = db_rows(Usuario)

    resp = client.put(URL, data={"id": str(ash.id), "nombre": "Ash", "email": misty.email})
    assert resp.status_code == 409
    assert resp.json() == {"success": False, "error": "El email ya está registrado en otro usuario."}
    assert db_rows(Usuario)[0].email == "ash@pallet.town"


def test_update_requires_id(client):
    resp = client.put(URL, data={"nombre": "Ash", "email": "ash@pallet.town"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "ID de usuario es obligatorio."


def test_update_requires_nombre_and_email(client, register, db_rows):
    register()
    user_id = db_rows(Usuario)[0].id
    resp = client.put(URL, data={"id": str(user_id), "nombre": "", "email": ""})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Nombre y email son obligatorios."
    assert body["fields"] == ["nombre", "email"]


def test_update_unknown_user(client):
    resp = client.put(URL, data={"id": "77", "nombre": "Nadie", "email": "nadie@example.com"})
    assert resp.status_code == 404


def test_delete(client, register, db_rows):
    register()
    user_id = db_rows(Usuario)[0].id
    assert client.delete(URL, params={"id": user_id}).json() == {"success": True, "message": "Usuario eliminado con éxito."}
    assert client.delete(URL, params={"id": user_id}).status_code == 404
    assert client.delete(URL).json()["error"] == "ID de usuario es obligatorio para eliminar."


def test_post_not_allowed(client):
    resp = client.post(URL, json={})
    assert resp.status_code == 405
    assert resp.json() == {"error": "Método no permitido."}


def test_id_beyond_integer_range(client, register, db_rows):
    register()
    huge = "99999999999999999999"
    assert client.get(URL, params={"id": huge}).json() == {"error": "Usuario no encontrado."}

    resp = client.put(URL, data={"id": huge, "nombre": "Ash", "email": "ash@pallet.town"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "ID de usuario es obligatorio."


@pytest.mark.parametrize("raw_id", ["0", "abc"])
def test_delete_with_unusable_id_is_rejected(client, register, db_rows, raw_id):
    register()
    resp = client.delete(URL, params={"id": raw_id})
    assert resp.status_code == 400
    assert resp.json()["error"] == "ID de usuario es obligatorio para eliminar."
    assert len(db_rows(Usuario)) == 1
