from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field

from pokedex.utils.forms import Invalid, clean_str

ACTION_MISSING_MSG = "Acción no especificada."
ACTION_UNKNOWN_MSG = "Acción no reconocida."
REGISTER_REQUIRED_MSG = "Nombre, email y contraseña son obligatorios."
LOGIN_REQUIRED_MSG = "Email y contraseña son obligatorios."


# ---------- Inputs ----------

class RegisterCommand(BaseModel):
    action: Literal["register"] = "register"
    nombre: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    telefono: str = ""


class LoginCommand(BaseModel):
    action: Literal["login"] = "login"
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


AuthCommand = Union[RegisterCommand, LoginCommand]


# ---------- Outputs ----------

class LoginUserOut(BaseModel):
    id: int
    nombre: str
    email: str


class LoginOut(BaseModel):
    success: bool = True
    message: str = "Login exitoso."
    user: LoginUserOut


# ---------- Parsing ----------

def _password(raw: Mapping[str, Any]) -> str:
    # La contraseña no se recorta : los espacios forman parte de ella.
    value = raw.get("password")
    return "" if value is None else str(value)


def parse_auth_request(raw: Optional[Mapping[str, Any]]) -> Union[AuthCommand, Invalid]:
    """Decide la variante (register | login) a partir de `action`."""
    if not isinstance(raw, Mapping) or "action" not in raw:
        return Invalid(ACTION_MISSING_MSG, ["action"])

    action = raw.get("action")
    if action == "register":
        nombre = clean_str(raw.get("nombre"))
        email = clean_str(raw.get("email"))
        password = _password(raw)
        missing = [k for k, v in (("nombre", nombre), ("email", email), ("password", password)) if not v]
        if missing:
            return Invalid(REGISTER_REQUIRED_MSG, missing)
        return RegisterCommand(
            nombre=nombre,
            email=email,
            password=password,
            telefono=clean_str(raw.get("telefono")),
        )

    if action == "login":
        email = clean_str(raw.get("email"))
        password = _password(raw)
        missing = [k for k, v in (("email", email), ("password", password)) if not v]
        if missing:
            return Invalid(LOGIN_REQUIRED_MSG, missing)
        return LoginCommand(email=email, password=password)

    return Invalid(ACTION_UNKNOWN_MSG, ["action"])
