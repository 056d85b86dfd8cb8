import logging

from sqlalchemy.exc import SQLAlchemyError

from pokedex.core.errors import Conflict, StorageError, Unauthorized, short_diagnostic
from pokedex.db.models.usuarios import Usuario
from pokedex.db.repositories.usuarios import UsuarioRepository
from pokedex.features.authentication.schemas import LoginCommand, LoginUserOut, RegisterCommand
from pokedex.security.password import hash_password, verify_password

logger = logging.getLogger(__name__)

EMAIL_TAKEN_MSG = "El email ya está registrado."
INVALID_CREDENTIALS_MSG = "Email o contraseña incorrectos."


class AuthService:
    """
    Registro y login. No emite tokens ni sesiones : el login solo
    devuelve la identidad mínima (id, nombre, email).
    """

    def __init__(self, *, user_repo: UsuarioRepository):
        self.user_repo = user_repo

    def _storage_error(self, prefix: str, exc: SQLAlchemyError) -> StorageError:
        self.user_repo.rollback()
        logger.error("%s %s", prefix, exc)
        return StorageError(f"{prefix} {short_diagnostic(exc)}")

    # ---------- Registro ----------
    def register(self, cmd: RegisterCommand) -> Usuario:
        try:
            if self.user_repo.get_by_email(cmd.email):
                logger.info("Registro rechazado: email ya registrado")
                raise Conflict(EMAIL_TAKEN_MSG)
            user = self.user_repo.create(
                nombre=cmd.nombre,
                email=cmd.email,
                password=hash_password(cmd.password),
                telefono=cmd.telefono,
            )
        except SQLAlchemyError as e:
            raise self._storage_error("Error al ejecutar el registro:", e)
        logger.info("Usuario registrado (id=%s)", user.id)
        return user

    # ---------- Login ----------
    def login(self, cmd: LoginCommand) -> LoginUserOut:
        try:
            user = self.user_repo.get_by_email(cmd.email)
        except SQLAlchemyError as e:
            raise self._storage_error("Error al verificar credenciales:", e)

        # Misma respuesta si el email no existe o si la contraseña no coincide
        if not user or not verify_password(cmd.password, user.password):
            logger.info("Login fallido")
            raise Unauthorized(INVALID_CREDENTIALS_MSG)

        logger.info("Login correcto (id=%s)", user.id)
        return LoginUserOut(id=user.id, nombre=user.nombre, email=user.email)
