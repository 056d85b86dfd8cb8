from typing import Any, Generic, Optional, Sequence, Type, TypeVar
from sqlmodel import SQLModel, Session, select

# Tipo genérico para el modelo (Pokemon, Usuario)
ModelT = TypeVar("ModelT", bound=SQLModel)

class BaseRepository(Generic[ModelT]):
    """
    Repositorio base para las operaciones CRUD estándar.

    👉 No contiene lógica de negocio.
    👉 Persistencia genérica : create, read, update, delete, list.
    👉 Los repositorios concretos definen `model = MiClaseSQLModel`.
    👉 Todas las consultas son parametrizadas (SQLAlchemy), nunca SQL concatenado.
    """

    model: Type[ModelT]

    def __init__(self, session: Session):
        self.session = session

    # ---------- READ ----------

    def list(self) -> Sequence[ModelT]:
        """Todos los registros, del más reciente (id mayor) al más antiguo."""
        statement = select(self.model).order_by(self.model.id.desc())
        return self.session.exec(statement).all()

    def get(self, id_: Any) -> Optional[ModelT]:
        """Devuelve un registro por su identificador, o None."""
        return self.session.get(self.model, id_)

    # ---------- CREATE ----------

    def create(self, **fields) -> ModelT:
        entity = self.model(**fields)
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    # ---------- UPDATE ----------

    def update(self, entity: ModelT, **changes) -> ModelT:
        for key, value in changes.items():
            setattr(entity, key, value)
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return entity

    # ---------- DELETE ----------

    def delete(self, entity: ModelT) -> None:
        self.session.delete(entity)
        self.session.commit()

    def rollback(self) -> None:
        """Deja la sesión utilizable tras un fallo del driver."""
        self.session.rollback()
