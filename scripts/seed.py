from pokedex.core.logging_config import setup_logging
from pokedex.db.session import engine, Session, init_db
from pokedex.db.seed import seed_all


def run_seed(seed_path: str = "pokedex/db/seed_data.yaml") -> None:
    setup_logging()
    init_db()
    with Session(engine) as session:
        seed_all(session=session, seed_path=seed_path)


if __name__ == "__main__":
    run_seed()
