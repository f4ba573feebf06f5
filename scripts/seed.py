from pathlib import Path

from cinedata.core.logging import configure_logging
from cinedata.db.client import get_database, init_db
from cinedata.db.seed import seed_all

SEED_PATH = Path(__file__).resolve().parent.parent / "cinedata" / "db" / "seed_data.yaml"


def run_seed() -> None:
    configure_logging()
    db = get_database()
    init_db(db)
    seed_all(db, SEED_PATH)


if __name__ == "__main__":
    run_seed()
