"""
Seed script: loads sample_portfolio.json into an empty database.
Usage: python -m app.db.seed
"""
import json
from pathlib import Path

from app.db.database import SessionLocal, init_db
from app.db.repository import PortfolioRepository
from app.logging import get_logger, setup_logging
from app.schemas.property import PropertyCreate

logger = get_logger(__name__)

DATASET_PATH = Path(__file__).parent.parent.parent / "tests" / "fixtures" / "sample_portfolio.json"


def seed_repository(repo: PortfolioRepository, dataset_path: Path = DATASET_PATH) -> int:
    """Create the sample properties unless the store already holds some. Returns the count created."""
    if repo.list_properties():
        logger.info("Store already has properties, skipping seed")
        return 0

    with open(dataset_path, encoding="utf-8") as f:
        data = json.load(f)

    for prop in data["properties"]:
        repo.create_property(PropertyCreate.model_validate(prop))
    return len(data["properties"])


def seed():
    setup_logging()
    init_db()
    db = SessionLocal()
    try:
        created = seed_repository(PortfolioRepository(db))
    finally:
        db.close()
    logger.info("Seed completed: %d sample propert(ies) created", created)


if __name__ == "__main__":
    seed()
