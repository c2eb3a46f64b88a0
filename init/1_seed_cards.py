"""
Script to load the built-in task cards into an empty card table.
Does not modify existing data.
"""
import sys
import logging
from pathlib import Path

# Add the project directory to Python path so we can import taskdeck
script_dir = Path(__file__).parent
project_dir = script_dir.parent
sys.path.insert(0, str(project_dir))

from sqlmodel import Session
from taskdeck.core.database import engine, init_db
from taskdeck.services.catalog_service import seed_default_cards

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logger.info("Seeding card catalog...")
    try:
        init_db()
        with Session(engine) as session:
            inserted = seed_default_cards(session)
        logger.info(f"Successfully completed! Inserted {inserted} cards")
    except Exception as e:
        logger.error("Error during seeding: %s", e, exc_info=True)
        sys.exit(1)
