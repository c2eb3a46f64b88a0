"""
Script to clear completion and profile data while keeping the card catalog.
"""
import sys
import logging
from pathlib import Path

# Add the project directory to Python path so we can import taskdeck
script_dir = Path(__file__).parent
project_dir = script_dir.parent
sys.path.insert(0, str(project_dir))

from sqlmodel import Session, text
from taskdeck.core.database import engine

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def clear_tables(include_profiles: bool = False):
    """Clear all completions, and optionally all profiles."""
    with Session(engine) as session:
        try:
            # Completions first (they reference profiles)
            logger.info("Deleting all completions...")
            result = session.exec(text("DELETE FROM completion"))
            logger.info(f"Deleted {result.rowcount} completions")

            if include_profiles:
                logger.info("Deleting all profiles...")
                result = session.exec(text("DELETE FROM profile"))
                logger.info(f"Deleted {result.rowcount} profiles")

            session.commit()
        except Exception as e:
            session.rollback()
            logger.error("Error clearing tables: %s", e, exc_info=True)
            raise


if __name__ == "__main__":
    logger.info("Starting table clearing...")
    try:
        clear_tables(include_profiles="--profiles" in sys.argv[1:])
        logger.info("Successfully completed!")
    except Exception as e:
        logger.error("Error during table clearing: %s", e, exc_info=True)
        sys.exit(1)
