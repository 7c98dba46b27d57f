# fishcast/app/services/data_collectors/environmental_collector.py
import logging
import random
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fishcast.app.core.config import REFERENCE_LOCATIONS
from fishcast.app.db.session import SessionLocal
from fishcast.app.services.conditions.sampler import EnvironmentalSampler
from fishcast.app.stores.condition_store import ConditionStore

logger = logging.getLogger(__name__)


def refresh_environmental_data(rng: Optional[random.Random] = None) -> int:
    """
    Synthesizes a fresh reading for each reference location and stores them.
    Failures are logged and rolled back, never raised, so the scheduler keeps running.
    Returns the number of readings stored.
    """
    logger.info("Running scheduled environmental data refresh...")
    sampler = EnvironmentalSampler(rng=rng)

    db: Session = SessionLocal()
    try:
        readings = [sampler.synthesize(location["lat"], location["lng"]) for location in REFERENCE_LOCATIONS]
        stored = ConditionStore(db).add_many(readings)
        logger.info("Environmental data refreshed: stored %d readings", stored)
        return stored
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database error during environmental data refresh")
    except Exception:
        db.rollback()
        logger.exception("Unexpected error during environmental data refresh")
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    refresh_environmental_data()
