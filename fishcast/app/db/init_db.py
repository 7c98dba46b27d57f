# fishcast/app/db/init_db.py
import logging

from fishcast.app import models # Registers every table on Base.metadata
from fishcast.app.core.config import SEED_HOTSPOTS
from fishcast.app.db.session import Base, SessionLocal, engine
from fishcast.app.stores.hotspot_store import HotspotStore

logger = logging.getLogger(__name__)


def create_tables(bind=None):
    Base.metadata.create_all(bind=bind or engine)


def seed_hotspots(db) -> int:
    return HotspotStore(db).seed(SEED_HOTSPOTS)


def init_db():
    """Creates missing tables and seeds the reference hotspots."""
    create_tables()
    db = SessionLocal()
    try:
        seed_hotspots(db)
    finally:
        db.close()
    logger.info("Database ready (%d tables)", len(models.__all__))
