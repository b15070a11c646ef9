import logging

from pymongo.errors import PyMongoError

from .config import MONGO_COLLECTION
from .database import get_mongo
from .models import SEED_POSTS

logger = logging.getLogger(__name__)


def _fatal(action: str, exc: Exception) -> None:
    logger.critical('%s failed: %s', action, exc)
    raise SystemExit(1) from exc


def cleanup(collection_name: str = MONGO_COLLECTION) -> None:
    """Remove every document from the collection."""
    logger.info('Cleaning up MongoDB...')
    try:
        with get_mongo(collection_name) as collection:
            collection.delete_many({})
    except PyMongoError as exc:
        _fatal('Cleanup', exc)


def seed(collection_name: str = MONGO_COLLECTION) -> None:
    logger.info('Seeding mock data to MongoDB')
    cleanup(collection_name)
    try:
        with get_mongo(collection_name) as collection:
            collection.insert_many([post.to_document() for post in SEED_POSTS])
    except PyMongoError as exc:
        _fatal('Seeding', exc)
    logger.info('Mock data added successfully!')
