import logging
import typing
from contextlib import contextmanager
from urllib.parse import quote_plus

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConfigurationError, PyMongoError

from .config import MONGO_COLLECTION, MONGO_DATABASE, MONGO_TIMEOUT_MS, config
from .models import Post

logger = logging.getLogger(__name__)


def mongo_uri() -> str:
    try:
        host = config('HOST')
        user = config('USER')
        pwd = config('PWD')
    except KeyError as exc:
        raise ConfigurationError(str(exc)) from exc

    return f'mongodb://{quote_plus(user)}:{quote_plus(pwd)}@{host}'


@contextmanager
def get_mongo(collection_name: str = MONGO_COLLECTION) -> typing.Iterator[Collection]:
    """Yield the named collection from a client opened for this call only."""
    client = MongoClient(mongo_uri(), serverSelectionTimeoutMS=MONGO_TIMEOUT_MS)
    try:
        # MongoClient connects lazily, force a round trip so a bad host fails here.
        client.server_info()
        yield client[MONGO_DATABASE][collection_name]
    finally:
        client.close()


def find_post(slug: str, collection_name: str = MONGO_COLLECTION) -> typing.Optional[Post]:
    # Errors are logged and reported as a missing post.
    try:
        with get_mongo(collection_name) as collection:
            doc = collection.find_one({'slug': slug})
    except PyMongoError as exc:
        logger.error('Post lookup for slug %r failed: %s', slug, exc)
        return None

    if doc is None:
        return None
    return Post.from_document(doc)
