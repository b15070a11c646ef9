import logging

from starlette.config import Config

config = Config()

DEBUG = config('DEBUG', cast=bool, default=False)
LOG_LEVEL = config('LOG_LEVEL', default='INFO')

MONGO_DATABASE = config('MONGO_DATABASE', default='graphql-mongo-zeit')
MONGO_COLLECTION = config('MONGO_COLLECTION', default='posts')
MONGO_TIMEOUT_MS = config('MONGO_TIMEOUT_MS', cast=int, default=5000)

SERVER_HOST = config('SERVER_HOST', default='127.0.0.1')
SERVER_PORT = config('SERVER_PORT', cast=int, default=8080)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
