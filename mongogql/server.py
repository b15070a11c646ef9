import logging
from contextlib import asynccontextmanager

import uvicorn
from graphql import GraphQLSchema

from .applications import GraphQL
from .config import DEBUG, SERVER_HOST, SERVER_PORT, configure_logging
from .schema import build_schema
from .seed import seed

logger = logging.getLogger(__name__)


def create_app(schema: GraphQLSchema = None, seed_on_startup: bool = True) -> GraphQL:
    @asynccontextmanager
    async def lifespan(_):
        if seed_on_startup:
            seed()
        yield

    return GraphQL(schema or build_schema(), debug=DEBUG, lifespan=lifespan)


app = create_app()


def main() -> None:
    configure_logging()
    logger.info('Serving GraphQL on http://%s:%s/', SERVER_HOST, SERVER_PORT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == '__main__':
    main()
