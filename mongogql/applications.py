import traceback
import typing

from gql import make_schema
from gql.resolver import default_field_resolver, register_resolvers
from graphql import GraphQLError, GraphQLSchema, graphql
from starlette import status
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Route
from starlette.types import Receive, Scope, Send

ERROR_FORMATER = typing.Callable[[GraphQLError], typing.Dict[str, typing.Any]]


class BadRequest(ValueError):
    pass


class GraphQL(Starlette):
    def __init__(
        self,
        schema: GraphQLSchema = None,
        *,
        type_defs: str = None,
        debug: bool = False,
        routes: typing.List[BaseRoute] = None,
        path: str = '/',
        error_formater: ERROR_FORMATER = None,
        **kwargs,
    ):
        routes = routes or []
        if schema:
            self.schema = schema
        elif type_defs:
            self.schema = make_schema(type_defs)
        else:
            raise Exception('Must provide a schema or type def string.')
        register_resolvers(self.schema)

        routes.append(
            Route(path, ASGIApp(self.schema, debug=debug, error_formater=error_formater))
        )
        super().__init__(debug=debug, routes=routes, **kwargs)


class ASGIApp:
    def __init__(
        self, schema: GraphQLSchema, debug: bool = False, error_formater: ERROR_FORMATER = None,
    ) -> None:
        self.schema = schema
        self.debug = debug
        self.error_formater = error_formater or self.format_error

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive=receive, send=send)
        response = await self.handle_graphql(request)
        await response(scope, receive, send)

    def format_error(self, error: GraphQLError) -> typing.Dict[str, typing.Any]:
        if not error:
            raise ValueError("Received null or undefined error.")
        formatted = dict(  # noqa: E701 (pycqa/flake8#394)
            message=error.message or "An unknown error occurred.",
            locations=[l._asdict() for l in error.locations] if error.locations else None,
            path=error.path,
        )
        extensions = dict(error.extensions or {})
        if self.debug and error.original_error:
            original_error = error.original_error
            exception = dict(extensions.get('exception', {}))
            exception['traceback'] = traceback.format_exception(
                type(original_error), original_error, original_error.__traceback__
            )
            extensions['exception'] = exception
        if extensions:
            formatted.update(extensions=extensions)
        return formatted

    async def parse_body(self, request: Request) -> typing.Dict[str, typing.Any]:
        body = await request.body()
        if 'application/graphql' in request.headers.get('Content-Type', ''):
            try:
                return {'query': body.decode()}
            except UnicodeDecodeError as exc:
                raise BadRequest(str(exc)) from exc

        try:
            data = await request.json()
        except (UnicodeDecodeError, ValueError) as exc:
            raise BadRequest(str(exc)) from exc

        if not isinstance(data, dict):
            raise BadRequest('Request body must be a JSON object')
        if not isinstance(data.get('query') or '', str):
            raise BadRequest('query must be a string')
        if not isinstance(data.get('variables') or {}, dict):
            raise BadRequest('variables must be a JSON object')
        if not isinstance(data.get('operationName') or '', str):
            raise BadRequest('operationName must be a string')
        return data

    async def handle_graphql(self, request: Request) -> Response:
        if request.method != 'POST':
            return PlainTextResponse(
                'Method Not Allowed', status_code=status.HTTP_405_METHOD_NOT_ALLOWED
            )

        try:
            data = await self.parse_body(request)
        except BadRequest as exc:
            return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

        query = data.get('query')
        if not query:
            return PlainTextResponse(
                'No GraphQL query found in the request', status_code=status.HTTP_400_BAD_REQUEST,
            )

        result = await graphql(
            self.schema,
            query,
            variable_values=data.get('variables'),
            operation_name=data.get('operationName'),
            context_value={'request': request},
            field_resolver=default_field_resolver,
        )
        response_data = {'data': result.data}
        if result.errors:
            response_data['errors'] = [self.error_formater(err) for err in result.errors]

        try:
            return JSONResponse(response_data, status_code=status.HTTP_200_OK)
        except (TypeError, ValueError) as exc:
            return PlainTextResponse(
                str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
