from gql import field_resolver, query
from starlette.concurrency import run_in_threadpool

from .database import find_post


@query('post')
async def resolve_post(parent, info, slug: str):
    # pymongo blocks, keep it off the event loop.
    return await run_in_threadpool(find_post, slug)


@field_resolver('Post', 'id')
def resolve_post_id(post, *_):
    return post.id


@field_resolver('Post', 'slug')
def resolve_post_slug(post, *_):
    return post.slug


@field_resolver('Post', 'title')
def resolve_post_title(post, *_):
    return post.title
