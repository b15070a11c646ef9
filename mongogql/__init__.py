from .applications import GraphQL
from .models import Post
from .schema import build_schema

__all__ = ['GraphQL', 'Post', 'build_schema']
