from gql import gql, make_schema
from graphql import GraphQLSchema

from . import resolvers  # noqa: F401

type_defs = gql(
    """
  schema {
    query: Query
  }

  type Query {
    post(slug: String!): Post
  }

  type Post {
    id: ID!
    slug: String!
    title: String!
  }
"""
)


def build_schema() -> GraphQLSchema:
    return make_schema(type_defs)
