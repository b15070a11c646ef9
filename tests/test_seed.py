import mongomock
import pytest
from pymongo.errors import OperationFailure

from mongogql.seed import cleanup, seed

SEEDED = [
    {'ID': 1, 'title': 'First post', 'slug': 'first-post'},
    {'ID': 2, 'title': 'Second post', 'slug': 'second-post'},
    {'ID': 3, 'title': 'Third post', 'slug': 'third-post'},
]


def stored(collection):
    return list(collection.find({}, {'_id': 0}).sort('ID', 1))


def test_seed_inserts_the_fixed_posts(posts):
    seed()

    assert stored(posts) == SEEDED


def test_seed_is_repeatable(posts):
    seed()
    seed()

    assert posts.count_documents({}) == 3
    assert stored(posts) == SEEDED


def test_seed_replaces_existing_documents(posts):
    posts.insert_one({'ID': 42, 'title': 'Stale', 'slug': 'stale'})

    seed()

    assert stored(posts) == SEEDED


def test_cleanup_removes_everything(posts):
    posts.insert_many([{'ID': i, 'slug': str(i), 'title': str(i)} for i in range(5)])

    cleanup()

    assert posts.count_documents({}) == 0


def test_seed_uses_given_collection(mongo_client):
    seed('articles')

    assert mongo_client['graphql-mongo-zeit']['articles'].count_documents({}) == 3


def test_seed_exits_when_database_is_unreachable(monkeypatch):
    from mongogql import database

    def refuse(*args, **kwargs):
        raise OperationFailure('connection refused')

    monkeypatch.setattr(database, 'MongoClient', refuse)

    with pytest.raises(SystemExit) as exc_info:
        seed()
    assert exc_info.value.code == 1


def test_seed_exits_when_insert_fails(monkeypatch, posts):
    def broken(*args, **kwargs):
        raise OperationFailure('insert failed')

    monkeypatch.setattr(mongomock.collection.Collection, 'insert_many', broken)

    with pytest.raises(SystemExit):
        seed()


def test_cleanup_exits_when_delete_fails(monkeypatch, posts):
    def broken(*args, **kwargs):
        raise OperationFailure('delete failed')

    monkeypatch.setattr(mongomock.collection.Collection, 'delete_many', broken)

    with pytest.raises(SystemExit):
        cleanup()


@pytest.mark.parametrize('name', ['HOST', 'USER', 'PWD'])
def test_seed_exits_when_configuration_is_missing(monkeypatch, posts, name):
    monkeypatch.delenv(name)

    with pytest.raises(SystemExit) as exc_info:
        seed()
    assert exc_info.value.code == 1
    assert posts.count_documents({}) == 0
