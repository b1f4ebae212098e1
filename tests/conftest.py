import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from models.dataset import Dataset
from services.store import DatasetStore
from services.tokens import TokenService

TEST_SECRET = "test-secret-that-is-at-least-32-bytes-long"

SEED = {
    "users": [
        {"id": "1", "name": "Alice", "avatar": "alice.png", "friendIds": ["2", "3"]},
        {"id": "2", "name": "Bob", "avatar": "bob.png", "friendIds": []},
        {"id": "3", "name": "Carol", "avatar": None, "friendIds": ["1"]},
        {"id": "4", "name": "Dave", "friendIds": ["99"]},
    ],
    "posts": [
        {"id": "p1", "content": "Hello from Bob", "authorId": "2", "likeUserIds": []},
        {"id": "p2", "content": "Carol's thoughts", "authorId": "3", "likeUserIds": ["2"]},
        {"id": "p3", "content": "Alice writes", "authorId": "1", "likeUserIds": []},
        {"id": "p4", "content": "Bob again", "authorId": "2", "likeUserIds": []},
        {"id": "p5", "content": "Orphan post", "authorId": "99", "likeUserIds": ["99"]},
    ],
    "comments": [
        {"id": "c1", "text": "Nice one", "postId": "p1", "authorId": "1"},
        {"id": "c2", "text": "Agreed", "postId": "p1", "authorId": "3"},
        {"id": "c3", "text": "Thanks!", "postId": "p3", "authorId": "2"},
        {"id": "c4", "text": "Who am I?", "postId": "p1", "authorId": "99"},
    ],
}


@pytest.fixture
def store() -> DatasetStore:
    # fresh copy per test since likes mutate posts
    return DatasetStore.from_dataset(Dataset.model_validate(SEED))


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret=TEST_SECRET, cors_origins=["*"], log_level="DEBUG")


@pytest.fixture
def tokens(settings) -> TokenService:
    return TokenService(settings.jwt_secret, ttl_seconds=settings.token_ttl_seconds)


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_header(tokens):
    def make(user_id: str = "1", name: str = "Alice"):
        return {"Authorization": f"Bearer {tokens.issue(user_id, name)}"}
    return make
