import pytest
from fastapi.testclient import TestClient

import main
from fixtures import PRODUCTS, seed_reviews
from reviews import ReviewBook
from store import StateStore, StoreRegistry


class MemorySnapshots:
    """Persistence backend that keeps the last saved snapshot in memory."""

    def __init__(self, state=None):
        self.state = state
        self.saves = 0

    def load(self):
        return self.state

    def save(self, state):
        self.state = state
        self.saves += 1


class BrokenSnapshots:
    def load(self):
        raise RuntimeError("storage unavailable")

    def save(self, state):
        raise RuntimeError("storage unavailable")


@pytest.fixture
def products():
    return PRODUCTS


@pytest.fixture
def store():
    return StateStore()


@pytest.fixture
def review_book():
    return ReviewBook(seed_reviews(), PRODUCTS)


@pytest.fixture
def sessions():
    return StoreRegistry()


@pytest.fixture
def client(review_book, sessions):
    main.app.dependency_overrides[main.get_review_book] = lambda: review_book
    main.app.dependency_overrides[main.get_registry] = lambda: sessions
    with TestClient(main.app) as c:
        yield c
    main.app.dependency_overrides.clear()
