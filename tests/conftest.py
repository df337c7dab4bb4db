import pytest

from src.adapters.memory_store import InMemoryCategoryStore


@pytest.fixture
def store() -> InMemoryCategoryStore:
    """
    Fresh in-memory category store.

    Every test gets its own instance, so IDs always start at 1.
    """
    return InMemoryCategoryStore()
