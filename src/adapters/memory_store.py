"""In-memory category store adapter.

This adapter implements CategoryStorePort for the categories component.
Nothing is persisted; records live as long as the store object.
"""

import logging
from dataclasses import replace
from threading import Lock

from src.components.categories import Category

logger = logging.getLogger(__name__)


class InMemoryCategoryStore:
    """Dict-backed category storage, safe to share between request threads."""

    def __init__(self) -> None:
        self._categories: dict[int, Category] = {}
        self._next_id = 1
        self._lock = Lock()

    def list(self) -> list[Category]:
        """List all categories in insertion order."""
        with self._lock:
            return list(self._categories.values())

    def create(self, name: str, description: str) -> Category:
        """Store a new category under the next ID. IDs are never reused."""
        with self._lock:
            category = Category(id=self._next_id, name=name, description=description)
            self._categories[category.id] = category
            self._next_id += 1
        logger.debug(f"Created category {category.id}")
        return category

    def get(self, category_id: int) -> Category | None:
        """Get category by ID."""
        with self._lock:
            return self._categories.get(category_id)

    def update(self, category_id: int, name: str, description: str) -> Category | None:
        """Overwrite name and description. Returns None if the ID is unknown."""
        with self._lock:
            current = self._categories.get(category_id)
            if current is None:
                return None
            updated = replace(current, name=name, description=description)
            self._categories[category_id] = updated
        logger.debug(f"Updated category {category_id}")
        return updated

    def delete(self, category_id: int) -> bool:
        """Delete category. Returns False if the ID is unknown."""
        with self._lock:
            removed = self._categories.pop(category_id, None)
        if removed is None:
            return False
        logger.debug(f"Deleted category {category_id}")
        return True

    def clear(self) -> None:
        """Clear all categories - useful for testing. The ID counter keeps running."""
        with self._lock:
            self._categories.clear()
