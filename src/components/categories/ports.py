"""
Categories component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import Category


class CategoryStorePort(Protocol):
    """Storage interface for categories."""

    def list(self) -> list[Category]:
        """List all categories."""
        ...

    def create(self, name: str, description: str) -> Category:
        """Store a new category under the next free ID."""
        ...

    def get(self, category_id: int) -> Category | None:
        """Get category by ID."""
        ...

    def update(self, category_id: int, name: str, description: str) -> Category | None:
        """Overwrite name and description. Returns None if the ID is unknown."""
        ...

    def delete(self, category_id: int) -> bool:
        """Delete category. Returns False if the ID is unknown."""
        ...
