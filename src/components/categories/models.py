"""
Categories component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Error ---


@dataclass(frozen=True)
class CategoryError:
    """Category operation error."""

    code: str
    message: str


NOT_FOUND = "not_found"


# --- Category Model ---


@dataclass(frozen=True)
class Category:
    """A named, described category identified by a store-assigned integer."""

    id: int
    name: str
    description: str


# --- Input Models ---


@dataclass(frozen=True)
class CreateCategoryInput:
    """Input for creating a category. Any client-supplied id is dropped before this."""

    name: str = ""
    description: str = ""


@dataclass(frozen=True)
class UpdateCategoryInput:
    """Input for overwriting the mutable fields of a category."""

    category_id: int
    name: str = ""
    description: str = ""


@dataclass(frozen=True)
class GetCategoryInput:
    """Input for fetching one category."""

    category_id: int


@dataclass(frozen=True)
class DeleteCategoryInput:
    """Input for deleting a category."""

    category_id: int


@dataclass(frozen=True)
class ListCategoriesInput:
    """Input for listing all categories."""

    pass


# --- Output Models ---


@dataclass(frozen=True)
class CategoryOutput:
    """Output for single-category operations (create, get, update, delete)."""

    category: Category | None = None
    errors: list[CategoryError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class CategoryListOutput:
    """Output containing a list of categories."""

    categories: tuple[Category, ...]
    errors: list[CategoryError] = field(default_factory=list)
    success: bool = True
