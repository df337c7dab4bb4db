"""
Categories component - CRUD over the category store.

Invariants:
- I1: IDs are assigned by the store, unique and strictly increasing
- I2: IDs are never reused after deletion
- I3: Update only touches name and description
- I4: Failed update or delete leaves the store unchanged
"""

from __future__ import annotations

from .models import (
    NOT_FOUND,
    CategoryError,
    CategoryListOutput,
    CategoryOutput,
    CreateCategoryInput,
    DeleteCategoryInput,
    GetCategoryInput,
    ListCategoriesInput,
    UpdateCategoryInput,
)
from .ports import CategoryStorePort


def _not_found() -> CategoryOutput:
    return CategoryOutput(
        category=None,
        errors=[CategoryError(code=NOT_FOUND, message="category not found")],
        success=False,
    )


# --- Component Entry Points ---


def run_list(
    inp: ListCategoriesInput,
    *,
    store: CategoryStorePort,
) -> CategoryListOutput:
    """List all categories."""
    return CategoryListOutput(categories=tuple(store.list()))


def run_create(
    inp: CreateCategoryInput,
    *,
    store: CategoryStorePort,
) -> CategoryOutput:
    """
    Create a category (I1).

    Args:
        inp: Input containing name and description.
        store: Category store port.

    Returns:
        CategoryOutput with the created category. Creation never fails.
    """
    category = store.create(inp.name, inp.description)
    return CategoryOutput(category=category)


def run_get(
    inp: GetCategoryInput,
    *,
    store: CategoryStorePort,
) -> CategoryOutput:
    """Get a category by ID."""
    category = store.get(inp.category_id)
    if category is None:
        return _not_found()
    return CategoryOutput(category=category)


def run_update(
    inp: UpdateCategoryInput,
    *,
    store: CategoryStorePort,
) -> CategoryOutput:
    """
    Overwrite name and description of an existing category (I3, I4).

    Args:
        inp: Input containing category_id and the new field values.
        store: Category store port.

    Returns:
        CategoryOutput with the updated category, or a not_found error.
    """
    category = store.update(inp.category_id, inp.name, inp.description)
    if category is None:
        return _not_found()
    return CategoryOutput(category=category)


def run_delete(
    inp: DeleteCategoryInput,
    *,
    store: CategoryStorePort,
) -> CategoryOutput:
    """Delete a category (I2, I4)."""
    if not store.delete(inp.category_id):
        return _not_found()
    return CategoryOutput(category=None)


def run(
    inp: (
        ListCategoriesInput
        | CreateCategoryInput
        | GetCategoryInput
        | UpdateCategoryInput
        | DeleteCategoryInput
    ),
    *,
    store: CategoryStorePort,
) -> CategoryOutput | CategoryListOutput:
    """
    Main entry point for the categories component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ListCategoriesInput):
        return run_list(inp, store=store)
    elif isinstance(inp, CreateCategoryInput):
        return run_create(inp, store=store)
    elif isinstance(inp, GetCategoryInput):
        return run_get(inp, store=store)
    elif isinstance(inp, UpdateCategoryInput):
        return run_update(inp, store=store)
    elif isinstance(inp, DeleteCategoryInput):
        return run_delete(inp, store=store)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
