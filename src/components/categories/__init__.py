"""
Categories component - CRUD for the category resource.
"""

from .component import (
    run,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)
from .models import (
    NOT_FOUND,
    Category,
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

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_delete",
    "run_get",
    "run_list",
    "run_update",
    # Input models
    "CreateCategoryInput",
    "DeleteCategoryInput",
    "GetCategoryInput",
    "ListCategoriesInput",
    "UpdateCategoryInput",
    # Output models
    "Category",
    "CategoryError",
    "CategoryListOutput",
    "CategoryOutput",
    "NOT_FOUND",
    # Ports
    "CategoryStorePort",
]
