"""
Category API Routes.

CRUD endpoints for the category resource.

Key behaviors:
- Malformed bodies are rejected with 400
- Unknown IDs (including unparseable ones) are 404
- Update looks the ID up before decoding the body
- The ID is the last segment of whatever follows /categories/
"""

from __future__ import annotations

import json
import re
from typing import Any, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import ValidationError

from src.api.deps import get_category_store, read_raw_body
from src.api.schemas import CategoryResponse, CategoryWriteRequest
from src.components.categories import (
    CategoryError,
    CategoryStorePort,
    CreateCategoryInput,
    DeleteCategoryInput,
    GetCategoryInput,
    ListCategoriesInput,
    UpdateCategoryInput,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_update,
)

router = APIRouter()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_JSON_WHITESPACE = " \t\n\r"
_BODY_FIELDS = ("id", "name", "description")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


# --- Helper Functions ---


def parse_category_id(raw: str) -> int:
    """
    Parse an ID path segment.

    Anything that is not a signed 64-bit decimal integer parses to 0, which
    no category ever holds, so the lookup simply misses.
    """
    if not _ID_PATTERN.fullmatch(raw):
        return 0
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


def id_from_path(tail: str) -> int:
    """Parse the ID from the final segment of the path after /categories/."""
    return parse_category_id(tail.rsplit("/", 1)[-1])


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _fold_field_names(data: dict[str, Any]) -> dict[str, Any]:
    """
    Match body keys to fields regardless of case.

    A key spelled exactly like the field wins over a differently cased one.
    """
    folded: dict[str, Any] = {}
    for key, value in data.items():
        field = key.casefold()
        if field in _BODY_FIELDS and key != field:
            folded[field] = value
    for key, value in data.items():
        if key in _BODY_FIELDS:
            folded[key] = value
    return folded


def decode_category_body(raw: bytes) -> CategoryWriteRequest:
    """
    Decode a Category-shaped JSON body or raise a 400.

    Only the first JSON value is read; anything after it is ignored. Invalid
    UTF-8 inside strings becomes U+FFFD instead of failing.
    """
    text = raw.decode("utf-8", errors="replace").lstrip(_JSON_WHITESPACE)
    try:
        data, _ = _DECODER.raw_decode(text)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"invalid JSON body: {e}",
        ) from e

    # JSON null decodes to an empty category
    if data is None:
        data = {}
    if isinstance(data, dict):
        data = _fold_field_names(data)

    try:
        return CategoryWriteRequest.model_validate(data)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"invalid category: {_describe_validation_error(e)}",
        ) from e


def _raise_not_found(errors: list[CategoryError]) -> NoReturn:
    message = errors[0].message if errors else "category not found"
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message)


# --- Routes ---


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    store: CategoryStorePort = Depends(get_category_store),
) -> list[CategoryResponse]:
    """Get all categories."""
    result = run_list(ListCategoriesInput(), store=store)
    return [CategoryResponse.from_category(c) for c in result.categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Malformed body"}},
)
def create_category(
    body: bytes = Depends(read_raw_body),
    store: CategoryStorePort = Depends(get_category_store),
) -> CategoryResponse:
    """Create a category. Any id in the body is ignored."""
    req = decode_category_body(body)
    result = run_create(
        CreateCategoryInput(name=req.name, description=req.description),
        store=store,
    )

    assert result.category is not None
    return CategoryResponse.from_category(result.category)


@router.get(
    "/{category_id:path}",
    response_model=CategoryResponse,
    responses={404: {"description": "Category not found"}},
)
def get_category(
    category_id: str,
    store: CategoryStorePort = Depends(get_category_store),
) -> CategoryResponse:
    """Get category detail."""
    result = run_get(GetCategoryInput(category_id=id_from_path(category_id)), store=store)
    if not result.success or result.category is None:
        _raise_not_found(result.errors)

    return CategoryResponse.from_category(result.category)


@router.put(
    "/{category_id:path}",
    response_model=CategoryResponse,
    responses={
        400: {"description": "Malformed body"},
        404: {"description": "Category not found"},
    },
)
def update_category(
    category_id: str,
    body: bytes = Depends(read_raw_body),
    store: CategoryStorePort = Depends(get_category_store),
) -> CategoryResponse:
    """Overwrite name and description of a category."""
    cid = id_from_path(category_id)
    existing = run_get(GetCategoryInput(category_id=cid), store=store)
    if not existing.success:
        _raise_not_found(existing.errors)

    req = decode_category_body(body)
    result = run_update(
        UpdateCategoryInput(category_id=cid, name=req.name, description=req.description),
        store=store,
    )
    # Deleted by a concurrent request between lookup and update
    if not result.success or result.category is None:
        _raise_not_found(result.errors)

    return CategoryResponse.from_category(result.category)


@router.delete(
    "/{category_id:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Category not found"}},
)
def delete_category(
    category_id: str,
    store: CategoryStorePort = Depends(get_category_store),
) -> Response:
    """Delete a category."""
    inp = DeleteCategoryInput(category_id=id_from_path(category_id))
    result = run_delete(inp, store=store)
    if not result.success:
        _raise_not_found(result.errors)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
