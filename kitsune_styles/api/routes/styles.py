"""Style processing endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from kitsune_styles.api.deps import get_processor_cache, get_theme_store
from kitsune_styles.components.mapping import ProcessorCache
from kitsune_styles.components.theme_store import ThemeStore
from kitsune_styles.domain.errors import ResolutionError, SchemaError, format_path
from kitsune_styles.domain.mapping import THEME_ID_KEY

router = APIRouter()


class ThemeResponse(BaseModel):
    theme_id: str
    entries: int
    styles: dict[str, dict[str, Any]]


class CacheStatsResponse(BaseModel):
    variants: int
    states: int
    components: int


def _theme_response(store: ThemeStore) -> ThemeResponse:
    snapshot = dict(store.get_snapshot())
    snapshot.pop(THEME_ID_KEY, None)
    return ThemeResponse(theme_id=store.get_theme_id(), entries=len(snapshot), styles=snapshot)


@router.post("/process", response_model=ThemeResponse)
def process_mapping(
    document: dict[str, Any] = Body(...),
    store: ThemeStore = Depends(get_theme_store),
) -> ThemeResponse:
    """
    Process a mapping document and make it the current theme.

    Schema and token errors are reported as 422 with the offending path.
    """
    try:
        store.set_mapping(document)
    except SchemaError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "schema", "message": e.message, "path": format_path(e.path)},
        ) from e
    except ResolutionError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "resolution",
                "message": str(e),
                "token": e.token,
                "path": format_path(e.path),
            },
        ) from e

    return _theme_response(store)


@router.get("/theme", response_model=ThemeResponse)
def get_theme(store: ThemeStore = Depends(get_theme_store)) -> ThemeResponse:
    """Current theme; empty with id 'default' until a mapping is processed."""
    return _theme_response(store)


@router.get("/cache", response_model=CacheStatsResponse)
def get_cache_stats(cache: ProcessorCache = Depends(get_processor_cache)) -> CacheStatsResponse:
    stats = cache.stats()
    return CacheStatsResponse(**stats.to_dict())


@router.delete("/cache", response_model=CacheStatsResponse)
def clear_cache(cache: ProcessorCache = Depends(get_processor_cache)) -> CacheStatsResponse:
    cache.clear()
    return CacheStatsResponse(**cache.stats().to_dict())
