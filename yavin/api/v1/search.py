"""
Site search endpoint.
"""
from typing import Any

from fastapi import APIRouter, Query

from yavin.schemas.search import SearchResponse, SearchResult
from yavin.services.search import search

router = APIRouter()


@router.get("", response_model=SearchResponse)
def search_lessons(q: str = Query(default="")) -> Any:
    results = [SearchResult.model_validate(entry) for entry in search(q)]
    return SearchResponse(query=q, results=results)
