"""
Pydantic schemas for site search.
"""
from typing import List

from pydantic import BaseModel, ConfigDict


class SearchResult(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    section: str
    url: str


class SearchResponse(BaseModel):
    success: bool = True
    query: str
    results: List[SearchResult]
