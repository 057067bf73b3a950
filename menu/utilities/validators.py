"""
Request schemas for the menu HTTP adapter.
"""
from pydantic import BaseModel, Field


class SearchInput(BaseModel):
    """Search box content; matched as-is (no trimming) against item titles."""
    text: str = Field("", max_length=200)
