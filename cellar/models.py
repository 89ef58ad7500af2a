from __future__ import annotations

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


Category = Literal["all", "red", "white"]


class WineRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: str = ""
    varietal: str = ""
    sweetness: str = ""
    alcohol: str = ""
    region: str = ""
    style: str = ""
    pairings: str = ""
    description: str = ""


class FilterState(BaseModel):
    search_term: str = ""
    active_category: Category = "all"
    selected_pairing: str = ""


class FilterUpdate(BaseModel):
    search_term: Optional[str] = None
    active_category: Optional[Category] = None
    selected_pairing: Optional[str] = None


class CategoryBucket(BaseModel):
    groups: Dict[str, List[WineRecord]] = Field(default_factory=dict)
    varietals: List[str] = Field(default_factory=list)
    # varietal -> open, resolved from the expand state
    expanded: Dict[str, bool] = Field(default_factory=dict)


class GroupedViewModel(BaseModel):
    red: CategoryBucket = Field(default_factory=CategoryBucket)
    white: CategoryBucket = Field(default_factory=CategoryBucket)
    matched: int = 0
    dropped: int = Field(default=0, examples=[0])
    message: Optional[str] = Field(default=None, examples=[None])


class ViewResponse(BaseModel):
    filters: FilterState
    view: GroupedViewModel
    expanded: Dict[str, bool] = Field(default_factory=dict)


class PairingsResponse(BaseModel):
    pairings: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
