from __future__ import annotations

from typing import Dict, List, Optional

from .loader import CatalogError, Source, load_rows
from .logger import logger
from .models import FilterState, FilterUpdate, ViewResponse, WineRecord
from .normalize import normalize_rows
from .rules import CATEGORIES
from .view import build_view_model, expand_key


class CatalogSession:
    """
    UI state for one viewer: the loaded records, the current filters and
    which varietal groups are open.

    The dataset is loaded once. After a failed load the session holds no
    records and every view request raises the load error again.
    """

    def __init__(self, shared_expand_keys: bool = False):
        self.shared_expand_keys = shared_expand_keys
        self.records: List[WineRecord] = []
        self.error: Optional[CatalogError] = None
        self.filters = FilterState()
        self.expanded: Dict[str, bool] = {}
        self.loaded = False

    def load(self, source: Source, timeout: float = 10.0) -> None:
        if self.loaded:
            raise RuntimeError("Wine list is already loaded")
        self.loaded = True

        try:
            self.records = normalize_rows(load_rows(source, timeout=timeout))
        except CatalogError as e:
            logger.error(f"Wine list failed to load: {e.message}")
            self.records = []
            self.error = e
            return

        unknown = sum(1 for r in self.records if r.type not in CATEGORIES)
        if unknown:
            logger.warning(f"{unknown} wines have a color other than red/white and will not be shown")
        logger.info(f"Loaded {len(self.records)} wines")

    def _check(self) -> None:
        if self.error is not None:
            raise self.error

    def view(self) -> ViewResponse:
        self._check()
        view, _ = build_view_model(
            self.records,
            self.filters,
            self.expanded,
            previous=self.filters,
            shared=self.shared_expand_keys,
        )
        return ViewResponse(filters=self.filters, view=view, expanded=self.expanded)

    def update_filters(self, update: FilterUpdate) -> ViewResponse:
        self._check()
        previous = self.filters
        self.filters = previous.model_copy(update=update.model_dump(exclude_none=True))
        logger.debug(f"Filters changed: {self.filters.model_dump()}")

        view, self.expanded = build_view_model(
            self.records,
            self.filters,
            self.expanded,
            previous=previous,
            shared=self.shared_expand_keys,
        )
        return ViewResponse(filters=self.filters, view=view, expanded=self.expanded)

    def toggle(self, category: str, varietal: str) -> ViewResponse:
        self._check()
        if category not in CATEGORIES:
            raise ValueError(f"Unknown wine color: {category}")
        key = expand_key(category, varietal, self.shared_expand_keys)
        self.expanded = {**self.expanded, key: not self.expanded.get(key, False)}
        return self.view()
