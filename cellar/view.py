"""
Filtering, grouping and group expansion for the wine list.

Everything here is a pure function of its arguments. The grouped view is
rebuilt from the full record list on every filter change.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .models import CategoryBucket, FilterState, GroupedViewModel, WineRecord
from .rules import ALL, CATEGORIES, COMMON_PAIRINGS, EMPTY_MESSAGE, OTHER_VARIETAL

ExpandState = Dict[str, bool]

SEARCH_FIELDS = ("name", "description", "region", "varietal")


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def matches_search(record: WineRecord, term: str) -> bool:
    if not term:
        return True
    return any(_contains(getattr(record, f), term) for f in SEARCH_FIELDS)


def matches_pairing(record: WineRecord, pairing: str) -> bool:
    return not pairing or _contains(record.pairings, pairing)


def matches_category(record: WineRecord, category: str) -> bool:
    return category == ALL or record.type == category


def matches_filters(record: WineRecord, filters: FilterState) -> bool:
    return (
        matches_search(record, filters.search_term)
        and matches_pairing(record, filters.selected_pairing)
        and matches_category(record, filters.active_category)
    )


def varietal_key(record: WineRecord) -> str:
    return record.varietal or OTHER_VARIETAL


def expand_key(category: str, varietal: str, shared: bool = False) -> str:
    """Key of a varietal group in the expand state.

    Keys are namespaced by category so that a red and a white group with
    the same varietal name open and close independently. ``shared`` gives
    the legacy behaviour where both use the bare varietal name.
    """
    return varietal if shared else f"{category}:{varietal}"


def group_records(records: Iterable[WineRecord]) -> CategoryBucket:
    """Group by varietal, keeping record order inside each group."""
    groups: Dict[str, List[WineRecord]] = {}
    for record in records:
        groups.setdefault(varietal_key(record), []).append(record)
    return CategoryBucket(groups=groups, varietals=sorted(groups))


def filters_changed(previous: FilterState, current: FilterState) -> bool:
    return (
        previous.search_term != current.search_term
        or previous.selected_pairing != current.selected_pairing
    )


def expand_matching(
    records: Sequence[WineRecord],
    filters: FilterState,
    expanded: ExpandState,
    shared: bool = False,
) -> ExpandState:
    """
    Open every varietal group holding a record that matches the search
    term and pairing, whatever the active category.

    Only ever sets keys to True on a copy of ``expanded``; groups that do
    not match keep their previous state.
    """
    result = dict(expanded)
    if not filters.search_term and not filters.selected_pairing:
        return result

    for record in records:
        if record.type not in CATEGORIES:
            continue
        if matches_search(record, filters.search_term) and matches_pairing(
            record, filters.selected_pairing
        ):
            result[expand_key(record.type, varietal_key(record), shared)] = True
    return result


def build_view_model(
    records: Sequence[WineRecord],
    filters: FilterState,
    expanded: ExpandState,
    previous: Optional[FilterState] = None,
    shared: bool = False,
) -> Tuple[GroupedViewModel, ExpandState]:
    """
    Build the grouped view for ``filters`` and the expand state to go
    with it.

    Expansion runs only when the search term or pairing differ from
    ``previous`` (or there is no previous state). Records whose type is
    neither red nor white match nothing on screen; they are counted in
    ``dropped``.
    """
    if previous is None or filters_changed(previous, filters):
        expanded = expand_matching(records, filters, expanded, shared)
    else:
        expanded = dict(expanded)

    matching = [r for r in records if matches_filters(r, filters)]
    buckets = {}
    for c in CATEGORIES:
        bucket = group_records(r for r in matching if r.type == c)
        bucket.expanded = {
            v: expanded.get(expand_key(c, v, shared), False) for v in bucket.varietals
        }
        buckets[c] = bucket
    dropped = sum(1 for r in matching if r.type not in CATEGORIES)
    shown = len(matching) - dropped

    view = GroupedViewModel(
        red=buckets["red"],
        white=buckets["white"],
        matched=shown,
        dropped=dropped,
        message=None if shown else EMPTY_MESSAGE,
    )
    return view, expanded


def filter_pairings(query: str = "") -> List[str]:
    query = (query or "").strip()
    return [p for p in COMMON_PAIRINGS if _contains(p, query)]
