# backend/services/query_sync.py
"""
Mapping between filter Criteria and the query parameters of the page address.

    consultType  single value, "Video Consult" | "In Clinic"
    specialty    repeated, one entry per selected specialty
    sortBy       single value, "fees" | "experience"

Both directions are total: anything unrecognised decodes as "not set".
"""
from typing import Any, Optional

from starlette.datastructures import ImmutableMultiDict, MultiDict, QueryParams

from services.models import ConsultMode, Criteria, SortKey
from utils.logging import get_logger

logger = get_logger(__name__)

CONSULT_TYPE_PARAM = "consultType"
SPECIALTY_PARAM = "specialty"
SORT_BY_PARAM = "sortBy"


def as_query_params(query: Any = None) -> QueryParams:
    """
    Accepts a raw query string (with or without the leading '?'), a multi-map,
    or a plain mapping whose values may be lists for repeated keys.
    """
    if query is None:
        return QueryParams()
    if isinstance(query, ImmutableMultiDict):
        return QueryParams(query.multi_items())
    if isinstance(query, bytes):
        query = query.decode("latin-1")
    if isinstance(query, str):
        return QueryParams(query.lstrip("?"))
    items = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            items.extend((key, v) for v in value if v is not None)
        else:
            items.append((key, value))
    return QueryParams(items)


def _first(params: QueryParams, key: str) -> Optional[str]:
    values = params.getlist(key)
    return values[0] if values else None


def decode(query: Any) -> Criteria:
    params = as_query_params(query)

    raw_mode = _first(params, CONSULT_TYPE_PARAM)
    try:
        mode = ConsultMode(raw_mode) if raw_mode is not None else ConsultMode.NONE
    except ValueError:
        logger.debug("Ignoring unknown %s=%r", CONSULT_TYPE_PARAM, raw_mode)
        mode = ConsultMode.NONE

    # specialty values are opaque: stale or unknown names simply match nobody
    specialties = frozenset(params.getlist(SPECIALTY_PARAM))

    raw_sort = _first(params, SORT_BY_PARAM)
    try:
        sort_key = SortKey(raw_sort) if raw_sort is not None else SortKey.NONE
    except ValueError:
        logger.debug("Ignoring unknown %s=%r", SORT_BY_PARAM, raw_sort)
        sort_key = SortKey.NONE

    return Criteria(mode=mode, specialties=specialties, sort_key=sort_key)


def encode(criteria: Criteria, query: Any = None) -> QueryParams:
    """
    Rewrite the filter parameters of `query` for `criteria`. Other parameters
    are kept as they are; the input itself is left untouched.
    """
    params = MultiDict(as_query_params(query).multi_items())

    if criteria.mode is not ConsultMode.NONE:
        params[CONSULT_TYPE_PARAM] = criteria.mode.value
    else:
        params.pop(CONSULT_TYPE_PARAM, None)

    # always cleared and rewritten so repeated encodes never accumulate entries
    params.pop(SPECIALTY_PARAM, None)
    for specialty in sorted(criteria.specialties):
        params.append(SPECIALTY_PARAM, specialty)

    if criteria.sort_key is not SortKey.NONE:
        params[SORT_BY_PARAM] = criteria.sort_key.value
    else:
        params.pop(SORT_BY_PARAM, None)

    return QueryParams(params.multi_items())
