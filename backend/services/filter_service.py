# backend/services/filter_service.py
from typing import Iterable, List

from services.models import ConsultMode, Criteria, Provider, SortKey


def derive(providers: Iterable[Provider], criteria: Criteria) -> List[Provider]:
    """
    Filtered and sorted view of `providers` for the given criteria.

    Filtering keeps the input order; both sorts are stable, so providers with
    equal fees/experience stay in their original relative order.
    """
    filtered = list(providers)

    if criteria.mode is not ConsultMode.NONE:
        wants_remote = criteria.mode is ConsultMode.REMOTE
        filtered = [p for p in filtered if p.supports_remote_consult == wants_remote]

    if criteria.specialties:
        # any selected specialty is enough (OR)
        filtered = [p for p in filtered if criteria.specialties.intersection(p.speciality or ())]

    if criteria.sort_key is SortKey.FEES:
        filtered.sort(key=lambda p: p.fees)
    elif criteria.sort_key is SortKey.EXPERIENCE:
        filtered.sort(key=lambda p: p.experience, reverse=True)

    return filtered


def available_specialties(providers: Iterable[Provider]) -> List[str]:
    """Every speciality found in the list, sorted, without duplicates."""
    return sorted({s for p in providers for s in (p.speciality or ()) if s})
