# backend/services/listing_service.py
"""
A listing session ties the filter state, the doctor list shown to the user
and the page address together.

On creation the current address seeds the filters. After that every toggle
goes through the CriteriaStore; the session listens to it, recomputes the
shown list and rewrites the address in place (history is replaced, never
pushed, so filter changes add no back-button stops).
"""
import uuid
from typing import Dict, Iterable, List, Optional, Tuple

from services.criteria_store import CriteriaStore
from services.filter_service import available_specialties, derive
from services.models import ConsultMode, Criteria, Provider, SortKey
from services.navigation import NavigationHistory
from services.query_sync import decode, encode
from utils.logging import get_logger

logger = get_logger(__name__)

MODE_OPTIONS = [
    (ConsultMode.REMOTE, "Video Consult", "filter-video-consult"),
    (ConsultMode.IN_PERSON, "In Clinic", "filter-in-clinic"),
]

SORT_OPTIONS = [
    (SortKey.FEES, "Fees (Low to High)", "sort-fees"),
    (SortKey.EXPERIENCE, "Experience (High to Low)", "sort-experience"),
]


def specialty_control_id(name: str) -> str:
    # only the first slash is replaced
    return "filter-specialty-" + (name.replace("/", "-", 1) if name else "")


class ListingSession:
    def __init__(self, doctors: Iterable[Provider], history: Optional[NavigationHistory] = None):
        self._source: Tuple[Provider, ...] = tuple(doctors)
        self.history = history or NavigationHistory()
        # the address is read once, here; from now on it is only written
        self.store = CriteriaStore(decode(self.history.query))
        self._doctors: List[Provider] = derive(self._source, self.store.criteria)
        self.store.subscribe(self._on_criteria_changed)

    def _on_criteria_changed(self, criteria: Criteria) -> None:
        self._doctors = derive(self._source, criteria)
        location = self.history.replace(encode(criteria, self.history.query))
        logger.debug("Listing now %d doctors at %s", len(self._doctors), location.url)

    @property
    def criteria(self) -> Criteria:
        return self.store.criteria

    @property
    def doctors(self) -> List[Provider]:
        return list(self._doctors)

    @property
    def url(self) -> str:
        return self.history.url

    def toggle_mode(self, selected: ConsultMode) -> Criteria:
        return self.store.toggle_mode(selected)

    def toggle_specialty(self, name: str) -> Criteria:
        return self.store.toggle_specialty(name)

    def toggle_sort(self, key: SortKey) -> Criteria:
        return self.store.toggle_sort(key)

    def panel_state(self) -> dict:
        """Everything the filter panel needs to draw its controls."""
        criteria = self.criteria
        return {
            "consultation_mode": [
                {"value": mode.value, "label": label, "control_id": cid, "checked": criteria.mode is mode}
                for mode, label, cid in MODE_OPTIONS
            ],
            "speciality": [
                {
                    "value": name,
                    "label": name,
                    "control_id": specialty_control_id(name),
                    "checked": name in criteria.specialties,
                }
                for name in available_specialties(self._source)
            ],
            "sort_by": [
                {"value": key.value, "label": label, "control_id": cid, "checked": criteria.sort_key is key}
                for key, label, cid in SORT_OPTIONS
            ],
        }


# listing sessions in-memory, one per open page. Not persisted.
# Past MAX_LISTING_SESSIONS the oldest ones are dropped.
MAX_LISTING_SESSIONS = 1000
_sessions: Dict[str, ListingSession] = {}


def create_listing_session(doctors: Iterable[Provider], url: str = "/") -> Tuple[str, ListingSession]:
    sid = str(uuid.uuid4())
    while _sessions and len(_sessions) >= MAX_LISTING_SESSIONS:
        oldest = next(iter(_sessions))
        del _sessions[oldest]
        logger.info("Evicted listing session %s", oldest)
    _sessions[sid] = ListingSession(doctors, NavigationHistory(url))
    logger.info("Created listing session %s at %s", sid, url)
    return sid, _sessions[sid]


def get_listing_session(session_id: str) -> Optional[ListingSession]:
    return _sessions.get(session_id)


def close_listing_session(session_id: str) -> bool:
    return _sessions.pop(session_id, None) is not None
