# backend/services/criteria_store.py
from typing import Callable, List, Optional, Set

from services.models import ConsultMode, Criteria, SortKey
from utils.logging import get_logger

logger = get_logger(__name__)

Listener = Callable[[Criteria], None]


class CriteriaStore:
    """
    Live filter state. The only way to change it is one of the three toggles;
    after a change every subscriber is called, in subscription order, before
    the toggle returns.
    """

    def __init__(self, initial: Optional[Criteria] = None):
        initial = initial or Criteria()
        self._mode: ConsultMode = initial.mode
        self._specialties: Set[str] = set(initial.specialties)
        self._sort_key: SortKey = initial.sort_key
        self._listeners: List[Listener] = []

    @property
    def criteria(self) -> Criteria:
        return Criteria(
            mode=self._mode,
            specialties=frozenset(self._specialties),
            sort_key=self._sort_key,
        )

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def toggle_mode(self, selected: ConsultMode) -> Criteria:
        selected = ConsultMode(selected)
        before = self.criteria
        self._mode = ConsultMode.NONE if self._mode == selected else selected
        return self._changed(before)

    def toggle_specialty(self, name: str) -> Criteria:
        before = self.criteria
        if name in self._specialties:
            self._specialties.discard(name)
        else:
            self._specialties.add(name)
        return self._changed(before)

    def toggle_sort(self, key: SortKey) -> Criteria:
        key = SortKey(key)
        before = self.criteria
        self._sort_key = SortKey.NONE if self._sort_key == key else key
        return self._changed(before)

    def _changed(self, before: Criteria) -> Criteria:
        after = self.criteria
        if after == before:
            return after
        logger.debug("Criteria changed: %s", after.as_dict())
        for listener in list(self._listeners):
            listener(after)
        return after
