# backend/services/navigation.py
from dataclasses import dataclass
from typing import Any, List, Optional
from urllib.parse import urlsplit

from starlette.datastructures import QueryParams

from services.query_sync import as_query_params


@dataclass(frozen=True)
class Location:
    path: str
    query: QueryParams

    @property
    def url(self) -> str:
        qs = str(self.query)
        return f"{self.path}?{qs}" if qs else self.path


class NavigationHistory:
    """
    In-memory stand-in for the browser history of one listing page.

    push() adds a back-button stop; replace() rewrites the current one.
    """

    def __init__(self, url: str = "/"):
        parts = urlsplit(url)
        self._entries: List[Location] = [Location(parts.path or "/", as_query_params(parts.query))]
        self._index = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def location(self) -> Location:
        return self._entries[self._index]

    @property
    def query(self) -> QueryParams:
        return self.location.query

    @property
    def url(self) -> str:
        return self.location.url

    def push(self, query: Any, path: Optional[str] = None) -> Location:
        entry = Location(path or self.location.path, as_query_params(query))
        # anything ahead of the current entry is dropped, as in a browser
        del self._entries[self._index + 1:]
        self._entries.append(entry)
        self._index += 1
        return entry

    def replace(self, query: Any, path: Optional[str] = None) -> Location:
        entry = Location(path or self.location.path, as_query_params(query))
        self._entries[self._index] = entry
        return entry

    def back(self) -> bool:
        if self._index == 0:
            return False
        self._index -= 1
        return True
