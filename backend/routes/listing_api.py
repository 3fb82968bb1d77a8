# backend/routes/listing_api.py
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
from routes.doctors_api import serialize_doctor
from services.doctor_service import get_all_doctors
from services.listing_service import (
    ListingSession,
    close_listing_session,
    create_listing_session,
    get_listing_session,
)
from services.models import ConsultMode, SortKey
from services.settings import load_settings

router = APIRouter(prefix="/api/listing")


class ModeToggle(BaseModel):
    value: ConsultMode


class SpecialtyToggle(BaseModel):
    value: str


class SortToggle(BaseModel):
    value: SortKey


def _session_payload(session_id: str, listing: ListingSession) -> dict:
    return {
        "ok": True,
        "session_id": session_id,
        "url": listing.url,
        "criteria": listing.criteria.as_dict(),
        "panel": listing.panel_state(),
        "doctors": [serialize_doctor(d) for d in listing.doctors],
    }


def _get_or_404(session_id: str) -> ListingSession:
    listing = get_listing_session(session_id)
    if not listing:
        raise HTTPException(status_code=404, detail="Listing session not found")
    return listing


@router.post("/session/new")
def new_listing_session(request: Request):
    """
    Open a listing page. The request's own query string is the address the
    page was opened with, so shared links restore their filters.
    """
    path = load_settings()["listing_path"]
    qs = request.url.query
    url = f"{path}?{qs}" if qs else path
    sid, listing = create_listing_session(get_all_doctors(), url)
    return _session_payload(sid, listing)


@router.get("/{session_id}")
def get_listing(session_id: str):
    return _session_payload(session_id, _get_or_404(session_id))


@router.delete("/{session_id}")
def close_listing(session_id: str):
    if not close_listing_session(session_id):
        raise HTTPException(status_code=404, detail="Listing session not found")
    return {"ok": True}


@router.post("/{session_id}/toggle/mode")
def toggle_mode(session_id: str, payload: ModeToggle):
    listing = _get_or_404(session_id)
    listing.toggle_mode(payload.value)
    return _session_payload(session_id, listing)


@router.post("/{session_id}/toggle/specialty")
def toggle_specialty(session_id: str, payload: SpecialtyToggle):
    listing = _get_or_404(session_id)
    listing.toggle_specialty(payload.value)
    return _session_payload(session_id, listing)


@router.post("/{session_id}/toggle/sort")
def toggle_sort(session_id: str, payload: SortToggle):
    listing = _get_or_404(session_id)
    listing.toggle_sort(payload.value)
    return _session_payload(session_id, listing)
