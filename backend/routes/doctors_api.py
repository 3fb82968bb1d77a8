# backend/routes/doctors_api.py
from fastapi import APIRouter, Query
from typing import List, Optional
from services.doctor_service import get_all_doctors, get_specialties
from services.filter_service import derive
from services.query_sync import decode, encode

router = APIRouter(prefix="/api")


def serialize_doctor(doctor) -> dict:
    return doctor.model_dump(mode="json", by_alias=True)


@router.get("/doctors")
def get_doctors(
    consultType: Optional[str] = Query(None, description="Video Consult | In Clinic"),
    specialty: List[str] = Query([], description="Repeatable specialty filter"),
    sortBy: Optional[str] = Query(None, description="fees | experience"),
):
    """
    Returns the doctors matching the filters in the query string, plus the
    canonical query for those filters. Unknown values are ignored.
    """
    criteria = decode({"consultType": consultType, "specialty": specialty, "sortBy": sortBy})
    docs = derive(get_all_doctors(), criteria)
    return {
        "ok": True,
        "criteria": criteria.as_dict(),
        "query": str(encode(criteria)),
        "doctors": [serialize_doctor(d) for d in docs],
    }


@router.get("/doctors/specialties")
def list_specialties():
    return {"ok": True, "specialties": get_specialties()}
