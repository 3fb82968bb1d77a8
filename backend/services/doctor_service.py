from pathlib import Path
from typing import List

from pydantic import ValidationError

from services.filter_service import available_specialties
from services.models import Provider
from services.settings import get_data_dir
from utils.logging import get_logger
from utils.storage import read_json_file, write_json_file

logger = get_logger(__name__)

DEFAULT_DOCTORS = {
    "doctors": [
        {"id": 1, "name": "Dr. R.K. Gupta", "speciality": ["Dermatologist"], "experience": 14, "fees": 600, "videoConsult": True, "image": None},
        {"id": 2, "name": "Dr. Aditi Mehra", "speciality": ["Physiotherapist"], "experience": 8, "fees": 450, "videoConsult": False, "image": None},
        {"id": 3, "name": "Dr. Rohan Kapoor", "speciality": ["Psychiatrist", "General Physician"], "experience": 11, "fees": 800, "videoConsult": True, "image": None},
        {"id": 4, "name": "Dr. Nisha Bansal", "speciality": ["Dietitian/Nutritionist"], "experience": 6, "fees": 450, "videoConsult": True, "image": None},
        {"id": 5, "name": "Dr. Meena Sharma", "speciality": ["Cardiologist"], "experience": 22, "fees": 1200, "videoConsult": False, "image": None},
    ]
}


def _doctors_file() -> Path:
    return get_data_dir() / "doctors.json"


def _ensure_doctors_file():
    path = _doctors_file()
    if not path.exists():
        # seed a small default directory (editable later)
        write_json_file(path, DEFAULT_DOCTORS)


def get_all_doctors() -> List[Provider]:
    """
    Load the doctor directory. Entries that cannot be read as a Provider are
    skipped; an unreadable file gives an empty directory.
    """
    _ensure_doctors_file()
    data = read_json_file(_doctors_file(), default={})
    raw = data.get("doctors", []) if isinstance(data, dict) else data
    if not isinstance(raw, list):
        logger.warning("Unexpected doctors payload in %s", _doctors_file())
        return []

    doctors = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict):
            logger.warning("Skipping doctor entry %d: not an object", i)
            continue
        try:
            doctors.append(Provider.model_validate(entry))
        except ValidationError as e:
            logger.warning("Skipping doctor entry %d: %s", i, e)
    return doctors


def get_specialties() -> List[str]:
    return available_specialties(get_all_doctors())
