"""
Pytest configuration and shared fixtures for the listing backend tests.
"""
import json
import sys
from pathlib import Path

import pytest

# the backend modules import each other as top-level packages
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from services.models import Provider  # noqa: E402

SAMPLE_DOCTORS = [
    {"id": 1, "name": "Dr. Asha", "speciality": ["Dentist"], "experience": 5, "fees": 500, "videoConsult": True},
    {"id": 2, "name": "Dr. Bala", "speciality": ["Cardiologist", "General Physician"], "experience": 20, "fees": 300, "videoConsult": False},
    {"id": 3, "name": "Dr. Chen", "speciality": ["Dentist"], "experience": 12, "fees": 300, "videoConsult": True},
    {"id": 4, "name": "Dr. Dev", "speciality": ["Dietitian/Nutritionist"], "experience": 12, "fees": 800, "videoConsult": True},
]


@pytest.fixture
def sample_doctors():
    """The sample directory as Provider records."""
    return [Provider.model_validate(d) for d in SAMPLE_DOCTORS]


@pytest.fixture
def data_dir(tmp_path, monkeypatch) -> Path:
    """Temporary data folder holding the sample doctors.json."""
    (tmp_path / "doctors.json").write_text(json.dumps({"doctors": SAMPLE_DOCTORS}), encoding="utf-8")
    monkeypatch.setenv("LISTING_DATA_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def client(data_dir):
    """TestClient bound to the app, reading doctors from data_dir."""
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as c:
        yield c
