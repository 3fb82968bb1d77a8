# backend/services/settings.py
import os
from pathlib import Path

from utils.storage import read_json_file

DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"

DEFAULTS = {
    "allowed_origins": ["http://localhost:3000"],
    "log_level": "INFO",
    "listing_path": "/",
}


def get_data_dir() -> Path:
    # LISTING_DATA_DIR lets tests and deployments point at another data folder
    override = os.getenv("LISTING_DATA_DIR")
    return Path(override) if override else DEFAULT_DATA_DIR


def load_settings() -> dict:
    """
    Read data/listing.json on top of the defaults. Unknown keys are kept,
    missing keys fall back to DEFAULTS.
    """
    data = read_json_file(get_data_dir() / "listing.json", default={})
    settings = dict(DEFAULTS)
    if isinstance(data, dict):
        settings.update(data)
    return settings
