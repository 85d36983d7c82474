"""Configuration: .env loading, thresholds, defaults."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of trip_reconstruction/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Segmentation ---
SPLIT_GAP_DAYS = int(os.getenv("TRIP_SPLIT_GAP_DAYS", "21"))  # never merge across a longer gap
LOOSE_GAP_DAYS = int(os.getenv("TRIP_LOOSE_GAP_DAYS", "4"))  # unconnected legs closer than this still merge
MULTI_CITY_LAYOVER_HOURS = 24  # a longer stop makes the trip multi-city

# --- Normalization ---
DEFAULT_DEPARTURE_TIME = "12:00"
DEFAULT_ARRIVAL_TIME = "14:00"
CSV_DELIMITER = os.getenv("TRIP_CSV_DELIMITER", ",")
CSV_DEFAULT_PROVIDER = "Unknown"
JSON_DEFAULT_PROVIDER = "Unknown Airline"

# --- Synthesis ---
DEFAULT_TRIP_ICON = "✈️"
DEFAULT_DURATION_MODE = "all_full"
DEFAULT_PORTION = "full"

# --- Export ---
EXPORT_MODES = frozenset({"Flight"})  # only these transport modes leave the app

# --- Import ranking ---
AUTO_SELECT_RELEVANCE = 80  # top candidate is pre-selected above this score
