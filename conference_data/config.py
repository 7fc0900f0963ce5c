import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=True)

SCHEDULE_URL = os.environ.get("SCHEDULE_URL", "http://ar.pycon.org/schedule.json")
SCHEDULE_TIMEOUT = float(os.environ.get("SCHEDULE_TIMEOUT", "15"))
DEFAULT_TRACK = os.environ.get("DEFAULT_TRACK", "Python")
FAVORITES_DIR = os.environ.get("FAVORITES_DIR", "db")

LOGGER_NAME = "ConferenceData"

SEGMENT_ALL = "all"
SEGMENT_FAVORITES = "favorites"
SEGMENTS = (SEGMENT_ALL, SEGMENT_FAVORITES)

PLENARY_KIND = "plenaria"
SLOT_NAME = "slot"
FREE_SLOT_KIND = "libre"
