"""Conference schedule data: load once, link speakers and sessions, filter the timeline."""

from conference_data.errors import ConferenceDataError, ScheduleLoadError
from conference_data.models import Day, Group, MapLocation, ScheduleDocument, Session, Speaker
from conference_data.overview import timeline_overview
from conference_data.provider import ConferenceData

__all__ = [
    "ConferenceData",
    "ConferenceDataError",
    "ScheduleLoadError",
    "ScheduleDocument",
    "Day",
    "Group",
    "Session",
    "Speaker",
    "MapLocation",
    "timeline_overview",
]
