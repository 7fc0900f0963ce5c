import logging
import threading
from pathlib import Path
from typing import Iterable

import requests

from conference_data.config import DEFAULT_TRACK, LOGGER_NAME, SCHEDULE_TIMEOUT, SCHEDULE_URL
from conference_data.filtering import Favorites, check_segment, filter_day, query_words
from conference_data.loader import fetch_raw, parse_document
from conference_data.logger import init_logging
from conference_data.models import Day, MapLocation, ScheduleDocument, Speaker
from conference_data.processing import process_data


init_logging(name=LOGGER_NAME)


class ConferenceData:
    """
    Load-once view builder over the conference schedule.
    The document is fetched on first use and kept for the lifetime of the instance;
    every query re-derives the visibility flags on the shared graph under the instance lock,
    so the returned days reflect the most recent timeline call.
    """
    def __init__(
            self,
            source: str | Path = SCHEDULE_URL,
            favorites: Favorites | None = None,
            http: requests.Session | None = None,
            timeout: float = SCHEDULE_TIMEOUT,
            default_track: str = DEFAULT_TRACK,
        ):
        self.source = str(source)
        self.favorites = favorites
        self.http = http
        self.timeout = timeout
        self.default_track = default_track
        self.data: ScheduleDocument | None = None
        self._lock = threading.Lock()

    def log(self, msg):
        logging.getLogger(LOGGER_NAME).info(msg)

    def load(self) -> ScheduleDocument:
        """
        Return the processed schedule, fetching it on the first call only.
        Failed loads are not memoized.
        """
        if self.data is not None:
            return self.data
        with self._lock:
            if self.data is None:
                self.log(f"Loading schedule from {self.source}")
                raw = fetch_raw(self.source, http=self.http, timeout=self.timeout)
                document = parse_document(raw, source=self.source)
                self.data = process_data(document, default_track=self.default_track)
            return self.data

    def refresh(self) -> ScheduleDocument:
        """Drop the memoized schedule and load it again."""
        with self._lock:
            self.data = None
        self.log("Schedule cache cleared")
        return self.load()

    def get_timeline(
            self,
            day_index: int | None = None,
            query_text: str = "",
            exclude_tracks: Iterable[str] = (),
            segment: str = "all",
        ) -> list[Day]:
        """
        Days with hide/show flags recomputed for the given filters.
        day_index=None returns every day, otherwise a one-element list.
        """
        check_segment(segment)
        data = self.load()
        words = query_words(query_text)
        exclude_tracks = list(exclude_tracks)
        if day_index is None:
            days = data.conf_days
        else:
            if not 0 <= day_index < len(data.conf_days):
                raise IndexError(f"Day index {day_index} out of range (0..{len(data.conf_days) - 1})")
            days = [data.conf_days[day_index]]
        # The flags live on the shared graph; one filter pass at a time.
        with self._lock:
            return [filter_day(day, words, exclude_tracks, segment, self.favorites) for day in days]

    def get_speakers(self) -> list[Speaker]:
        """Named speakers sorted by last name."""
        speakers = [s for s in self.load().speakers if s.name != ""]
        return sorted(speakers, key=lambda s: s.last_name.casefold())

    def get_tracks(self) -> list[str]:
        return sorted(self.load().tracks)

    def get_map(self) -> list[MapLocation]:
        return self.load().map

    def get_conf_days(self) -> list[Day]:
        return self.load().conf_days
