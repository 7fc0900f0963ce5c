"""Visibility rules applied to sessions on every timeline query."""

import re
from typing import Iterable, Protocol

from conference_data.config import SEGMENT_FAVORITES, SEGMENTS
from conference_data.models import Day, Session


QUERY_SEPARATORS_RE = re.compile(r"[,.\-]")


class Favorites(Protocol):
    def has_favorite(self, session_name: str) -> bool: ...


def query_words(query_text: str) -> list[str]:
    """Lowercase the query, treat commas, dots and dashes as spaces, drop empty words."""
    text = QUERY_SEPARATORS_RE.sub(" ", (query_text or "").lower())
    return text.split()


def check_segment(segment: str) -> None:
    if segment not in SEGMENTS:
        raise ValueError(f"Unknown segment {segment!r}, expected one of {SEGMENTS}")


def filter_session(
        session: Session,
        words: list[str],
        exclude_tracks: Iterable[str],
        segment: str,
        favorites: Favorites | None = None,
    ) -> bool:
    """
    Set session.hide from the query, track and segment tests.
    Returns True if the session stays visible.
    """
    if words:
        name = session.name.lower()
        matches_query = any(w in name for w in words)
    else:
        matches_query = True

    if session.free_slot:
        matches_query = False

    excluded = set(exclude_tracks)
    matches_tracks = any(track not in excluded for track in session.tracks)

    if segment == SEGMENT_FAVORITES:
        matches_segment = favorites is not None and favorites.has_favorite(session.name)
    else:
        matches_segment = True

    session.hide = not (matches_query and matches_tracks and matches_segment)
    return not session.hide


def filter_day(
        day: Day,
        words: list[str],
        exclude_tracks: Iterable[str],
        segment: str,
        favorites: Favorites | None = None,
    ) -> Day:
    """Recompute group and day visibility from the sessions of one day."""
    exclude_tracks = list(exclude_tracks)
    day.shown_sessions = 0
    for group in day.groups:
        group.hide = True
        for session in group.sessions:
            if filter_session(session, words, exclude_tracks, segment, favorites):
                group.hide = False
                day.shown_sessions += 1
    day.show = day.shown_sessions > 0
    return day
