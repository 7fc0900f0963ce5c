"""Normalize a parsed schedule: link speakers and sessions, collect tracks."""

import logging
import re

from conference_data.config import DEFAULT_TRACK, FREE_SLOT_KIND, LOGGER_NAME, PLENARY_KIND, SLOT_NAME
from conference_data.models import ScheduleDocument, Session


logger = logging.getLogger(LOGGER_NAME)

# Literal "\r"/"\n" escapes as well as real line breaks.
LINE_BREAKS_RE = re.compile(r"(?:\\[rn]|[\r\n]+)+")
HTML_TAG_RE = re.compile(r"<([^>]+)>", re.IGNORECASE)


def clean_plenary_name(name: str) -> str:
    """Plenary names arrive with HTML markup and line breaks from the site."""
    return HTML_TAG_RE.sub("", LINE_BREAKS_RE.sub(" ", name)).strip()


def process_data(document: ScheduleDocument, default_track: str = DEFAULT_TRACK) -> ScheduleDocument:
    """
    Build the derived collections of a freshly parsed document in place.
    Returns the same document for chaining.
    """
    document.tracks = []
    document.conf_days = []
    for day in document.schedule:
        document.conf_days.append(day)
        for group in day.groups:
            for session in group.sessions:
                process_session(document, session, default_track=default_track)
    logger.info(
        f"Processed schedule: {len(document.conf_days)} days, "
        f"{len(document.speakers)} speakers, {len(document.tracks)} tracks"
    )
    return document


def process_session(document: ScheduleDocument, session: Session, default_track: str = DEFAULT_TRACK) -> None:
    session.speakers = []

    kind = session.kind or ""
    if kind == PLENARY_KIND:
        session.name = clean_plenary_name(session.name)

    # Placeholder slots are named "slot"; lunch, registration etc. carry the real label in kind.
    if session.name.lower() == SLOT_NAME:
        if kind.lower() == FREE_SLOT_KIND:
            session.free_slot = True
        elif kind:
            session.name = kind

    for speaker_name in session.speaker_names:
        speaker = document.find_speaker(speaker_name)
        if speaker is None or speaker.name == "":
            logger.debug(f"Unknown speaker {speaker_name!r} in session {session.name!r}")
            continue
        session.speakers.append(speaker)
        speaker.sessions.append(session)

    if not session.tracks:
        session.tracks = [default_track]
    for track in session.tracks:
        if track not in document.tracks:
            document.tracks.append(track)
