"""Fetch the raw schedule document from the conference site or a local file."""

import json
import logging
from pathlib import Path
from typing import Any

import requests
from pydantic import ValidationError

from conference_data.config import LOGGER_NAME, SCHEDULE_TIMEOUT
from conference_data.errors import ScheduleLoadError
from conference_data.models import ScheduleDocument


logger = logging.getLogger(LOGGER_NAME)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_raw(
        source: str | Path,
        http: requests.Session | None = None,
        timeout: float = SCHEDULE_TIMEOUT,
    ) -> dict[str, Any]:
    """
    GET the schedule JSON from a URL, or read it from a local path.
    Raises ScheduleLoadError on transport, status or decoding failures.
    """
    source = str(source)
    if not _is_url(source):
        path = Path(source)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ScheduleLoadError(source, f"unreadable file: {e}") from e
        except json.JSONDecodeError as e:
            raise ScheduleLoadError(source, f"invalid JSON: {e}") from e
    else:
        client = http or requests.Session()
        try:
            response = client.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ScheduleLoadError(source, f"request failed: {e}") from e
        try:
            raw = response.json()
        except ValueError as e:
            raise ScheduleLoadError(source, f"invalid JSON: {response.text[:200]}") from e

    if not isinstance(raw, dict) or not isinstance(raw.get("schedule"), list):
        raise ScheduleLoadError(source, "not a recognized schedule format (missing schedule)")
    logger.info(f"Fetched schedule from {source}: {len(raw['schedule'])} days")
    return raw


def parse_document(raw: dict[str, Any], source: str = "<memory>") -> ScheduleDocument:
    """Validate raw JSON into a ScheduleDocument. Track lists are rebuilt later, so any served ones are dropped."""
    data = {k: v for k, v in raw.items() if k != "tracks"}
    try:
        return ScheduleDocument.model_validate(data)
    except ValidationError as e:
        raise ScheduleLoadError(source, f"invalid schedule document: {e.error_count()} errors") from e
