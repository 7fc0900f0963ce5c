"""
Shared pytest fixtures: a small raw schedule and a fake HTTP session.
"""

import copy
import json
from pathlib import Path

import pytest
import requests

from conference_data.provider import ConferenceData
from favorites_store import FavoritesStore


SCHEDULE_URL = "http://example.org/schedule.json"

RAW_SCHEDULE = {
    "schedule": [
        {
            "date": "2017-11-17",
            "groups": [
                {
                    "time": "09:00",
                    "sessions": [
                        {"name": "Apertura\\n<b>Keynote</b>\r\n", "kind": "plenaria", "location": "Aula Magna"},
                    ],
                },
                {
                    "time": "10:00",
                    "sessions": [
                        {
                            "name": "Async Python in depth",
                            "kind": "charla",
                            "speakerNames": ["Guido van Rossum", "Nobody"],
                            "tracks": ["Python", "Async"],
                            "timeStart": "10:00",
                            "timeEnd": "10:45",
                        },
                        {
                            "name": "Data science with pandas",
                            "kind": "charla",
                            "speakerNames": ["Ada Lovelace", "Grace Hopper"],
                            "tracks": ["Data"],
                        },
                    ],
                },
                {
                    "time": "12:00",
                    "sessions": [{"name": "slot", "kind": "Almuerzo"}],
                },
            ],
        },
        {
            "date": "2017-11-18",
            "groups": [
                {
                    "time": "10:00",
                    "sessions": [
                        {
                            "name": "Web-scale Django",
                            "kind": "charla",
                            "speakerNames": ["Ada Lovelace"],
                            "tracks": ["Web"],
                        },
                        {"name": "slot", "kind": "libre"},
                    ],
                },
                {
                    "time": "11:00",
                    "sessions": [
                        {"name": "Compilers, parsers", "kind": "taller", "speakerNames": ["", "Grace Hopper"], "tracks": None},
                    ],
                },
            ],
        },
    ],
    "speakers": [
        {"name": "Ada Lovelace", "twitter": "ada", "profilePic": "img/ada.png"},
        {"name": "Guido van Rossum"},
        {"name": "Grace Hopper", "about": "COBOL"},
        {"name": ""},
        {"name": "Alan Turing"},
    ],
    "tracks": [{"name": "served but ignored"}],
    "map": [{"name": "Venue", "lat": -34.6, "lng": -58.4, "center": True}],
}


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        return json.loads(self.text)


class FakeHttp:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def raw_schedule() -> dict:
    return copy.deepcopy(RAW_SCHEDULE)


@pytest.fixture
def http(raw_schedule) -> FakeHttp:
    return FakeHttp([FakeResponse(raw_schedule)])


@pytest.fixture
def favorites() -> FavoritesStore:
    return FavoritesStore("user-1")


@pytest.fixture
def provider(http, favorites) -> ConferenceData:
    return ConferenceData(source=SCHEDULE_URL, favorites=favorites, http=http, timeout=5)


@pytest.fixture
def schedule_file(tmp_path: Path, raw_schedule) -> Path:
    path = tmp_path / "schedule.json"
    path.write_text(json.dumps(raw_schedule), encoding="utf-8")
    return path
