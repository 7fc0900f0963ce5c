from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScheduleModel(BaseModel):
    """Base for schedule entities: camelCase aliases, unknown keys kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Speaker(ScheduleModel):
    """Speaker of one or more sessions."""

    id: Optional[int | str] = None
    name: str = ""
    title: Optional[str] = None
    about: Optional[str] = None
    location: Optional[str] = None
    profile_pic: Optional[str] = Field(default=None, alias="profilePic")
    twitter: Optional[str] = None
    sessions: list[Session] = Field(
        default_factory=list,
        exclude=True,
        repr=False,
        description="Sessions this speaker gives, linked at load time.",
    )

    @property
    def last_name(self) -> str:
        words = self.name.split()
        return words[-1] if words else ""


class Session(ScheduleModel):
    """Session in a timeline group."""

    id: Optional[int | str] = None
    name: str = ""
    kind: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    speaker_names: list[str] = Field(default_factory=list, alias="speakerNames")
    time_start: Optional[str] = Field(default=None, alias="timeStart")
    time_end: Optional[str] = Field(default=None, alias="timeEnd")
    tracks: list[str] = Field(default_factory=list)
    speakers: list[Speaker] = Field(
        default_factory=list,
        description="Speakers resolved from speaker_names.",
    )
    free_slot: bool = Field(default=False, exclude=True)
    hide: bool = False

    @field_validator("speaker_names", "tracks", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return value or []


class Group(ScheduleModel):
    """Sessions sharing a start time."""

    time: Optional[str] = None
    sessions: list[Session] = Field(default_factory=list)
    hide: bool = False


class Day(ScheduleModel):
    """One conference day."""

    date: Optional[str] = None
    groups: list[Group] = Field(default_factory=list)
    shown_sessions: int = Field(default=0, alias="shownSessions")
    show: bool = False

    def iter_sessions(self):
        for group in self.groups:
            yield from group.sessions


class MapLocation(ScheduleModel):
    """Venue location shown on the map page."""

    name: str = ""
    lat: Optional[float] = None
    lng: Optional[float] = None
    center: bool = False


class ScheduleDocument(ScheduleModel):
    """Complete schedule document with derived collections."""

    schedule: list[Day]
    speakers: list[Speaker] = Field(default_factory=list)
    tracks: list[str] = Field(default_factory=list)
    conf_days: list[Day] = Field(default_factory=list, exclude=True)
    map: list[MapLocation] = Field(default_factory=list)

    def find_speaker(self, name: str) -> Speaker | None:
        return next((s for s in self.speakers if s.name == name), None)


Speaker.model_rebuild()
