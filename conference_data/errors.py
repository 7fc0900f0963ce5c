class ConferenceDataError(Exception):
    """Base class for errors raised by the conference data provider."""


class ScheduleLoadError(ConferenceDataError):
    """The schedule document could not be fetched, read or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Could not load schedule from {source}: {reason}")
        self.source = source
        self.reason = reason
