"""Custom exception hierarchy for nearplants."""


class NearPlantsError(Exception):
    """Base exception for all nearplants errors."""


class SourceUnavailable(NearPlantsError):
    """The plant data file could not be read or fetched."""

    def __init__(self, location: str, detail: str):
        self.location = location
        self.detail = detail
        super().__init__(f"Plant data unavailable at {location}: {detail}")


class ConfigInvalid(NearPlantsError, ValueError):
    """A configuration value could not be interpreted."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for {name}: {value!r}")


class SelectionInvalid(NearPlantsError, ValueError):
    """Proximity selection was asked for a negative radius or limit."""
