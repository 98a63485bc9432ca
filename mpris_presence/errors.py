# mpris_presence/errors.py
from enum import Enum


class PresenceError(Exception):
    """Base for everything the presence pipeline raises."""


class ConfigError(PresenceError):
    pass


class PropertyFetchError(PresenceError):
    def __init__(self, service_id: str, name: str, reason: str):
        super().__init__(f"{service_id}: could not read {name}: {reason}")
        self.service_id = service_id
        self.name = name
        self.reason = reason


class MetadataTypeMismatch(PresenceError):
    def __init__(self, key: str, value):
        super().__init__(f"{key} has unexpected type {type(value).__name__}")
        self.key = key
        self.value = value


class RejectReason(Enum):
    NOT_WHITELISTED = "Not whitelisted"
    NO_URL = "Not found url"
    BLACKLISTED_ARTIST = "Artist blacklisted"


class FilterRejected(PresenceError):
    def __init__(self, reason: RejectReason, service_id: str = ""):
        super().__init__(f"{service_id}: {reason.value}" if service_id else reason.value)
        self.reason = reason
        self.service_id = service_id


class NoMediaAvailable(PresenceError):
    def __init__(self, message: str = "No media"):
        super().__init__(message)


class StyleTransformFailed(PresenceError):
    def __init__(self, char: str):
        super().__init__(f"Unable to fully transform (char {ord(char)} {char!r})")
        self.char = char


class PublishError(PresenceError):
    pass
