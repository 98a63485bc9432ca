# mpris_presence/metadata.py
from typing import Any, Optional, Tuple

from .debug import debug_log
from .errors import MetadataTypeMismatch
from .models import PlaybackStatus, Snapshot
from .mpris import PropertySource

MICROSECONDS = 1_000_000


def _expect_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise MetadataTypeMismatch(key, value)
    return value


def _expect_int(key: str, value: Any) -> int:
    # bool is an int subclass but never a valid position
    if isinstance(value, bool) or not isinstance(value, int):
        raise MetadataTypeMismatch(key, value)
    return value


def _expect_artists(key: str, value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        raise MetadataTypeMismatch(key, value)
    return tuple(v for v in value if isinstance(v, str))


def _read(key: str, value: Any, expect, default):
    if value is None:
        return default
    try:
        return expect(key, value)
    except MetadataTypeMismatch as e:
        debug_log(f"Ignoring field: {e}")
        return default


def _to_seconds(micros: int) -> int:
    # truncate toward zero, not floor
    secs = abs(micros) // MICROSECONDS
    return -secs if micros < 0 else secs


def extract_snapshot(source: PropertySource, service_id: str) -> Snapshot:
    """
    Read one player's properties into a Snapshot.

    Missing or oddly typed fields fall back to defaults; only a
    PropertyFetchError from the source escapes.
    """
    status = _read("PlaybackStatus", source.get_property(service_id, "PlaybackStatus"), _expect_str, "Unknown")
    position_us = _read("Position", source.get_property(service_id, "Position"), _expect_int, 0)
    position_seconds = _to_seconds(position_us)
    debug_log(f"{service_id} POSITION : {position_seconds}")

    metadata = source.get_property(service_id, "Metadata")
    if not isinstance(metadata, dict):
        debug_log(f"{service_id} Metadata not a dict: {metadata!r}")
        return Snapshot(
            service_id=service_id,
            status=PlaybackStatus.parse(status),
            position_seconds=position_seconds,
        )

    title: Optional[str] = _read("xesam:title", metadata.get("xesam:title"), _expect_str, None)
    url: Optional[str] = _read("xesam:url", metadata.get("xesam:url"), _expect_str, None)
    album: Optional[str] = _read("xesam:album", metadata.get("xesam:album"), _expect_str, None)
    artists = _read("xesam:artist", metadata.get("xesam:artist"), _expect_artists, ())
    art_url: Optional[str] = _read("mpris:artUrl", metadata.get("mpris:artUrl"), _expect_str, None)

    debug_log(
        f"{service_id} Title: {title} url: {url} Album: {album} "
        f"Artists: {list(artists)} Art url: {art_url}"
    )

    return Snapshot(
        service_id=service_id,
        status=PlaybackStatus.parse(status),
        position_seconds=position_seconds,
        title=title,
        album=album,
        artists=artists,
        url=url,
        art_url=art_url,
    )
