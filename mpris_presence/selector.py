# mpris_presence/selector.py
from typing import Iterable, Optional

from .debug import debug_log
from .errors import FilterRejected, NoMediaAvailable, PropertyFetchError
from .filters import check_snapshot
from .metadata import extract_snapshot
from .models import Config, Snapshot
from .mpris import PropertySource


def select_player(source: PropertySource, config: Config, services: Iterable[str]) -> Snapshot:
    """
    Pick the snapshot to show.

    The first accepted player that is Playing wins outright. Otherwise the
    last accepted player is used, whatever its status.
    """
    fallback: Optional[Snapshot] = None

    for service_id in services:
        debug_log(f"Found player: {service_id}")
        try:
            snapshot = check_snapshot(extract_snapshot(source, service_id), config)
        except (PropertyFetchError, FilterRejected) as e:
            debug_log(f"Output not allowed: {e}")
            continue

        if snapshot.playing:
            return snapshot
        fallback = snapshot

    if fallback is None:
        raise NoMediaAvailable()
    return fallback
