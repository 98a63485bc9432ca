# mpris_presence/filters.py
from .errors import FilterRejected, RejectReason
from .models import Config, Snapshot


def check_snapshot(snapshot: Snapshot, config: Config) -> Snapshot:
    """Return the snapshot unchanged, or raise FilterRejected."""
    url = snapshot.url

    if url is None:
        if not config.play_no_url:
            raise FilterRejected(RejectReason.NO_URL, snapshot.service_id)
    elif config.use_whitelist:
        if not any(keyword in url for keyword in config.keyword_whitelist):
            raise FilterRejected(RejectReason.NOT_WHITELISTED, snapshot.service_id)

    if config.use_artist_blacklist:
        for artist in snapshot.artists:
            for keyword in config.artist_keyword_blacklist:
                if keyword in artist:
                    raise FilterRejected(RejectReason.BLACKLISTED_ARTIST, snapshot.service_id)

    return snapshot
