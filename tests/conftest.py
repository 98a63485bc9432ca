"""Shared fakes for the presence pipeline tests"""
import pytest

from mpris_presence.discord_rpc import PresenceSink
from mpris_presence.errors import PropertyFetchError, PublishError
from mpris_presence.models import Config
from mpris_presence.mpris import PropertySource


class FakePropertySource(PropertySource):
    def __init__(self, players=None):
        # service_id -> {property name: value} or an exception to raise
        self.players = dict(players or {})
        self.calls = []

    def list_players(self):
        return list(self.players)

    def get_property(self, service_id, name, interface="org.mpris.MediaPlayer2.Player"):
        self.calls.append((service_id, name))
        props = self.players[service_id]
        if isinstance(props, Exception):
            raise PropertyFetchError(service_id, name, str(props))
        return props.get(name)


class RecordingSink(PresenceSink):
    def __init__(self, fail_publish=False, fail_clear=False):
        self.published = []
        self.clears = 0
        self.fail_publish = fail_publish
        self.fail_clear = fail_clear

    def publish(self, state, details, asset_image_id, asset_text):
        if self.fail_publish:
            raise PublishError("boom")
        self.published.append((state, details, asset_image_id, asset_text))

    def clear(self):
        self.clears += 1
        if self.fail_clear:
            raise PublishError("boom")


def player(status="Playing", position=0, title="Song", album="Album",
           artists=("Artist",), url="https://music.example/x", **extra):
    metadata = {}
    if title is not None:
        metadata["xesam:title"] = title
    if album is not None:
        metadata["xesam:album"] = album
    if artists is not None:
        metadata["xesam:artist"] = list(artists)
    if url is not None:
        metadata["xesam:url"] = url
    metadata.update(extra)
    return {"PlaybackStatus": status, "Position": position, "Metadata": metadata}


@pytest.fixture
def make_player():
    return player


@pytest.fixture
def fake_source():
    return FakePropertySource


@pytest.fixture
def recording_sink():
    return RecordingSink


@pytest.fixture
def config():
    return Config(
        keyword_whitelist=("music",),
        use_whitelist=False,
        play_no_url=True,
        artist_keyword_blacklist=(),
        use_artist_blacklist=False,
        embolden_titles=False,
    )
