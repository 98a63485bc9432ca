from dataclasses import replace

from mpris_presence.models import PlaybackStatus, RememberedPosition, Snapshot
from mpris_presence.render import render_presence
from mpris_presence.text import math_bold, math_bold_script, math_italic, style_text


def snap(status=PlaybackStatus.PLAYING, **kwargs) -> Snapshot:
    fields = dict(service_id="p", status=status, position_seconds=95, title="Song",
                  album="Album", artists=("A", "B"))
    fields.update(kwargs)
    return Snapshot(**fields)


def test_playing_updates_remembered_position(config) -> None:
    remembered = RememberedPosition()

    state, details = render_presence(snap(), config, remembered)

    assert state == "By: A, B"
    assert details == "🎵 Song • 💿 Album"
    assert remembered.value == "1:35"


def test_paused_uses_remembered_position(config) -> None:
    remembered = RememberedPosition("1:30")

    state, _ = render_presence(snap(status=PlaybackStatus.PAUSED), config, remembered)

    assert state == "Paused @ 1:30 • \nBy: A, B"
    assert remembered.value == "1:30"


def test_remembered_position_starts_at_zero(config) -> None:
    state, _ = render_presence(snap(status=PlaybackStatus.STOPPED), config, RememberedPosition())
    assert state.startswith("Paused @ 0 • ")


def test_embolden_styles_title_artists_and_by(config) -> None:
    cfg = replace(config, embolden_titles=True)

    state, details = render_presence(snap(title="Song (Live)"), cfg, RememberedPosition())

    by = style_text("By", math_bold_script)
    assert state == f"{by}: {style_text('A, B', math_italic)}"
    assert details == f"🎵 {style_text('Song ', math_bold)}(Live) • 💿 Album"


def test_embolden_falls_back_per_field(config) -> None:
    cfg = replace(config, embolden_titles=True)

    state, details = render_presence(snap(title="Song!", artists=("Ann",)), cfg, RememberedPosition())

    assert details == "🎵 Song! • 💿 Album"
    assert state.endswith(": " + style_text("Ann", math_italic))


def test_paused_by_is_never_styled(config) -> None:
    cfg = replace(config, embolden_titles=True)
    state, _ = render_presence(snap(status=PlaybackStatus.PAUSED, artists=()), cfg, RememberedPosition("2:00"))
    assert state == "Paused @ 2:00 • \nBy: "


def test_missing_title_album_render_blank(config) -> None:
    _, details = render_presence(snap(title=None, album=None), config, RememberedPosition())
    assert details == "🎵  • 💿 "


def test_details_truncated(config) -> None:
    _, details = render_presence(snap(title="x" * 300), config, RememberedPosition())
    assert details.endswith("...")
    assert len(details[:-3].encode("utf-8")) <= 125
