# mpris_presence/render.py
from typing import Tuple

from .debug import debug_log
from .models import Config, RememberedPosition, Snapshot
from .text import math_bold, math_bold_script, math_italic, style_or_plain, truncate_utf8_bytes

DETAILS_MAX_BYTES = 125


def render_presence(snapshot: Snapshot, config: Config, remembered: RememberedPosition) -> Tuple[str, str]:
    """
    Build the (state, details) lines for Discord.

    Playing snapshots also update `remembered`, which is what the paused
    line shows later on.
    """
    if snapshot.title is None or snapshot.album is None:
        debug_log(f"{snapshot.service_id} has no title/album, rendering blanks")

    title = snapshot.title or ""
    album = snapshot.album or ""
    artstr = ", ".join(snapshot.artists)
    by = "By"

    if config.embolden_titles:
        title = style_or_plain(title, math_bold)
        artstr = style_or_plain(artstr, math_italic)
        by = style_or_plain(by, math_bold_script)

    if snapshot.playing:
        state = f"{by}: {artstr}"
        remembered.value = snapshot.position
        debug_log(f"POS::: {remembered.value}")
    else:
        state = f"Paused @ {remembered.value} • \nBy: {artstr}"

    details = truncate_utf8_bytes(f"🎵 {title} • 💿 {album}", DETAILS_MAX_BYTES)
    return state, details
