# mpris_presence/worker.py
import time
from typing import Callable, Optional, Tuple

from .debug import debug_log
from .discord_rpc import PresenceSink
from .errors import NoMediaAvailable, PropertyFetchError, PublishError
from .models import Config, RememberedPosition
from .mpris import PropertySource
from .render import render_presence
from .selector import select_player

POLL_SECONDS = 2

ASSET_IMAGE = "arch_icon"
ASSET_TEXT = "#ARCHONTOP"


class PresenceWorker:
    def __init__(
        self,
        source: PropertySource,
        sink: PresenceSink,
        config: Config,
        poll_seconds: float = POLL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.source = source
        self.sink = sink
        self.config = config
        self.poll_seconds = poll_seconds
        self.remembered = RememberedPosition()
        self._sleep = sleep
        self._running = True
        self._last_sig: Optional[Tuple[str, str]] = None

    def stop(self):
        self._running = False

    def _clear(self, reason: Exception):
        debug_log(f"ERROR: {reason}")
        if self._last_sig is not None:
            print(f"[Music] Nothing to show ({reason})")
        self._last_sig = None
        try:
            self.sink.clear()
        except PublishError as e:
            print(f"[RPC] {e}")

    def tick(self) -> Optional[Tuple[str, str]]:
        """
        One poll: pick a player, render it and publish.

        Returns the rendered (state, details), or None when the presence
        was cleared instead.
        """
        try:
            services = self.source.list_players()
            snapshot = select_player(self.source, self.config, services)
        except (NoMediaAvailable, PropertyFetchError) as e:
            self._clear(e)
            return None

        state, details = render_presence(snapshot, self.config, self.remembered)

        # Only update Discord when something visible changes
        sig = (state, details)
        if sig != self._last_sig:
            try:
                self.sink.publish(state, details, ASSET_IMAGE, ASSET_TEXT)
            except PublishError as e:
                print(f"[RPC] {e}")
                return sig
            print(f"[RPC] Updated: {snapshot.title or ''} — {', '.join(snapshot.artists)}")
            self._last_sig = sig

        return sig

    def run(self):
        while self._running:
            self._sleep(self.poll_seconds)
            if not self._running:
                break
            debug_log("-----------NEW HEARTBEAT-------")
            self.tick()
