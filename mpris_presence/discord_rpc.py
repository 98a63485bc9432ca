# mpris_presence/discord_rpc.py
import time
from typing import Union

from pypresence import Presence
from pypresence.types import ActivityType

from .errors import PublishError


def connect_to_discord(app_id: Union[int, str]) -> Presence:
    rpc = Presence(str(app_id))
    rpc.connect()

    # Give Discord time to send READY payload
    time.sleep(0.3)

    user = getattr(rpc, "user", None) or {}
    name = user.get("username")
    if name:
        disc = user.get("discriminator", "")
        display = f"{name}#{disc}" if disc and disc != "0" else name
        print(f"[RPC] Connected as {display}")
    else:
        print("[RPC] Connected")

    return rpc


class PresenceSink:
    """
    Where rendered presence lines go.

    publish() shows a state line, a details line and the asset ids; clear()
    blanks the presence. Both raise PublishError when the backend fails.
    """

    def publish(self, state: str, details: str, asset_image_id: str, asset_text: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class DiscordPresenceSink(PresenceSink):
    """Publishes rendered presence lines through a pypresence client."""

    def __init__(self, rpc: Presence):
        self._rpc = rpc

    def publish(self, state: str, details: str, asset_image_id: str, asset_text: str) -> None:
        try:
            self._rpc.update(
                state=state,
                details=details,
                large_image=asset_image_id,
                large_text=asset_text,
                activity_type=ActivityType.LISTENING,
            )
        except Exception as e:
            raise PublishError(f"Failed to set activity: {e}") from e

    def clear(self) -> None:
        try:
            self._rpc.clear()
        except Exception as e:
            raise PublishError(f"Failed to clear activity: {e}") from e
