# mpris_presence/mpris.py
from typing import Any, List, Optional

from .errors import PropertyFetchError

MPRIS_PREFIX = "org.mpris.MediaPlayer2."
MPRIS_PATH = "/org/mpris/MediaPlayer2"
PLAYER_IFACE = "org.mpris.MediaPlayer2.Player"
PROPS_IFACE = "org.freedesktop.DBus.Properties"
DBUS_NAME = "org.freedesktop.DBus"


class PropertySource:
    """
    Where player properties come from.

    list_players() returns the bus names of running MPRIS players.
    get_property() returns one property value, or None when the player
    doesn't expose it. Both raise PropertyFetchError on transport failures.
    """

    def list_players(self) -> List[str]:
        raise NotImplementedError

    def get_property(self, service_id: str, name: str, interface: str = PLAYER_IFACE) -> Optional[Any]:
        raise NotImplementedError


class DBusPropertySource(PropertySource):
    def __init__(self, bus=None):
        if bus is None:
            from pydbus import SessionBus
            bus = SessionBus()
        self._bus = bus
        # service_id -> Properties proxy, built once per player
        self._props = {}

    def list_players(self) -> List[str]:
        try:
            names = self._bus.dbus.ListNames()
        except Exception as e:
            raise PropertyFetchError(DBUS_NAME, "ListNames", str(e)) from e

        players = [str(name) for name in names if str(name).startswith(MPRIS_PREFIX)]
        for gone in set(self._props) - set(players):
            del self._props[gone]
        return players

    def get_property(self, service_id: str, name: str, interface: str = PLAYER_IFACE) -> Optional[Any]:
        try:
            props = self._props.get(service_id)
            if props is None:
                props = self._bus.get(service_id, MPRIS_PATH)[PROPS_IFACE]
                self._props[service_id] = props
            return props.Get(interface, name)
        except Exception as e:
            # the player may have restarted under the same name
            self._props.pop(service_id, None)
            raise PropertyFetchError(service_id, name, str(e)) from e
