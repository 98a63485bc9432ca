#main.py
import sys

from mpris_presence.config import CONFIG_PATH, load_app_id, load_config
from mpris_presence.discord_rpc import DiscordPresenceSink, connect_to_discord
from mpris_presence.errors import ConfigError
from mpris_presence.mpris import DBusPropertySource
from mpris_presence.worker import PresenceWorker


def main() -> int:
    try:
        config = load_config(CONFIG_PATH)
        app_id = load_app_id()
    except ConfigError as e:
        print(f"[Config] {e}")
        return 1

    rpc = connect_to_discord(app_id)
    worker = PresenceWorker(DBusPropertySource(), DiscordPresenceSink(rpc), config)

    print("[Music] Watching MPRIS players… (Ctrl+C to stop)")
    try:
        worker.run()
    except KeyboardInterrupt:
        worker.stop()
        print("[Music] Stopped")
        rpc.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
