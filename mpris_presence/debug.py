# mpris_presence/debug.py
import os
import time
from pathlib import Path


_DEBUG = os.getenv("MPP_DEBUG") == "1"
LOG_PATH = Path(__file__).resolve().parents[1] / "mpp_debug.log"


def debug_log(message: str) -> None:
    if not _DEBUG:
        return

    ts = time.strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{ts}] {message}\n"
    try:
        with LOG_PATH.open("a", encoding="utf-8") as f:
            f.write(line)
    except OSError as e:
        print(f"[DEBUG] could not write {LOG_PATH.name}: {e}")

    print(f"[DEBUG] {message}")
