"""Pomagotchi — dev launcher. Starts the backend API in watch mode."""

import argparse
import asyncio
import logging
import os
import signal
import subprocess
import sys
from pathlib import Path

from backend import config
from pomagotchi.models import GameState
from pomagotchi.storage import SaveStore

ROOT = Path(__file__).parent


def reset_save(data_dir: Path) -> None:
    """Write a fresh default game, as the reset endpoint does."""
    store = SaveStore(data_dir)
    asyncio.run(store.save(GameState()))
    logging.getLogger("pomagotchi").info("reset save at %s", store.path)


def main():
    parser = argparse.ArgumentParser(description="Pomagotchi dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Directory for pomagotchi_save.json (default: ./data)")
    parser.add_argument("--reset", action="store_true",
                        help="Reset the save file to a fresh game before starting")
    args = parser.parse_args()

    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    data_dir = args.data_dir or config.data_dir()
    if args.reset:
        reset_save(data_dir)

    # Build env for the subprocess so the backend picks up the same data dir
    env = os.environ.copy()
    env["DATA_DIR"] = str(data_dir.resolve())

    procs: list[subprocess.Popen] = []

    def shutdown(*_):
        print("\nShutting down...")
        for p in procs:
            p.terminate()
        for p in procs:
            p.wait()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    host, port = config.host(), str(config.port())
    print(f"Starting backend on http://{host}:{port} ...")
    procs.append(subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "backend.app:app", "--reload",
         "--host", host, "--port", port, "--log-level", config.log_level().lower()],
        cwd=ROOT, env=env,
    ))

    for p in procs:
        p.wait()


if __name__ == "__main__":
    main()
