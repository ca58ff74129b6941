"""Entry point for the standalone kcache watcher."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from threading import Event

from .cache import FilteredCache
from .config import load_config
from .handlers import LoggingHandler
from .registry import HandlerRegistry
from .watchers import FileObjectWatcher

LOG = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the filtered object watcher")
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("/etc/kcache/watch.yaml"),
        help="Path to the watcher configuration file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Poll every watcher once and exit",
    )

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    config = load_config(args.config)
    LOG.info("using filter %r", config.filter)

    registry = HandlerRegistry()
    registry.register("log", LoggingHandler())

    stop_event = Event()

    watchers = []
    for watcher_cfg in config.watchers:
        if watcher_cfg.type != "file":
            raise ValueError(f"unsupported watcher type '{watcher_cfg.type}'")
        watcher = FileObjectWatcher(
            cache=FilteredCache(registry, config.filter),
            path=watcher_cfg.path,
            interval=watcher_cfg.interval,
            stop_event=stop_event,
        )
        try:
            watcher.poll()
        except Exception:
            LOG.exception("initial poll failed for watcher %s", watcher_cfg.path)
        watchers.append(watcher)

    if args.once:
        return 0

    if not watchers:
        LOG.warning("no watchers configured; watcher will idle")

    for watcher in watchers:
        watcher.start()

    def _shutdown(signum, frame):
        LOG.info("received signal %s, shutting down", signum)
        stop_event.set()

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)

    try:
        while not stop_event.is_set():
            stop_event.wait(1.0)
    except KeyboardInterrupt:
        stop_event.set()

    for watcher in watchers:
        watcher.join()

    LOG.info("kcache watcher stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
