#!/usr/bin/env python

import argparse
import config
import sys
from core.autoqueue import append_auto_queue
from core.db import SettingsDatabase
from core.logging import autoqueue_logger, log_error, setup_logging
from core.models import StreamInfo
from core.preferences import PlayerPreferences
from core.queue import PlayQueue, PlayQueueItem
from eliot import log_message, start_action
from pathlib import Path
from pydantic import ValidationError


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Pick the stream to auto-queue after the current one")
    parser.add_argument("info", type=Path, help="JSON file describing the stream currently playing")
    parser.add_argument("--queue", nargs="*", default=None, help="URLs already in the queue (defaults to the stream's own URL)")
    parser.add_argument("--db", default=config.DB_NAME, help="Settings database")
    parser.add_argument("--enable-auto-queue", action="store_true", help="Turn the auto-queue setting on before selecting")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    # stdout carries only the result
    setup_logging(config.LOG_LEVEL, config.LOG_FILE, stream=sys.stderr)

    with start_action(autoqueue_logger, "autoqueue_cli", info_file=str(args.info)):
        try:
            info = StreamInfo.model_validate_json(args.info.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            log_error(autoqueue_logger, e, context="load_stream_info")
            print(f"Could not read {args.info}: {e}", file=sys.stderr)
            return 1

        urls = args.queue if args.queue is not None else [info.url]
        queue = PlayQueue([PlayQueueItem(url=url) for url in urls], index=max(len(urls) - 1, 0))

        with SettingsDatabase(args.db) as db:
            preferences = PlayerPreferences(db.preferences)
            if args.enable_auto_queue:
                preferences.set_auto_queue_enabled(True)

            if not preferences.is_auto_queue_enabled():
                log_message(message_type="autoqueue_disabled", message="Auto-queue is disabled")
                return 0

            appended = append_auto_queue(queue, info, preferences)

        if appended is None:
            print("No stream to auto-queue")
        else:
            print(appended.url)
        return 0


if __name__ == "__main__":
    sys.exit(main())
