"""
Logging configuration for upnext using eliot.

This module provides structured logging for the auto-queue selector, the play
queue and the settings store. Messages are rendered human-readable on stdout
(or another stream) and optionally written as raw JSON to a log file.
"""

import eliot
import logging
import sys
from eliot import log_message, write_traceback
from eliot.stdlib import EliotHandler
from pathlib import Path


class HumanReadableDestination:
    """Destination that formats logs in a human-readable format."""

    # Too noisy to print, still written to the JSON log file
    skip_messages = {
        "queue_operation",
        "settings_operation",
    }

    def __init__(self, file):
        self.file = file

    def __call__(self, message):
        """Format and write log message."""
        # Skip internal eliot action start/finish messages
        if message.get("action_type") and not message.get("message_type"):
            return

        msg_type = message.get("message_type", "")
        if msg_type in self.skip_messages:
            return

        if msg_type == "autoqueue_decision":
            source = message.get("source", "")
            url = message.get("url")
            if url:
                output = f"[AUTOQUEUE] {source}: {url}"
            else:
                output = f"[AUTOQUEUE] no selection ({source})"
        elif msg_type == "error_occurred":
            output = f"[ERROR] {message.get('error_type', '')}: {message.get('error_message', '')}"
        elif "description" in message:
            output = message["description"]
        elif "message" in message:
            output = message["message"]
        else:
            return

        if output and output.strip():
            self.file.write(output + "\n")
            self.file.flush()


def setup_logging(log_level: str = "INFO", log_file: str = None, stream=None) -> None:
    """
    Set up eliot logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to (always logs to the stream as well)
        stream: Where human-readable lines go, defaults to stdout
    """
    eliot.add_destination(HumanReadableDestination(stream or sys.stdout))

    # Raw JSON for machine parsing
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        eliot.to_file(open(log_file, "a"))

    # Route stdlib logging through eliot
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.addHandler(EliotHandler())

    log_message(
        message_type="logging_setup", log_level=log_level, log_file=log_file or "stdout", message="Eliot logging configured"
    )


def get_logger(name: str):
    """
    Get an eliot logger instance for a specific module.

    The returned Logger is meant for start_action() and write_traceback();
    use eliot.log_message() for plain messages.

    Args:
        name: Module or component name

    Returns:
        Eliot Logger instance
    """
    from eliot import Logger

    return Logger()


# Global logger instances for different components
autoqueue_logger = get_logger("upnext_autoqueue")
queue_logger = get_logger("upnext_queue")
settings_logger = get_logger("upnext_settings")


def log_queue_operation(operation: str, **context):
    """
    Log queue operations with context.

    Args:
        operation: Queue operation (append, next, clear, etc.)
        **context: Additional context data
    """
    log_message(message_type="queue_operation", operation=operation, **context)


def log_autoqueue_decision(source: str, url: str | None = None, **context):
    """
    Log the outcome of an auto-queue selection.

    Args:
        source: Which path produced the outcome ("next_video", "related", "no_related", "exhausted")
        url: URL of the selected item, None when nothing was selected
        **context: Additional context data (candidate counts, queue size)
    """
    log_message(message_type="autoqueue_decision", source=source, url=url, **context)


def log_settings_operation(operation: str, key: str, **context):
    """
    Log settings store reads and writes.

    Args:
        operation: get or set
        key: Settings key
        **context: Additional context data
    """
    log_message(message_type="settings_operation", operation=operation, key=key, **context)


def log_error(logger: eliot.Logger, error: Exception, **context):
    """
    Log errors with full context and traceback.

    Args:
        logger: Eliot logger instance
        error: Exception that occurred
        **context: Additional context data
    """
    write_traceback(logger, exc_info=sys.exc_info())
    log_message(message_type="error_occurred", error_message=str(error), error_type=type(error).__name__, **context)
