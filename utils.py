"""
Console output helpers for the card game.
"""
import sys


def safe_print(msg, stream=None):
    """
    Print to console, falling back to ASCII when the terminal encoding
    cannot represent the message.
    """
    stream = stream or sys.stdout
    try:
        print(msg, file=stream)
    except UnicodeEncodeError:
        safe_msg = str(msg).encode('ascii', errors='replace').decode('ascii')
        print(safe_msg, file=stream)


def env_flag(value, default=False):
    """Interpret an environment variable string as a boolean."""
    if value is None:
        return default
    return value.strip().lower() not in ("", "0", "false", "no", "off")


def env_int(value, default=None):
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        safe_print(f"[CONFIG] Ignoring non-integer value {value!r}")
        return default
