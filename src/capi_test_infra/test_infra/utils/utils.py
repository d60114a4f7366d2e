# -*- coding: utf-8 -*-
import logging
import os
import re
import shlex
import subprocess
from contextlib import contextmanager
from datetime import timedelta
from typing import Iterable, List

import filelock

from capi_test_infra.logger import log

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
}
_DURATION_PART = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
# Go durations are int64 nanoseconds
_MAX_DURATION_SECONDS = (2**63 - 1) / 1e9


def get_env(env, default=None):
    res = os.environ.get(env, "").strip()
    if not res or res == '""':
        res = default
    return res


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration string such as "30m", "1h", "2h30m", "1.5h" or "-90s".
    A unit is required for every number; "0" is the only unit-less value accepted.
    :raises ValueError: on any other input
    """
    if value is None:
        raise ValueError("invalid duration None")

    raw = value.strip()
    text = raw
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {raw!r}")

    seconds = 0.0
    position = 0
    for match in _DURATION_PART.finditer(text):
        if match.start() != position:
            break
        number, unit = match.groups()
        seconds += float(number) * _DURATION_UNITS[unit]
        position = match.end()

    if position != len(text):
        raise ValueError(f"invalid duration {raw!r}")
    if seconds > _MAX_DURATION_SECONDS:
        raise ValueError(f"invalid duration {raw!r}, out of range")

    return timedelta(seconds=sign * seconds)


def format_duration(duration: timedelta) -> str:
    total = int(duration.total_seconds())
    sign = "-" if total < 0 else ""
    hours, remainder = divmod(abs(total), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{sign}{hours}h{minutes}m{seconds}s"


def unique(items: Iterable[str]) -> List[str]:
    """Deduplicate while keeping the first occurrence order"""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def run_command(command, shell=False, raise_errors=True, env=None, cwd=None):
    command = command if shell else shlex.split(command)
    process = subprocess.run(
        command, shell=shell, stdout=subprocess.PIPE, stderr=subprocess.PIPE, env=env, universal_newlines=True, cwd=cwd
    )

    out = process.stdout.strip()
    err = process.stderr.strip()

    if raise_errors and process.returncode != 0:
        raise RuntimeError(f"command: {command} exited with an error: {err} " f"code: {process.returncode}")

    return out, err, process.returncode


@contextmanager
def file_lock_context(filepath, timeout=300):
    logging.getLogger("filelock").setLevel(logging.ERROR)

    lock = filelock.FileLock(filepath, timeout)
    try:
        lock.acquire()
    except filelock.Timeout:
        log.info("Deleting lock file: %s " "since it exceeded timeout of: %d seconds", filepath, timeout)
        os.unlink(filepath)
        lock.acquire()

    try:
        yield
    finally:
        lock.release()
