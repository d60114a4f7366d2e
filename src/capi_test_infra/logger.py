# -*- coding: utf-8 -*-
import logging
import os
import re
import sys
import traceback
from contextlib import suppress
from enum import Enum
from types import TracebackType
from typing import Type


class SensitiveFormatter(logging.Formatter):
    """Formatter that removes cloud credentials from log records."""

    @staticmethod
    def _filter(s):
        # Environment style assignments, e.g. dumped `az`/`aws` command environments
        s = re.sub(r"(AZURE_CLIENT_SECRET=)\S+", r"\g<1>*** AZURE_CLIENT_SECRET ***", s)
        s = re.sub(r"(AWS_SECRET_ACCESS_KEY=)\S+", r"\g<1>*** AWS_SECRET_ACCESS_KEY ***", s)
        s = re.sub(r"(AWS_ACCESS_KEY_ID=)\S+", r"\g<1>*** AWS_ACCESS_KEY_ID ***", s)

        # Dict filter, e.g. decoded secret data
        s = re.sub(r"('AZURE_CLIENT_SECRET':\s+)'(.*?)'", r"\g<1>'*** AZURE_CLIENT_SECRET ***'", s)
        s = re.sub(r"('credentials':\s+)'(.*?)'", r"\g<1>'*** AWS_CREDENTIALS ***'", s)

        return s

    def format(self, record):
        original = logging.Formatter.format(self, record)
        return self._filter(original)


class Color(Enum):
    BLUE = "\033[0;34m"
    LIGHT_RED = "\033[1;31m"
    LIGHT_YELLOW = "\033[1;33m"
    LIGHT_PURPLE = "\033[1;35m"
    RESET = "\033[0m"


ColorLevel = {
    logging.DEBUG: Color.BLUE.value,
    logging.INFO: Color.RESET.value,
    logging.WARNING: Color.LIGHT_YELLOW.value,
    logging.ERROR: Color.LIGHT_RED.value,
    logging.CRITICAL: Color.LIGHT_PURPLE.value,
}


class ColorizingStreamHandler(logging.StreamHandler):
    @property
    def is_tty(self):
        isatty = getattr(self.stream, "isatty", None)
        return isatty and isatty()

    def emit(self, record):
        try:
            message = self.format(record)
            stream = self.stream
            if self.is_tty:
                message = ColorLevel.get(record.levelno, Color.RESET.value) + message + Color.RESET.value
            stream.write(message)
            stream.write(getattr(self, "terminator", "\n"))
            self.flush()
        except Exception:
            self.handleError(record)


def get_logging_level():
    level = os.environ.get("LOGGING_LEVEL", "")
    return logging.getLevelName(level.upper()) if level else logging.DEBUG


def add_log_file_handler(logger: logging.Logger, filename: str) -> logging.FileHandler:
    fmt = SensitiveFormatter("%(asctime)s - %(name)s - %(levelname)s - %(thread)d:%(process)d - %(message)s")
    fh = logging.FileHandler(filename, delay=True)
    fh.setFormatter(fmt)
    logger.addHandler(fh)
    return fh


def add_stream_handler(logger: logging.Logger):
    fmt = SensitiveFormatter(
        "%(asctime)s  %(name)s %(levelname)-10s - %(thread)d - %(message)s \t" "(%(pathname)s:%(lineno)d)->%(funcName)s"
    )
    ch = ColorizingStreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    logger.addHandler(ch)


logging.getLogger("urllib3").setLevel(logging.ERROR)
logging.getLogger("kubernetes").setLevel(logging.WARNING)

logger_name = os.environ.get("LOGGER_NAME", "capi_test_infra")

log = logging.getLogger(logger_name)
log.setLevel(get_logging_level())

add_log_file_handler(log, "capi_test_infra.log")
add_stream_handler(log)


class SuppressAndLog(suppress):
    def __exit__(self, exctype: Type[Exception], excinst: Exception, exctb: TracebackType):
        res = super().__exit__(exctype, excinst, exctb)

        if res:
            with suppress(BaseException):
                tb_data = traceback.extract_tb(exctb, 1)[0]
                log.warning(f"Suppressed {exctype.__name__} from {tb_data.name}:{tb_data.lineno} : {excinst}")

        return res
