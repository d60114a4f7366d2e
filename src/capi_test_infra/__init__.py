from .logger import SuppressAndLog, log

__all__ = ["log", "SuppressAndLog"]
