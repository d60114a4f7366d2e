from datetime import timedelta
from typing import Any, Callable, List, Optional

from capi_test_infra.logger import log
from capi_test_infra.test_infra.utils.utils import format_duration, get_env, parse_duration


class EnvVar:
    """
    Get env vars from os environment variables while saving the source of the data
    Attributes:
        __var_keys      Environment variables keys, if multiple keys are set, taking the first
        __loader        Function to execute on the env var when getting it from system
        __default       Default value for variable if not set
        __is_user_set   Set to true if one of the environment variables in __var_keys was set by the user
    The value is read from the environment on every access, so a variable exported after the
    pool was created is still seen.
    """

    def __init__(
        self, var_keys: List[str] = None, *, loader: Optional[Callable] = None, default: Optional[Any] = None
    ) -> None:
        self.__var_keys = var_keys if var_keys else []
        self.__loader = loader
        self.__default = default
        self.__is_user_set = False

    def __str__(self):
        return f"{f'{self.__var_keys[0]}=' if len(self.__var_keys) > 0 else ''}{self.value}"

    @property
    def var_keys(self):
        return self.__var_keys

    @property
    def default(self):
        return self.__default

    @property
    def is_user_set(self):
        return self.__is_user_set

    def _load(self, key: str, raw: str) -> Any:
        return self.__loader(raw) if self.__loader else raw

    @property
    def value(self):
        value = self.__default
        self.__is_user_set = False
        for key in self.__var_keys:
            env = get_env(key)
            if env is not None:
                self.__is_user_set = True
                value = self._load(key, env)
                break
        return value


class DurationEnvVar(EnvVar):
    """Duration variable that never fails: an unparsable value logs a warning and resolves to the default"""

    def __init__(self, var_keys: List[str] = None, *, default: timedelta) -> None:
        super().__init__(var_keys, loader=parse_duration, default=default)
        self.__is_fallback = False

    @property
    def is_fallback(self):
        return self.__is_fallback

    @property
    def value(self):
        self.__is_fallback = False
        return super().value

    def _load(self, key: str, raw: str) -> timedelta:
        try:
            return super()._load(key, raw)
        except ValueError:
            self.__is_fallback = True
            log.warning(f"Invalid {key} '{raw}', using default {format_duration(self.default)}")
            return self.default


def is_true(value: str) -> bool:
    return value == "true"
