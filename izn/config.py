import codecs
import os
from dataclasses import dataclass, fields
from typing import Any, Mapping

from izn.log_levels import LogLevel, coerce_log_level

ENV_PREFIX = "IZN"
DEFAULT_ENCODING = "utf-8"


@dataclass
class Settings:
    log_level: LogLevel = LogLevel.WARNING
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self):
        self.log_level = coerce_log_level(self.log_level)
        # fail early on a codec name open() would reject later
        codecs.lookup(self.encoding)


def load_env_config(env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect IZN_* variables into keyword arguments for Settings."""
    if env is None:
        env = os.environ

    known = {f.name for f in fields(Settings)}
    config: dict[str, Any] = {}
    for k, v in env.items():
        if not k.startswith(ENV_PREFIX):
            continue

        key = k[len(ENV_PREFIX) :].lstrip("_").lower()
        if key in known and v:
            config[key] = v

    if log_level := config.get("log_level"):
        config["log_level"] = coerce_log_level(log_level)
    return config


def default_settings(env: Mapping[str, str] | None = None) -> Settings:
    return Settings(**load_env_config(env))


def default_encoding(env: Mapping[str, str] | None = None) -> str:
    """IZN_ENCODING as given, unvalidated; open() reports an unknown codec."""
    if env is None:
        env = os.environ
    return env.get(f"{ENV_PREFIX}_ENCODING") or DEFAULT_ENCODING
