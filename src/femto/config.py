"""Runtime configuration, read from ``FEMTO_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass
class Config:
    """Editor configuration.

    ``log_file`` empty means logging is disabled; the terminal itself is
    never used for log output while the editor runs.
    """

    log_file: str = ""
    log_level: str = "warning"
    write_log: str = ""
    read_size: int = 32

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ
        config = cls(
            log_file=env.get("FEMTO_LOG_FILE", ""),
            write_log=env.get("FEMTO_WRITE_LOG", ""),
        )
        level = env.get("FEMTO_LOG_LEVEL", "").lower()
        if level in LOG_LEVELS:
            config.log_level = level
        read_size = env.get("FEMTO_READ_SIZE", "")
        if read_size.isdigit() and int(read_size) > 0:
            config.read_size = int(read_size)
        return config
