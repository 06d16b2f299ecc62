"""Anagram solver configuration."""

from typing import Literal

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class SolverConfig(BaseSettings):
    """Configuration settings for the anagram solver."""

    mode: Literal["fast", "slow"] = "fast"
    """Which solver to use when none is given on the command line. Default: "fast".

    "fast" walks the prefix tree; "slow" tries every arrangement of the query characters
    against a flat word set.
    """

    deterministic: bool = True
    """Whether to print the anagrams of a query in sorted order. Default: True."""

    strip_line_terminator: bool = True
    """Whether to drop the trailing line terminator of each query line. Default: True.

    No other whitespace is removed and no case folding is applied.
    """

    log_to_file: bool = True
    """Whether to write a session log file. Default: True."""

    log_dir: str = "logs"
    """Directory for session log files. Default: "logs"."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="ANAGRAM_",
        extra="forbid",
    )


config = SolverConfig()
