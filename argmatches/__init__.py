"""
argmatches

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg_matcher import ArgMatcher
from .arg_matches import ArgMatches, SubCommand
from .exceptions import (
    ArgMatchesError,
    InvalidUtf8Error,
    MatchesBuildError,
    SnapshotError,
)
from .logger import logger
from .matched_arg import MatchedArg, PendingArg
from .slot_map import RawValueSlotMap
from .values import OsValues, Values

__all__ = [
    "ArgMatcher",
    "ArgMatches",
    "SubCommand",
    "MatchedArg",
    "PendingArg",
    "RawValueSlotMap",
    "Values",
    "OsValues",
    "ArgMatchesError",
    "InvalidUtf8Error",
    "MatchesBuildError",
    "SnapshotError",
    "logger",
]
