# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `ArgMatcher`, the producer-side builder for `ArgMatches`.

A parser feeds the matcher as it binds tokens: every use of an argument bumps its
occurrence count, every value it takes is appended in binding order. Once parsing
is complete `build()` hands out the finished `ArgMatches`, after which the matcher
refuses further changes.

Subcommands are built with their own matcher and linked with `set_subcommand()`,
innermost first. Unknown subcommands accepted by a permissive parser are linked
with `add_external_subcommand()`, which stores their trailing tokens under the
argument name "".

Example:
    sub = ArgMatcher()
    sub.inc_occurrence_of("opt")
    sub.add_val_to("opt", "val")

    matcher = ArgMatcher(usage="myprog [FLAGS] [SUBCOMMAND]")
    for _ in range(3):
        matcher.inc_occurrence_of("debug")
    matcher.set_subcommand("test", sub.build())
    matches = matcher.build()
"""
from __future__ import annotations

from typing import Iterable

from argmatches.arg_matches import ArgMatches, SubCommand
from argmatches.exceptions import MatchesBuildError
from argmatches.logger import logger
from argmatches.matched_arg import PendingArg
from argmatches.values import to_raw

EXTERNAL_SUBCOMMAND_ARG = ""


class ArgMatcher:
    """
    Collects matched arguments while a command line is being parsed.

    Features:
    - Occurrence counting independent of value counts.
    - Values kept in binding order, raw bytes preserved.
    - A single active subcommand per level.
    - External subcommand capture under the "" argument.
    """

    def __init__(self, usage: str | None = None) -> None:
        self._args: dict[str, PendingArg] = {}
        self._subcommand: SubCommand | None = None
        self._usage: str | None = usage
        self._built: bool = False

    def _check_open(self) -> None:
        if self._built:
            raise MatchesBuildError("ArgMatcher has already been built")

    def insert(self, name: str) -> PendingArg:
        """Ensure a pending record exists for `name` and return it."""
        self._check_open()
        arg = self._args.get(name)
        if arg is None:
            arg = self._args[name] = PendingArg()
        return arg

    def inc_occurrence_of(self, name: str) -> None:
        """Record one more use of `name`."""
        self.insert(name).occurs += 1

    def add_val_to(self, name: str, value: str | bytes) -> int:
        """Append `value` to the values of `name`; returns its binding index."""
        return self.insert(name).vals.push(to_raw(value))

    def add_index_to(self, name: str, index: int, value: str | bytes) -> None:
        """Place `value` at an explicit binding index for `name`."""
        try:
            self.insert(name).vals.insert(index, to_raw(value))
        except ValueError as error:
            raise MatchesBuildError(f"Invalid index for '{name}': {error}") from error

    def contains(self, name: str) -> bool:
        return name in self._args

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def get(self, name: str) -> PendingArg | None:
        self._check_open()
        return self._args.get(name)

    def set_usage(self, usage: str) -> None:
        self._check_open()
        self._usage = usage

    def set_subcommand(self, name: str, matches: ArgMatches) -> None:
        """
        Link the active subcommand.

        Raises:
            MatchesBuildError: If a subcommand is already linked at this level.
        """
        self._check_open()
        if not isinstance(matches, ArgMatches):
            raise MatchesBuildError(
                f"Subcommand '{name}' must be linked to ArgMatches, "
                f"got '{type(matches).__name__}'"
            )
        if self._subcommand is not None:
            raise MatchesBuildError(
                f"Cannot activate subcommand '{name}': "
                f"'{self._subcommand.name}' is already active"
            )
        logger.debug("Linking subcommand '%s'", name)
        self._subcommand = SubCommand(name=name, matches=matches)

    def add_external_subcommand(
        self, name: str, tokens: Iterable[str | bytes]
    ) -> ArgMatches:
        """
        Link an external subcommand, capturing `tokens` verbatim.

        Each token becomes one value (and one occurrence) of the "" argument in
        the subcommand's own matches. Returns those matches.
        """
        self._check_open()
        external = ArgMatcher()
        external.insert(EXTERNAL_SUBCOMMAND_ARG)
        for token in tokens:
            external.inc_occurrence_of(EXTERNAL_SUBCOMMAND_ARG)
            external.add_val_to(EXTERNAL_SUBCOMMAND_ARG, token)
        matches = external.build()
        logger.debug(
            "Captured external subcommand '%s' with %d token(s)",
            name,
            matches.occurrences_of(EXTERNAL_SUBCOMMAND_ARG),
        )
        self.set_subcommand(name, matches)
        return matches

    def build(self) -> ArgMatches:
        """
        Finish building and return the matches; the matcher is closed after.

        Pending records are frozen into read-only `MatchedArg` copies, so the
        returned matches do not change if the pending records are touched later.
        """
        self._check_open()
        self._built = True
        matches = ArgMatches(
            args={name: arg.freeze() for name, arg in self._args.items()},
            subcommand=self._subcommand,
            usage=self._usage,
        )
        logger.debug(
            "Built matches: %d argument(s), subcommand=%s",
            len(self._args),
            self._subcommand.name if self._subcommand else None,
        )
        return matches

    def __str__(self) -> str:
        subcommand = self._subcommand.name if self._subcommand else None
        return (
            f"ArgMatcher(args={len(self._args)}, "
            f"subcommand={subcommand!r}, "
            f"built={self._built})"
        )

    def __repr__(self) -> str:
        return str(self)
