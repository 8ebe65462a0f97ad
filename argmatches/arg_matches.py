# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgMatches`, the read-only store handed to application
code once the command line has been parsed, and `SubCommand`, the link from one
store to the store of the subcommand that was selected beneath it.

An `ArgMatches` holds one `MatchedArg` per argument name that was bound, at most
one active subcommand, and the usage string of the command it belongs to. Stores
nest: every subcommand carries its own `ArgMatches`, and the chain ends at a store
without an active subcommand.

Reading values:
- `value_of()` / `values_of()`: validated text. Raise `InvalidUtf8Error` when a
  value is not valid UTF-8.
- `value_of_lossy()` / `values_of_lossy()`: text with invalid sequences replaced
  by U+FFFD. Never fail.
- `value_of_os()` / `values_of_os()`: raw `bytes`. Never fail.

The `value_of*` accessors return the *first* bound value; use the `values_of*`
accessors for arguments that repeat. Unbound arguments always read back as
`None`, never as a default.

Example:
    matcher = ArgMatcher()
    matcher.inc_occurrence_of("debug")
    matcher.inc_occurrence_of("output")
    matcher.add_val_to("output", "out.txt")
    matches = matcher.build()

    matches.value_of("output")        # "out.txt"
    matches.occurrences_of("debug")   # 1
    matches.is_present("missing")     # False

External subcommands:
    When a program accepts subcommands it does not know about, the subcommand's
    name is reported as given and its trailing tokens are stored as values of the
    argument named "" in the subcommand's own store:

    name, sub_matches = matches.subcommand()
    list(sub_matches.values_of(""))   # ["--option", "value", "-fff"]
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from argmatches.matched_arg import MatchedArg
from argmatches.values import OsValues, Values, decode_lossy, decode_strict

if TYPE_CHECKING:
    from rich.console import Console
    from rich.tree import Tree


@dataclass(frozen=True)
class SubCommand:
    """The subcommand selected at one level, and the matches it produced."""

    name: str
    matches: ArgMatches


class ArgMatches:
    """
    Matches for one command: bound arguments, active subcommand and usage.

    Instances are built by `ArgMatcher` (or directly by a parser) and never
    change afterwards, so they can be shared freely between threads for reading.

    Attributes:
        args (Mapping[str, MatchedArg]): Read-only view of the bound arguments.
        subcommand_info (SubCommand | None): The active subcommand, if any.
    """

    __slots__ = ("_args", "_subcommand", "_usage")

    def __init__(
        self,
        args: Mapping[str, MatchedArg] | None = None,
        subcommand: SubCommand | None = None,
        usage: str | None = None,
    ) -> None:
        self._args: Mapping[str, MatchedArg] = MappingProxyType(
            {
                name: (
                    arg if isinstance(arg, MatchedArg) else MatchedArg(arg.occurs, arg.vals)
                )
                for name, arg in (args or {}).items()
            }
        )
        self._subcommand: SubCommand | None = subcommand
        self._usage: str | None = usage

    @property
    def args(self) -> Mapping[str, MatchedArg]:
        return self._args

    @property
    def subcommand_info(self) -> SubCommand | None:
        return self._subcommand

    def value_of(self, name: str) -> str | None:
        """
        Get the first value of an argument as validated text.

        Args:
            name (str): The argument name.

        Returns:
            str | None: The first bound value, or None if the argument was not
            matched or took no value.

        Raises:
            InvalidUtf8Error: If the value is not valid UTF-8.
        """
        arg = self._args.get(name)
        if arg is not None:
            value = arg.first()
            if value is not None:
                return decode_strict(name, value)
        return None

    def value_of_lossy(self, name: str) -> str | None:
        """Get the first value of an argument, replacing invalid UTF-8 with U+FFFD."""
        arg = self._args.get(name)
        if arg is not None:
            value = arg.first()
            if value is not None:
                return decode_lossy(value)
        return None

    def value_of_os(self, name: str) -> bytes | None:
        """Get the first value of an argument as raw bytes."""
        arg = self._args.get(name)
        if arg is None:
            return None
        return arg.first()

    def values_of(self, name: str) -> Values | None:
        """
        Get a lazy iterator over the values of an argument as validated text.

        The iterator is double ended: `next_back()` and `reversed()` walk from the
        last value. An argument matched without values gives an empty iterator,
        an unmatched argument gives None.

        Raises:
            InvalidUtf8Error: From the iterator, when an invalid value is pulled.
        """
        arg = self._args.get(name)
        if arg is None:
            return None
        return Values(name, arg.values())

    def values_of_lossy(self, name: str) -> list[str] | None:
        """Get every value of an argument, replacing invalid UTF-8 with U+FFFD."""
        arg = self._args.get(name)
        if arg is None:
            return None
        return [decode_lossy(value) for value in arg.values()]

    def values_of_os(self, name: str) -> OsValues | None:
        """Get a lazy, double-ended iterator over the raw values of an argument."""
        arg = self._args.get(name)
        if arg is None:
            return None
        return OsValues(name, arg.values())

    def is_present(self, name: str) -> bool:
        """
        Return True if the argument was matched, or if `name` is the active
        subcommand.
        """
        if self._subcommand is not None and self._subcommand.name == name:
            return True
        return name in self._args

    def occurrences_of(self, name: str) -> int:
        """
        Return how many times an argument was used, or 0 if it was not.

        This counts uses, not values: `-o a b c -o d` is 2 occurrences.
        """
        arg = self._args.get(name)
        return arg.occurs if arg is not None else 0

    def subcommand_matches(self, name: str) -> ArgMatches | None:
        """Return the matches of subcommand `name` if it is the active one."""
        if self._subcommand is not None and self._subcommand.name == name:
            return self._subcommand.matches
        return None

    def subcommand_name(self) -> str | None:
        """Return the name of the active subcommand, if any."""
        if self._subcommand is None:
            return None
        return self._subcommand.name

    def subcommand(self) -> tuple[str, ArgMatches | None]:
        """
        Return `(name, matches)` for the active subcommand.

        When no subcommand was used this is `("", None)`.
        """
        if self._subcommand is None:
            return "", None
        return self._subcommand.name, self._subcommand.matches

    def usage(self) -> str:
        """Return the usage string recorded for this command, or ""."""
        return self._usage or ""

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the matches, with values decoded lossily."""
        data: dict[str, Any] = {
            "args": {
                name: {
                    "occurrences": arg.occurs,
                    "values": [decode_lossy(value) for value in arg.values()],
                }
                for name, arg in self._args.items()
            },
            "subcommand": None,
            "usage": self._usage,
        }
        if self._subcommand is not None:
            data["subcommand"] = {
                "name": self._subcommand.name,
                "matches": self._subcommand.matches.to_dict(),
            }
        return data

    def render(self, console: Console | None = None) -> None:
        """Print the matches as a tree on the given or shared console."""
        from argmatches.console import console as default_console

        (console or default_console).print(self.__rich__())

    def __rich__(self) -> Tree:
        from argmatches.render import build_matches_tree

        return build_matches_tree(self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_present(name)

    def __repr__(self) -> str:
        return (
            f"ArgMatches(args={len(self._args)}, "
            f"subcommand={self.subcommand_name()!r}, "
            f"usage={self._usage!r})"
        )
