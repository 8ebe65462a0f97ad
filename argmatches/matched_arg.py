# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `MatchedArg`, the record kept for every argument bound during parsing,
and `PendingArg`, its mutable counterpart used while a matcher is still open.

A record pairs the number of times the argument was used on the command line with
the raw values it collected. The two are independent: `-ddd` gives three
occurrences and no values, `-o a b c -o d` gives two occurrences and four values.
"""
from dataclasses import dataclass, field

from argmatches.slot_map import RawValueSlotMap, SlotIter


@dataclass(eq=False)
class PendingArg:
    """Occurrences and values of one argument while parsing is in progress."""

    occurs: int = 0
    vals: RawValueSlotMap = field(default_factory=RawValueSlotMap)

    def freeze(self) -> "MatchedArg":
        return MatchedArg(occurs=self.occurs, vals=self.vals.freeze())


@dataclass(eq=False, frozen=True)
class MatchedArg:
    """
    Occurrence count and raw values of one matched argument.

    Records are read-only: `vals` is a frozen slot map and assigning to either
    field raises `dataclasses.FrozenInstanceError`.

    Attributes:
        occurs (int): Number of times the argument was used.
        vals (RawValueSlotMap): Raw values keyed by binding index.
    """

    occurs: int = 0
    vals: RawValueSlotMap = field(default_factory=RawValueSlotMap)

    def __post_init__(self) -> None:
        if not self.vals.frozen:
            object.__setattr__(self, "vals", self.vals.freeze())

    def values(self) -> SlotIter:
        """Iterate the raw values in binding order."""
        return self.vals.values()

    def first(self) -> bytes | None:
        """Return the earliest bound raw value, if any."""
        return next(self.vals.values(), None)
