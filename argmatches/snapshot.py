# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declarative snapshots of `ArgMatches`, loaded from and dumped to YAML or TOML.

A snapshot records what a parser produced for one command line, which makes it
easy to replay matches in tests or to inspect them from the command line:

    usage: "myprog [FLAGS] <SUBCOMMAND>"
    args:
      debug:
        occurrences: 3
      output:
        values: ["val1", "val2"]
    subcommand:
      name: test
      matches:
        args:
          opt:
            values: ["val"]

When `occurrences` is left out it defaults to the number of values, or 1 for an
argument without values. A value that is not valid UTF-8 is written as a mapping
with its bytes in hex, e.g. `{hex: "636166e9"}` for b"caf\xe9".

TOML cannot mix strings and tables in one array, and an external subcommand
stores its tokens under the empty name "", which TOML cannot use as a table
name. TOML snapshots therefore list arguments as `[[args]]` tables carrying
their name, and an argument holding any invalid UTF-8 lists all its values
in hex:

    [[args]]
    name = "output"
    occurrences = 2
    hex = ["6f6b", "636166e9"]

Both layouts are accepted by `load_snapshot` whatever the file format.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from argmatches.arg_matcher import ArgMatcher
from argmatches.arg_matches import ArgMatches
from argmatches.exceptions import SnapshotError
from argmatches.logger import logger

MAX_SUBCOMMAND_DEPTH = 32


class RawValueSnapshot(BaseModel):
    """A value that is not valid UTF-8, kept as hex."""

    hex: str

    @field_validator("hex")
    @classmethod
    def validate_hex(cls, value: str) -> str:
        try:
            bytes.fromhex(value)
        except ValueError as error:
            raise ValueError(f"invalid hex value: {value!r}") from error
        return value


def encode_snapshot_value(value: str | RawValueSnapshot) -> bytes:
    if isinstance(value, RawValueSnapshot):
        return bytes.fromhex(value.hex)
    return value.encode("utf-8")


def decode_snapshot_value(value: bytes) -> str | RawValueSnapshot:
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError:
        return RawValueSnapshot(hex=value.hex())


def args_from_tables(tables: list[Any]) -> dict[str, Any]:
    """Turn `[[args]]` tables into the `name -> arg` mapping."""
    args: dict[str, Any] = {}
    for table in tables:
        if not isinstance(table, dict) or not isinstance(table.get("name"), str):
            raise ValueError("each args table needs a string 'name'")
        name = table["name"]
        if name in args:
            raise ValueError(f"argument {name!r} is listed more than once")
        arg = {key: value for key, value in table.items() if key != "name"}
        if "hex" in arg:
            if "values" in arg:
                raise ValueError(f"argument {name!r} sets both 'values' and 'hex'")
            hex_values = arg.pop("hex")
            if not isinstance(hex_values, list):
                raise ValueError(f"'hex' of argument {name!r} must be a list")
            arg["values"] = [{"hex": value} for value in hex_values]
        args[name] = arg
    return args


def to_toml_data(data: dict[str, Any]) -> dict[str, Any]:
    """Reshape a dumped `MatchesSnapshot` into the `[[args]]` table layout."""
    toml_data: dict[str, Any] = {}
    if "usage" in data:
        toml_data["usage"] = data["usage"]
    tables = []
    for name, arg in data.get("args", {}).items():
        table: dict[str, Any] = {"name": name, "occurrences": arg["occurrences"]}
        values = arg.get("values", [])
        if any(isinstance(value, dict) for value in values):
            table["hex"] = [
                value["hex"] if isinstance(value, dict) else value.encode("utf-8").hex()
                for value in values
            ]
        elif values:
            table["values"] = values
        tables.append(table)
    if tables:
        toml_data["args"] = tables
    subcommand = data.get("subcommand")
    if subcommand is not None:
        toml_data["subcommand"] = {
            "name": subcommand["name"],
            "matches": to_toml_data(subcommand["matches"]),
        }
    return toml_data


class ArgSnapshot(BaseModel):
    """Occurrences and values recorded for one argument."""

    occurrences: int | None = Field(default=None, ge=0)
    values: list[str | RawValueSnapshot] = Field(default_factory=list)

    @model_validator(mode="after")
    def default_occurrences(self) -> ArgSnapshot:
        if self.occurrences is None:
            self.occurrences = max(1, len(self.values))
        return self


class SubCommandSnapshot(BaseModel):
    """The active subcommand and its own snapshot."""

    name: str
    matches: MatchesSnapshot


class MatchesSnapshot(BaseModel):
    """Snapshot of one `ArgMatches` level."""

    args: dict[str, ArgSnapshot] = Field(default_factory=dict)
    subcommand: SubCommandSnapshot | None = None
    usage: str | None = None

    @model_validator(mode="before")
    @classmethod
    def accept_arg_tables(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("args"), list):
            data = {**data, "args": args_from_tables(data["args"])}
        return data

    def to_matches(self, _depth: int = 0) -> ArgMatches:
        """Rebuild the `ArgMatches` this snapshot describes."""
        if _depth > MAX_SUBCOMMAND_DEPTH:
            raise SnapshotError(
                f"Maximum subcommand depth exceeded ({MAX_SUBCOMMAND_DEPTH} levels deep)"
            )
        matcher = ArgMatcher(usage=self.usage)
        for name, arg in self.args.items():
            record = matcher.insert(name)
            record.occurs = arg.occurrences or 0
            for value in arg.values:
                matcher.add_val_to(name, encode_snapshot_value(value))
        if self.subcommand is not None:
            matcher.set_subcommand(
                self.subcommand.name,
                self.subcommand.matches.to_matches(_depth=_depth + 1),
            )
        return matcher.build()

    @classmethod
    def from_matches(cls, matches: ArgMatches) -> MatchesSnapshot:
        """Capture `matches` as a snapshot, keeping invalid UTF-8 as hex."""
        args = {
            name: ArgSnapshot(
                occurrences=arg.occurs,
                values=[decode_snapshot_value(value) for value in arg.values()],
            )
            for name, arg in matches.args.items()
        }
        subcommand = None
        name, sub_matches = matches.subcommand()
        if sub_matches is not None:
            subcommand = SubCommandSnapshot(
                name=name, matches=cls.from_matches(sub_matches)
            )
        return cls(
            args=args,
            subcommand=subcommand,
            usage=matches.usage() or None,
        )


SubCommandSnapshot.model_rebuild()


def load_snapshot(file_path: Path | str) -> ArgMatches:
    """
    Load `ArgMatches` from a YAML or TOML snapshot file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        ArgMatches: The matches described by the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        SnapshotError: If the format is unsupported or the content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such snapshot file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as snapshot_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_snapshot = yaml.safe_load(snapshot_file)
            elif suffix == ".toml":
                raw_snapshot = toml.load(snapshot_file)
            else:
                raise SnapshotError(f"Unsupported snapshot format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            logger.error("Failed to parse snapshot '%s': %s", path, error)
            raise SnapshotError(f"Could not parse snapshot '{path}': {error}") from error

    if raw_snapshot is None:
        raw_snapshot = {}
    if not isinstance(raw_snapshot, dict):
        raise SnapshotError(
            "Snapshot file must contain a mapping.\n"
            "Example:\n"
            "args:\n"
            "  output:\n"
            "    values: ['out.txt']"
        )

    try:
        snapshot = MatchesSnapshot.model_validate(raw_snapshot)
    except ValidationError as error:
        logger.error("Invalid snapshot '%s': %s", path, error)
        raise SnapshotError(f"Invalid snapshot '{path}':\n{error}") from error

    logger.debug("Loaded snapshot from '%s'", path)
    return snapshot.to_matches()


def dump_snapshot(matches: ArgMatches, file_path: Path | str) -> Path:
    """Write `matches` to a YAML or TOML snapshot file and return its path."""
    path = Path(file_path)
    if path.suffix not in (".yaml", ".yml", ".toml"):
        raise SnapshotError(f"Unsupported snapshot format: {path.suffix}")

    data = MatchesSnapshot.from_matches(matches).model_dump(exclude_none=True)
    with path.open("w", encoding="UTF-8") as snapshot_file:
        if path.suffix == ".toml":
            toml.dump(to_toml_data(data), snapshot_file)
        else:
            yaml.safe_dump(data, snapshot_file, sort_keys=False)
    logger.debug("Dumped snapshot to '%s'", path)
    return path
