# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders `ArgMatches` as a rich `Tree` for debugging and the `inspect` command.

Each matched argument becomes a node showing its occurrence count, with one child
per value (decoded lossily, so invalid bytes show as U+FFFD). The active
subcommand is added as a branch holding its own matches, recursively.

Functions:
- build_matches_tree(matches, title): Returns a `rich.tree.Tree` of the matches.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.tree import Tree

from argmatches.arg_matcher import EXTERNAL_SUBCOMMAND_ARG
from argmatches.values import decode_lossy

if TYPE_CHECKING:
    from argmatches.arg_matches import ArgMatches


def _add_matches(node: Tree, matches: ArgMatches) -> None:
    if matches.usage():
        node.add(f"[matches.dim]usage: {escape(matches.usage())}[/]")

    for name, arg in matches.args.items():
        if name == EXTERNAL_SUBCOMMAND_ARG:
            label = "[matches.external]<external args>[/]"
        else:
            label = f"[matches.arg]{escape(name)}[/]"
        branch = node.add(f"{label} [matches.count]x{arg.occurs}[/]")
        for value in arg.values():
            branch.add(f"[matches.value]{escape(decode_lossy(value))}[/]")

    name, sub_matches = matches.subcommand()
    if sub_matches is not None:
        sub_node = node.add(f"[matches.subcommand]{escape(name)}[/]")
        _add_matches(sub_node, sub_matches)


def build_matches_tree(matches: ArgMatches, title: str = "matches") -> Tree:
    """Build a tree of arguments, values and nested subcommands."""
    tree = Tree(f"[matches.title]{escape(title)}[/]", guide_style="matches.dim")
    _add_matches(tree, matches)
    if not matches.args and matches.subcommand_info is None:
        tree.add("[matches.dim](no arguments matched)[/]")
    return tree
