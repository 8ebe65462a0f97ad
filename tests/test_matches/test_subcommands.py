import pytest

from argmatches import ArgMatcher, ArgMatches, MatchesBuildError


def build_git_push() -> ArgMatches:
    """git -v push origin path"""
    remote = ArgMatcher()
    remote.inc_occurrence_of("path")
    remote.add_val_to("path", "path")

    push = ArgMatcher()
    push.set_subcommand("origin", remote.build())

    git = ArgMatcher(usage="git [FLAGS] <SUBCOMMAND>")
    git.inc_occurrence_of("verbose")
    git.set_subcommand("push", push.build())
    return git.build()


def test_subcommand_lookup():
    matches = build_git_push()
    assert matches.subcommand_name() == "push"
    push = matches.subcommand_matches("push")
    assert push is not None
    name, sub = matches.subcommand()
    assert name == "push"
    assert sub is push


def test_sibling_subcommands_are_absent():
    matches = build_git_push()
    for sibling in ("clone", "add", "commit", "origin", ""):
        assert matches.subcommand_matches(sibling) is None


def test_presence_includes_active_subcommand_only():
    matches = build_git_push()
    assert matches.is_present("verbose")
    assert matches.is_present("push")
    assert not matches.is_present("clone")
    assert not matches.is_present("origin")
    assert matches.occurrences_of("push") == 0


def test_nested_chain_ends_without_subcommand():
    matches = build_git_push()
    level = matches
    names = []
    while (info := level.subcommand_info) is not None:
        names.append(info.name)
        level = info.matches
    assert names == ["push", "origin"]
    assert level.value_of("path") == "path"
    assert level.subcommand() == ("", None)


def test_parent_and_child_args_are_independent():
    matches = build_git_push()
    push = matches.subcommand_matches("push")
    assert not push.is_present("verbose")
    assert matches.value_of("path") is None


def test_external_subcommand_capture():
    matcher = ArgMatcher()
    matcher.add_external_subcommand("foo", ["--x", "1", "-y"])
    matches = matcher.build()

    name, sub = matches.subcommand()
    assert name == "foo"
    assert sub is not None
    assert list(sub.values_of("")) == ["--x", "1", "-y"]
    assert sub.occurrences_of("") == 3
    assert matches.is_present("foo")


def test_external_subcommand_without_tokens():
    matcher = ArgMatcher()
    sub = matcher.add_external_subcommand("bare", [])
    assert sub.values_of_lossy("") == []
    assert sub.is_present("")


def test_only_one_active_subcommand():
    matcher = ArgMatcher()
    matcher.set_subcommand("first", ArgMatches())
    with pytest.raises(MatchesBuildError):
        matcher.set_subcommand("second", ArgMatches())
    with pytest.raises(MatchesBuildError):
        matcher.add_external_subcommand("third", ["x"])


def test_subcommand_requires_matches():
    with pytest.raises(MatchesBuildError):
        ArgMatcher().set_subcommand("bad", {"not": "matches"})  # type: ignore[arg-type]
