import pytest

from argmatches import ArgMatcher, ArgMatches, InvalidUtf8Error


@pytest.fixture
def matches() -> ArgMatches:
    matcher = ArgMatcher(usage="myprog [FLAGS] [OPTIONS] <output>")
    for _ in range(3):
        matcher.inc_occurrence_of("debug")
    matcher.inc_occurrence_of("output")
    matcher.add_val_to("output", "something")
    matcher.inc_occurrence_of("file")
    for value in ("val1", "val2", "val3"):
        matcher.add_val_to("file", value)
    return matcher.build()


def test_flag_counts_without_values(matches):
    """`-ddd` gives three occurrences and an empty but present value list."""
    assert matches.occurrences_of("debug") == 3
    values = matches.values_of("debug")
    assert values is not None
    assert list(values) == []
    assert matches.values_of_lossy("debug") == []
    assert list(matches.values_of_os("debug")) == []
    assert matches.value_of("debug") is None


def test_single_value(matches):
    assert matches.value_of("output") == "something"
    assert matches.value_of_lossy("output") == "something"
    assert matches.value_of_os("output") == b"something"


def test_missing_argument(matches):
    assert matches.value_of("missing") is None
    assert matches.value_of_lossy("missing") is None
    assert matches.value_of_os("missing") is None
    assert matches.values_of("missing") is None
    assert matches.values_of_lossy("missing") is None
    assert matches.values_of_os("missing") is None
    assert matches.occurrences_of("missing") == 0
    assert matches.is_present("missing") is False


def test_values_in_binding_order(matches):
    assert list(matches.values_of("file")) == ["val1", "val2", "val3"]
    assert matches.values_of_lossy("file") == ["val1", "val2", "val3"]
    assert list(matches.values_of_os("file")) == [b"val1", b"val2", b"val3"]


def test_value_of_returns_first_bound_value(matches):
    assert matches.value_of("file") == "val1"
    assert matches.value_of_os("file") == b"val1"


def test_values_are_double_ended(matches):
    values = matches.values_of("file")
    assert values.next_back() == "val3"
    assert next(values) == "val1"
    assert list(values) == ["val2"]
    assert values.next_back() is None

    forward = list(matches.values_of("file"))
    backward = list(reversed(matches.values_of("file")))
    assert forward == backward[::-1]


def test_occurrences_independent_of_values():
    """`-o a b c -o d` is two occurrences and four values."""
    matcher = ArgMatcher()
    matcher.inc_occurrence_of("o")
    for value in ("a", "b", "c"):
        matcher.add_val_to("o", value)
    matcher.inc_occurrence_of("o")
    matcher.add_val_to("o", "d")
    matches = matcher.build()
    assert matches.occurrences_of("o") == 2
    assert list(matches.values_of("o")) == ["a", "b", "c", "d"]


def test_invalid_utf8_strict_vs_lossy():
    matcher = ArgMatcher()
    matcher.inc_occurrence_of("output")
    matcher.add_val_to("output", b"val1")
    matcher.add_val_to("output", b"\xe9!")
    matches = matcher.build()

    values = matches.values_of("output")
    assert next(values) == "val1"
    with pytest.raises(InvalidUtf8Error) as exc_info:
        next(values)
    assert exc_info.value.name == "output"
    assert exc_info.value.value == b"\xe9!"
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    assert matches.values_of_lossy("output") == ["val1", "�!"]
    assert list(matches.values_of_os("output")) == [b"val1", b"\xe9!"]


def test_invalid_utf8_single_value():
    matcher = ArgMatcher()
    matcher.add_val_to("arg", b"Hi \xe9!")
    matches = matcher.build()
    with pytest.raises(InvalidUtf8Error):
        matches.value_of("arg")
    assert matches.value_of_lossy("arg") == "Hi �!"
    assert matches.value_of_os("arg") == b"Hi \xe9!"


def test_invalid_utf8_is_not_an_exception():
    """Generic `except Exception` handlers do not swallow strict decode failures."""
    assert not issubclass(InvalidUtf8Error, Exception)
    assert issubclass(InvalidUtf8Error, BaseException)


def test_invalid_utf8_from_back():
    matcher = ArgMatcher()
    matcher.add_val_to("arg", b"ok")
    matcher.add_val_to("arg", b"\xff")
    values = matcher.build().values_of("arg")
    with pytest.raises(InvalidUtf8Error):
        values.next_back()


def test_lossy_matches_strict_on_valid_text():
    matcher = ArgMatcher()
    for value in ("plain", "ünïcødé", "日本語", ""):
        matcher.add_val_to("text", value)
    matches = matcher.build()
    strict = list(matches.values_of("text"))
    assert matches.values_of_lossy("text") == strict
    assert matches.value_of_lossy("text") == matches.value_of("text")


def test_surrogate_escaped_str_keeps_original_bytes():
    """Values taken from sys.argv keep the bytes they were given as."""
    matcher = ArgMatcher()
    matcher.add_val_to("path", b"caf\xe9".decode("utf-8", "surrogateescape"))
    matches = matcher.build()
    assert matches.value_of_os("path") == b"caf\xe9"


def test_usage():
    assert ArgMatches(usage="myprog <x>").usage() == "myprog <x>"
    assert ArgMatches().usage() == ""


def test_empty_matches():
    matches = ArgMatches()
    assert matches.subcommand() == ("", None)
    assert matches.subcommand_name() is None
    assert matches.args == {}


def test_args_are_read_only(matches):
    with pytest.raises(TypeError):
        matches.args["new"] = matches.args["debug"]  # type: ignore[index]


def test_contains_and_repr(matches):
    assert "debug" in matches
    assert "missing" not in matches
    assert 1 not in matches
    assert (
        repr(matches)
        == "ArgMatches(args=3, subcommand=None, usage='myprog [FLAGS] [OPTIONS] <output>')"
    )


def test_to_dict(matches):
    data = matches.to_dict()
    assert data["args"]["debug"] == {"occurrences": 3, "values": []}
    assert data["args"]["file"]["values"] == ["val1", "val2", "val3"]
    assert data["subcommand"] is None
    assert data["usage"] == "myprog [FLAGS] [OPTIONS] <output>"
