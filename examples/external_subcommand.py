"""
Captures an unknown subcommand verbatim, the way `cargo foo --x 1 -y` hands
everything after `foo` to an external `cargo-foo` binary.
"""
import sys

from argmatches import ArgMatcher


def capture(argv: list[str]):
    matcher = ArgMatcher()
    if argv:
        matcher.add_external_subcommand(argv[0], argv[1:])
    return matcher.build()


if __name__ == "__main__":
    matches = capture(sys.argv[1:] or ["foo", "--x", "1", "-y"])
    name, sub_matches = matches.subcommand()
    if sub_matches is None:
        print("no external subcommand")
    else:
        print(f"external: {name}")
        # raw bytes survive even when the tokens are not valid UTF-8
        for token in sub_matches.values_of_os(""):
            print(f"  {token!r}")
