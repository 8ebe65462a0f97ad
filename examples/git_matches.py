"""
Builds the matches a parser would produce for

    git -vv push --force origin main

and walks them the way application code would.
"""
import logging

from argmatches import ArgMatcher
from argmatches.utils import setup_logging

setup_logging(console_log_level=logging.DEBUG)

push = ArgMatcher(usage="git push [FLAGS] <remote> <branch>")
push.inc_occurrence_of("force")
push.inc_occurrence_of("remote")
push.add_val_to("remote", "origin")
push.inc_occurrence_of("branch")
push.add_val_to("branch", "main")

git = ArgMatcher(usage="git [FLAGS] <SUBCOMMAND>")
git.inc_occurrence_of("verbose")
git.inc_occurrence_of("verbose")
git.set_subcommand("push", push.build())
matches = git.build()

if __name__ == "__main__":
    print(f"verbosity: {matches.occurrences_of('verbose')}")
    match matches.subcommand():
        case ("push", sub_matches) if sub_matches is not None:
            print(f"pushing {sub_matches.value_of('branch')} to {sub_matches.value_of('remote')}")
            print(f"force: {sub_matches.is_present('force')}")
        case ("", None):
            print("no subcommand")
    matches.render()
