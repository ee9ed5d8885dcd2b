"""Command-line entry point: rewrite one text file into another."""

import sys

from .cleaner import clean_text
from .commands import proceed_commands

_USAGE = "there must be exactly 2 inputs (Usage: go run . sample.txt output.txt)"


def procedures(text):
    """Run the full cleaning and command pipeline over ``text``."""
    result = clean_text(text)
    result = proceed_commands(result)
    result = clean_text(result)
    return result.strip()


def _argument_error(args):
    if len(args) != 2:
        return _USAGE
    source, target = args
    if source == target:
        return "file can not be same"
    if not source.endswith(".txt"):
        return "input file is not a .txt file"
    if not target.endswith(".txt"):
        return "output file is not a .txt file"
    return None


def main(argv=None):
    """Read the input file, process it and write the output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    error = _argument_error(args)
    if error is not None:
        print(error)
        return 1
    source, target = args
    try:
        with open(source, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError:
        print("error reading input file")
        return 1
    result = procedures(text)
    try:
        with open(target, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            handle.write(result)
    except OSError:
        print("error writing file")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())