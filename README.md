# textreload

`textreload` reads a text file, tidies it up and writes the corrected text to
another file.

## What it fixes

- Runs of spaces are collapsed into one, spaces at the start of lines are
  dropped, and leading and trailing whitespace is trimmed.
- Punctuation (`, . ! ? : ;`) sticks to the word before it and is followed by a
  space: `boring ,what do you think ?` becomes `boring, what do you think?`.
- Groups such as `...` or `!?` stay together.
- Text inside single quotes, double quotes and parentheses loses its inner
  padding: `' awesome '` becomes `'awesome'`.
- `a` before a word starting with a vowel or `h` becomes `an` (`A` becomes `An`):
  `a untold story` becomes `an untold story`.

## Inline commands

A command in parentheses changes the word or words before it and is then
removed:

| Command       | Effect                                                    |
|---------------|-----------------------------------------------------------|
| `(hex)`       | replaces the previous word, read as hexadecimal, with its decimal value |
| `(bin)`       | replaces the previous word, read as binary, with its decimal value      |
| `(up)`        | upper-cases the previous word                             |
| `(low)`       | lower-cases the previous word                             |
| `(cap)`       | capitalises the previous word                             |
| `(up, N)`, `(low, N)`, `(cap, N)` | apply to the previous `N` words      |

Command names are case-insensitive. A count of zero or less removes the command
without changing anything. A word that is not a valid hexadecimal or binary
number is left as it is by `(hex)` and `(bin)`.

Examples:

```
Simply add 42 (hex) and 10 (bin)   ->  Simply add 66 and 2
This is so exciting . (up, 2)      ->  This is SO EXCITING.
Welcome to the Brooklyn bridge (cap)  ->  Welcome to the Brooklyn Bridge
```

## Command line

```
textreload sample.txt result.txt
```

Both files must end in `.txt` and must differ. If the arguments are wrong or
the input file cannot be read, a message is printed, nothing is written and the
command exits with status 1; a failure to write the output file is reported the
same way.

## Library use

```python
from textreload.cli import procedures

procedures("There it was. A amazing rock!")
# 'There it was. An amazing rock!'
```

`textreload.cli.main(argv=None)` runs the command line with the given argument
list (without the program name) and returns the exit status.

The steps are also available on their own: `textreload.cleaner.clean_text`
applies only the spacing, punctuation, quote and article fixes, and
`textreload.commands.proceed_commands` applies only the inline commands.

## Running the tests

```
pip install -e ".[test]"
pytest
```