"""Inline commands such as (up), (cap, 2), (hex) and (bin)."""

import re

from .cleaner import clean_text

_COMMAND = re.compile(
    r"\( ?(hex|bin|up|low|cap)(,? (-*\d+)?)?\) *", re.IGNORECASE | re.ASCII
)
_WHITESPACE = r"[\t\n\f\r ]*"
_CONVERSIONS = {
    "hex": (
        re.compile(r"(\w+)" + _WHITESPACE + r"(?i:\(" + _WHITESPACE + "hex" + _WHITESPACE + r"\))", re.ASCII),
        re.compile(r"[0-9a-fA-F]+", re.ASCII),
        16,
    ),
    "bin": (
        re.compile(r"(\w+)" + _WHITESPACE + r"(?i:\(" + _WHITESPACE + "bin" + _WHITESPACE + r"\))", re.ASCII),
        re.compile(r"[01]+"),
        2,
    ),
}
_SIGNED_DIGITS = re.compile(r"-?[0-9]+")
_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)


def _capitalize(word):
    if not word:
        return word
    first, rest = word[0], word[1:].lower()
    if first in "'\"(":
        if len(word) > 1:
            return first + word[1].upper() + rest[1:] + " "
        return first
    return first.upper() + rest + " "


_TRANSFORMS = {
    "low": str.lower,
    "up": str.upper,
    "cap": lambda word: _capitalize(word.lower()),
}


def _parse_amount(digits):
    """Parse a count; malformed text gives 0, overflow saturates."""
    if not _SIGNED_DIGITS.fullmatch(digits):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(digits)))


def _word_spans(text, amount, position):
    """Spans of up to ``amount`` letter runs before ``position``, nearest first."""
    spans = []
    start = position
    while amount > 0:
        start -= 1
        if start < 0:
            break
        while not text[start].isalpha():
            start -= 1
            if start < 0:
                start = 0
                break
        last = start
        while text[start].isalpha():
            start -= 1
            if start < 0:
                break
        spans.append((start + 1, last + 1))
        amount -= 1
    return spans


def _convert_number(text, kind):
    pattern, valid, base = _CONVERSIONS[kind]
    found = pattern.search(text)
    if found is None:
        return text
    digits = found.group(1)
    value = min(int(digits, base), _INT64_MAX) if valid.fullmatch(digits) else 0
    if value == 0 and digits != "0":
        return text
    return text[: found.start(1)] + str(value) + text[found.end(1) :]


def _remove(text, match, replacement=""):
    return text[: match.start()] + replacement + text[match.end() :]


def proceed_commands(text):
    """Apply every inline command in ``text`` and return the result."""
    result = text
    while (match := _COMMAND.search(result)) is not None:
        amount = 1
        if match.group(3):
            amount = _parse_amount(match.group(3))
            if amount <= 0:
                result = _remove(result, match)
                continue
        spans = _word_spans(result, amount, match.start())
        if not spans:
            result = _remove(result, match)
            continue
        kind = match.group(1).lower()
        if kind in _CONVERSIONS:
            result = _convert_number(result, kind)
        else:
            transform = _TRANSFORMS[kind]
            for begin, stop in spans:
                result = result[:begin] + transform(result[begin:stop]) + result[stop:]
        current = _COMMAND.search(result)
        result = _remove(result, current, " ")
        result = clean_text(result)
    return result