"""Whitespace, punctuation, quote and article normalisation."""

import re

_WHITESPACE = r"[\t\n\f\r ]"

_SPACES = re.compile(r" {2,}")
_SINGLE_QUOTE = re.compile(r"' *(([,.;:!?\w]+)( [,.;:!?\w-]+)*) *'", re.ASCII)
_DOUBLE_QUOTE = re.compile(r'" *(([,.;:!?\w]+)( [,.;:!?\w-]+)*) *"', re.ASCII)
_SCOPES = re.compile(r"\( *(([,.;:!?\w]+)( [,.;:!?\w-]+)*) *\)", re.ASCII)
_PUNCTUATIONS = re.compile(r"([\w,.!?;:)']+) ([,.!?;:]+)", re.ASCII)
_PUNCTUATION_AFTER = re.compile(r"([,.:;?!])(\w)", re.ASCII)
_ARTICLES = re.compile(
    r"(([ |\n])?(?:" + _WHITESPACE + r"|^))([aA]) "
    r"""((['"]|\( ?)?([aeiouhAEIOUH]\w+)( ?\)|['")])?)""",
    re.ASCII,
)
_DELIMITER = re.compile(r"""['"(]\w+['")]""", re.ASCII)
_EMPTY_DELIMITERS = re.compile("''|\"\"")
_NEW_LINE = re.compile(r"(\n) +")

# Words that follow an article but belong to a pending command.
_COMMAND_WORDS = ("hex", "up")


def clean_text(text):
    """Normalise spacing, punctuation, quotes and 'a'/'an' articles."""
    result = _delete_spaces(text)
    result = _correct_punctuation(result)
    result = _wrap(_SINGLE_QUOTE, "'", "'", result)
    result = _wrap(_DOUBLE_QUOTE, '"', '"', result)
    result = _wrap(_SCOPES, "(", ")", result)
    result = _correct_punctuation(result)
    result = _DELIMITER.sub(lambda m: f" {m.group(0)} ", result)
    result = _EMPTY_DELIMITERS.sub(lambda m: f" {m.group(0)} ", result)
    result = _delete_spaces(result)
    result = _ARTICLES.sub(_fix_article, result)
    return _NEW_LINE.sub("\n", result)


def _delete_spaces(text):
    return _SPACES.sub(" ", text)


def _wrap(pattern, opening, closing, text):
    return pattern.sub(lambda m: f"{opening}{m.group(1)}{closing}", text)


def _correct_punctuation(text):
    result = _PUNCTUATIONS.sub(lambda m: m.group(1) + m.group(2), text)
    return _PUNCTUATION_AFTER.sub(lambda m: f"{m.group(1)} {m.group(2)}", result)


def _fix_article(match):
    if match.group(6) in _COMMAND_WORDS:
        return match.group(0)
    article = "An" if match.group(3) == "A" else "an"
    return f"{match.group(1)}{article} {match.group(4)}"