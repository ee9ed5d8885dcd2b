import pytest

from textreload.cleaner import clean_text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Elton       John", "Elton John"),
        (" wanna      chose", "wanna chose"),
        (
            "Punctuation tests are ... kinda boring ,what do you think ?",
            "Punctuation tests are... kinda boring, what do you think?",
        ),
        ("I was thinking . . . You were right", "I was thinking... You were right"),
        ("a apple", "an apple"),
        ("a hour", "an hour"),
        ("There it was. A amazing rock!", "There it was. An amazing rock!"),
        ("hi ' hi ' hi", "hi 'hi' hi"),
        ("hi'hi' hi", "hi 'hi' hi"),
        ("Hello:world.How:are you?", "Hello: world. How: are you?"),
        (
            "I am exactly how they describe me: ' awesome '",
            "I am exactly how they describe me: 'awesome'",
        ),
    ],
)
def test_clean_text_cases(text, expected):
    assert clean_text(text).strip() == expected


def test_article_fix_needs_a_second_pass_for_chained_articles():
    once = clean_text("A a apple")
    assert once == "A an apple"
    assert clean_text(once) == "An an apple"


def test_article_before_command_is_left_alone():
    assert clean_text("a (hex)").strip() == "a (hex)"


def test_spaces_after_newline_are_removed():
    assert clean_text("line\n   next") == "line\nnext"


@pytest.mark.parametrize(
    "text",
    [
        "word!     !!!  ....   ,,,  ???     :::;;;       :",
        "x   y    z",
        "harold wilson : ' I am a optimist ,but a optimist . '",
    ],
)
def test_no_double_spaces_remain(text):
    assert "  " not in clean_text(text)


@pytest.mark.parametrize(
    "text",
    ["Elton John", "an apple", "hi 'hi' hi", "Hello: world. How: are you?"],
)
def test_clean_text_leaves_clean_text_unchanged(text):
    assert clean_text(text) == text