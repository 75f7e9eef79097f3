"""Movie title normalization for showtime matching.

Partners spell the same title many ways: "DUNE PART 2" vs "Dune: Part Two",
"Spider-Man: Homecoming" vs "Spider Man - Homecoming". The normalized form
is only ever used to build match keys; the title stored on a record is the
text the partner sent.
"""

import re

_NUMBER_WORDS: dict[str, str] = {
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
    "ten": "10",
}

_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """Reduce a title to its matching form.

    Lowercases, turns punctuation into spaces (so "Spider-Man" becomes two
    words, not "spiderman"), collapses whitespace and spells number words
    one through ten as digits.
    """
    normalized = title.lower()
    normalized = _PUNCTUATION_RE.sub(" ", normalized)
    normalized = _WHITESPACE_RE.sub(" ", normalized).strip()
    return " ".join(_NUMBER_WORDS.get(word, word) for word in normalized.split(" "))
