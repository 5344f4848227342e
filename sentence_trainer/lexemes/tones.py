"""
Pinyin tone helpers.

Converts numbered pinyin (ni3hao3) to tone marks (nǐhǎo) and strips tone
marks for tone-insensitive comparison.
"""

from __future__ import annotations

import re


# Tone 1-4 forms for every vowel that can carry a mark
TONE_MARKS = {
    "a": "āáǎà",
    "e": "ēéěè",
    "i": "īíǐì",
    "o": "ōóǒò",
    "u": "ūúǔù",
    "ü": "ǖǘǚǜ",
    "A": "ĀÁǍÀ",
    "E": "ĒÉĚÈ",
    "I": "ĪÍǏÌ",
    "O": "ŌÓǑÒ",
    "U": "ŪÚǓÙ",
    "Ü": "ǕǗǙǛ",
}

_UNMARKED = {
    marked: base
    for base, marks in TONE_MARKS.items()
    for marked in marks
}

_NUMBERED_SYLLABLE = re.compile(r"([A-Za-zÜüVv]+)([1-5])")
_NUMBERED_WORD = re.compile(r"(?:[A-Za-zÜüVv]+[1-5])+")


def has_tone_mark(text: str) -> bool:
    return any(c in _UNMARKED for c in text)


def strip_tones(text: str) -> str:
    """Remove tone marks: 'nǐ hǎo' -> 'ni hao'."""
    return "".join(_UNMARKED.get(c, c) for c in text)


def is_numbered_pinyin(text: str) -> bool:
    """
    Whether text is entirely numbered pinyin syllables, ignoring spaces.

    Every syllable must carry a vowel, so "ni3hao3" qualifies while
    "mp3" and "a1b" do not.
    """
    compact = "".join(text.split())
    if not _NUMBERED_WORD.fullmatch(compact):
        return False
    return all(
        any(c in "aeiouüv" for c in letters.lower())
        for letters, _ in _NUMBERED_SYLLABLE.findall(compact)
    )


def _mark_syllable(letters: str, tone: int) -> str:
    letters = letters.replace("v", "ü").replace("V", "Ü")
    if tone == 5:
        return letters

    lower = letters.lower()
    if "a" in lower:
        idx = lower.index("a")
    elif "e" in lower:
        idx = lower.index("e")
    elif "ou" in lower:
        idx = lower.index("o")
    else:
        vowels = [i for i, c in enumerate(lower) if c in "iouü"]
        if not vowels:
            # Syllabic nasals (m, ng) carry no mark
            return letters
        idx = vowels[-1]

    marked = TONE_MARKS[letters[idx]][tone - 1]
    return letters[:idx] + marked + letters[idx + 1:]


def numbered_to_marked(text: str) -> str:
    """
    Convert numbered pinyin to tone marks.

    Every run of letters followed by a tone digit is treated as one
    syllable; tone 5 is the neutral tone and leaves the letters unmarked.
    Text without tone digits is returned unchanged.

        numbered_to_marked("ni3hao3")  -> "nǐhǎo"
        numbered_to_marked("lv4")      -> "lǜ"
        numbered_to_marked("ma5")      -> "ma"
    """
    return _NUMBERED_SYLLABLE.sub(
        lambda m: _mark_syllable(m.group(1), int(m.group(2))),
        text
    )
