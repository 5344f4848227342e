"""
Lexeme Normalizer

Canonicalizes surface tokens so that word identity is stable across
surface forms. Tone-sandhi pronunciations (e.g. ní hǎo for 你好, bú shì
for 不是) resolve to their dictionary tones through a static table.

normalize() is pure: the same token always yields the same Lexeme key,
and tokens the table does not know pass through unchanged apart from
whitespace, case and Unicode composition.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Iterable, Optional

from sentence_trainer.lexemes.tones import is_numbered_pinyin, numbered_to_marked


# Surface (sandhi) form -> dictionary form. Keys are compact, lowercase,
# tone-marked pinyin.
SANDHI_VARIANTS: dict[str, str] = {
    # 一 (yī) changes tone before other syllables. Bare yí/yì are other
    # words as often as not (姨, 意, 亿) and are not listed
    "yíxià": "yīxià",
    "yídìng": "yīdìng",
    "yíyàng": "yīyàng",
    "yígè": "yīgè",
    "yíge": "yīgè",
    "yíhuìr": "yīhuìr",
    "yìqǐ": "yīqǐ",
    "yìdiǎn": "yīdiǎn",
    "yìdiǎnr": "yīdiǎnr",
    "yìbiān": "yībiān",
    "yìzhí": "yīzhí",
    # 不 (bù) becomes bú before a fourth tone
    "bú": "bù",
    "búshì": "bùshì",
    "búyào": "bùyào",
    "búduì": "bùduì",
    "búcuò": "bùcuò",
    "búkèqi": "bùkèqi",
    "búyòng": "bùyòng",
    # Third-tone sandhi: a third tone before another third tone is read as second
    "níhǎo": "nǐhǎo",
    "kéyǐ": "kěyǐ",
    "hénhǎo": "hěnhǎo",
    "suóyǐ": "suǒyǐ",
    "xiáojiě": "xiǎojiě",
    "shuíguǒ": "shuǐguǒ",
    "yúfǎ": "yǔfǎ",
    "láobǎn": "lǎobǎn",
    "líxiǎng": "lǐxiǎng",
    "zhánlǎn": "zhǎnlǎn",
    "shóubiǎo": "shǒubiǎo",
}

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Lexeme:
    """
    Canonical identity of a word.

    Equality and hashing use only `key`; `display` and `reading` are
    presentation.
    """
    key: str
    display: str = field(compare=False)
    reading: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.display


def _clean(token: str) -> str:
    token = unicodedata.normalize("NFC", token).strip()
    token = _WHITESPACE.sub(" ", token)
    if is_numbered_pinyin(token):
        token = unicodedata.normalize("NFC", numbered_to_marked(token))
    return token


def canonical_form(token: str) -> str:
    """Lexeme key for a surface token."""
    compact = _WHITESPACE.sub("", _clean(token)).lower()
    return SANDHI_VARIANTS.get(compact, compact)


def normalize(token: str) -> Lexeme:
    """
    Map a surface token to its Lexeme.

    Args:
        token: Word as it appears in a sentence or word list

    Returns:
        Lexeme whose key is the canonical form of the token
    """
    cleaned = _clean(token)
    key = canonical_form(cleaned)
    compact = _WHITESPACE.sub("", cleaned).lower()
    display = key if compact in SANDHI_VARIANTS else cleaned
    return Lexeme(key=key, display=display)


def normalize_segment(chinese: str, pinyin: str = "") -> Lexeme:
    """
    Lexeme for a segmented Chinese word.

    Identity comes from the characters; the pinyin (which may carry a
    sandhi pronunciation) becomes the canonical reading.
    """
    word = normalize(chinese)
    reading = normalize(pinyin).display if pinyin.strip() else None
    return Lexeme(key=word.key, display=word.display, reading=reading)


def normalize_all(tokens: Iterable[str]) -> list[Lexeme]:
    return [normalize(t) for t in tokens if t.strip()]


def unique_lexemes(tokens: Iterable[str]) -> list[Lexeme]:
    """
    Normalize tokens, dropping repeats while keeping first-seen order.

    Used for frequency lists and baseline word lists, which must not
    contain the same Lexeme twice.
    """
    seen: set[Lexeme] = set()
    result = []
    for lexeme in normalize_all(tokens):
        if lexeme in seen:
            continue
        seen.add(lexeme)
        result.append(lexeme)
    return result


def lexeme_key(word: Lexeme | str) -> str:
    """Key for a Lexeme, or for a raw token that has not been normalized yet."""
    if isinstance(word, Lexeme):
        return word.key
    return canonical_form(word)
