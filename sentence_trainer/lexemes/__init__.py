"""Lexeme normalization: canonical word identity across surface forms."""

from sentence_trainer.lexemes.normalizer import (
    SANDHI_VARIANTS,
    Lexeme,
    canonical_form,
    lexeme_key,
    normalize,
    normalize_all,
    normalize_segment,
    unique_lexemes,
)
from sentence_trainer.lexemes.tones import (
    has_tone_mark,
    is_numbered_pinyin,
    numbered_to_marked,
    strip_tones,
)

__all__ = [
    "SANDHI_VARIANTS",
    "Lexeme",
    "canonical_form",
    "lexeme_key",
    "normalize",
    "normalize_all",
    "normalize_segment",
    "unique_lexemes",
    "has_tone_mark",
    "is_numbered_pinyin",
    "numbered_to_marked",
    "strip_tones",
]
