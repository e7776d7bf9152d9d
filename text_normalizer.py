"""
text_normalizer.py

Whitespace/quote normalization for raw transcripts and cleanup of captured spans.
"""

import re
from typing import List, Optional


_WHITESPACE_RE = re.compile(r"\s+")
_NEWLINES_RE = re.compile(r"[\r\n]+")
_EDGE_NON_WORD_RE = re.compile(r"^\W+|\W+$")
_LEADING_ARTICLE_RE = re.compile(r"^(?:and|or|the|a|an)\s+", flags=re.IGNORECASE)
_TRAILING_CONJUNCTION_RE = re.compile(r"\s+(?:and|or)$", flags=re.IGNORECASE)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

_QUOTE_MAP = str.maketrans({
    "“": '"',
    "”": '"',
    "„": '"',
    "‘": "'",
    "’": "'",
    "‚": "'",
})


# =====================================================
# TRANSCRIPT NORMALIZATION
# =====================================================

def normalize(text: Optional[str]) -> str:
    if not text:
        return ""
    text = _NEWLINES_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text)
    text = text.translate(_QUOTE_MAP)
    return text.strip()


# =====================================================
# CAPTURE CLEANUP
# =====================================================

def clean_extracted_text(text: Optional[str]) -> str:
    """
    Strip punctuation at the edges of a captured span, collapse whitespace,
    and drop a leading article or a trailing dangling conjunction.
    """
    if not text:
        return ""
    text = _EDGE_NON_WORD_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()
    text = _LEADING_ARTICLE_RE.sub("", text)
    text = _TRAILING_CONJUNCTION_RE.sub("", text)
    return text


def split_sentences(text: Optional[str]) -> List[str]:
    if not text:
        return []
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]
