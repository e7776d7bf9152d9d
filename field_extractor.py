# backend/field_extractor.py
"""
Ordered, first-match-wins extraction over the compiled rule library.

Matching is stateless: every call runs pattern.search/finditer from the start
of its window, so rule objects shared across calls never carry a cursor.
"""

import logging
import re
from typing import Iterable, List, Optional, Pattern

from text_normalizer import clean_extracted_text, split_sentences
from transcript_patterns import rules_for
from transcript_types import ExtractedField, ExtractionRule, FieldId

logger = logging.getLogger("transcriptnlp.field_extractor")

STOP_WORDS = frozenset({"the", "and", "or", "with", "for", "a", "an"})

_LIST_SEPARATOR_RE = re.compile(r"[,;]|\band\b", flags=re.IGNORECASE)


# =====================================================
# SINGLE RULE
# =====================================================

def _windows(rule: ExtractionRule, text: str) -> List[str]:
    if rule.scope == "sentence":
        return split_sentences(text)
    return [text]


def first_capture(rule: ExtractionRule, text: str) -> Optional[str]:
    """Raw text of the first match of `rule` whose capture is non-empty after cleanup."""
    for window in _windows(rule, text):
        for m in rule.pattern.finditer(window):
            raw = m.group(rule.capture_index) if rule.capture_index else m.group(0)
            if raw and clean_extracted_text(raw):
                return raw
    return None


def rule_matches(rule: ExtractionRule, text: str) -> bool:
    return any(rule.pattern.search(w) for w in _windows(rule, text))


# =====================================================
# FIELD LEVEL
# =====================================================

def extract(field_id: FieldId, text: str) -> ExtractedField:
    for rule in rules_for(field_id):
        raw = first_capture(rule, text or "")
        if raw is not None:
            logger.debug("field=%s matched kind=%s pattern=%s", field_id, rule.kind, rule.pattern.pattern[:60])
            return ExtractedField(
                field=field_id,
                raw_capture=raw,
                normalized_value=clean_extracted_text(raw),
                found=True,
            )
    return ExtractedField.missing(field_id)


def merge_unique(existing: List[str], candidates: Iterable[str]) -> List[str]:
    """
    Append candidates in order, skipping any that is already contained
    (case-insensitively) in an item kept so far.
    """
    out = list(existing)
    for c in candidates:
        if not c:
            continue
        low = c.lower()
        if any(low in kept.lower() for kept in out):
            continue
        out.append(c)
    return out


def extract_all(field_id: FieldId, text: str) -> List[str]:
    """First capture of every rule of the field, in rule order, de-duplicated."""
    captures: List[str] = []
    for rule in rules_for(field_id):
        raw = first_capture(rule, text or "")
        if raw is not None:
            captures = merge_unique(captures, [clean_extracted_text(raw)])
    return captures


def scan_all(patterns: Iterable[Pattern], text: str) -> List[str]:
    """Every whole match of every pattern, cleaned, in pattern order then text order."""
    found: List[str] = []
    for p in patterns:
        for m in p.finditer(text or ""):
            cleaned = clean_extracted_text(m.group(0))
            if cleaned and cleaned not in found:
                found.append(cleaned)
    return found


# =====================================================
# LIST-VALUED FIELDS
# =====================================================

def split_list_items(clause: str) -> List[str]:
    items: List[str] = []
    for part in _LIST_SEPARATOR_RE.split(clause or ""):
        part = clean_extracted_text(part.strip())
        if len(part) < 3 or part.lower() in STOP_WORDS:
            continue
        items.append(part)
    return items
