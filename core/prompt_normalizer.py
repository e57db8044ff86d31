"""
Prompt Normalizer Module
Lowercases, cleans and tokenizes free-text style requests before matching.
"""

import re
from typing import Dict, List

# Words that carry no styling intent
STOP_WORDS = frozenset([
    'the', 'a', 'an', 'this', 'that', 'with', 'and', 'or', 'but',
    'in', 'on', 'at', 'to', 'for', 'of', 'it',
    'make', 'give', 'add', 'set', 'apply',
])

_STRIP_PATTERN = re.compile(r'[^\w\s-]')
_WHITESPACE_PATTERN = re.compile(r'\s+')


def normalize(prompt: str) -> str:
    """
    Normalize a prompt for matching and cache keying.

    Lowercases, trims, removes every character that is not a word character,
    whitespace or hyphen, and collapses whitespace runs to a single space.
    normalize(normalize(x)) == normalize(x) for every string.
    """
    normalized = prompt.lower().strip()
    normalized = _STRIP_PATTERN.sub('', normalized)
    normalized = _WHITESPACE_PATTERN.sub(' ', normalized)
    return normalized.strip()


def tokenize(normalized: str) -> List[str]:
    """Split a normalized prompt into words, dropping stop words and empties. Order is preserved."""
    return [word for word in normalized.split(' ') if word and word not in STOP_WORDS]


def extract_keywords(text: str) -> Dict[str, int]:
    """Extract keyword weights from raw text (every keyword weighs 1)."""
    return {token: 1 for token in tokenize(normalize(text))}
