"""
Pattern Scorer Module
Computes a 0-100 match score between a tokenized prompt and a single pattern key.

The multipliers and thresholds below were tuned empirically against the
pattern library. tests/pattern_scorer_test.py pins each of them with a
calibration fixture; change them only together with that fixture.
"""

import math
from difflib import SequenceMatcher
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

from .prompt_normalizer import tokenize

# Generic words that must not justify a score on their own
WEAK_MATCH_WORDS = frozenset(['text', 'background', 'color', 'style'])

# Explicit word variations (base word -> accepted variants), checked both ways
WORD_VARIATIONS: Dict[str, Tuple[str, ...]] = {
    'blue': ('blueish', 'bluish'),
    'red': ('reddish',),
    'green': ('greenish',),
    'large': ('big', 'huge', 'bigger'),
    'small': ('tiny', 'little', 'smaller'),
    'center': ('centered', 'middle'),
    'round': ('rounded', 'circular'),
    'shadow': ('shadowed', 'shaded'),
    'border': ('bordered', 'outline'),
    'padding': ('padded', 'space', 'spacing'),
    'margin': ('margined',),
    'bold': ('bolder', 'heavy', 'thick'),
    'light': ('lighter', 'thin'),
}

ROOT_SUFFIXES = ('ed', 'ing', 'er', 'est', 'ly', 's', 'ish')
ROOT_MIN_WORD_LENGTH = 4
ROOT_MIN_STEM_LENGTH = 3

EXACT_MATCH_SCORE = 100
MAX_INFERRED_SCORE = 95

FULL_COVERAGE_BASE = 75
FULL_COVERAGE_PROMPT_BONUS = 20
PARTIAL_COVERAGE_BASE = 40
PARTIAL_COVERAGE_PATTERN_WEIGHT = 30
PARTIAL_COVERAGE_PROMPT_BONUS = 20
PARTIAL_COVERAGE_MINIMUM = 0.5

ALL_INFERRED_PENALTY = 0.55
MOSTLY_INFERRED_PENALTY = 0.75
WEAK_ONLY_PENALTY = 0.6

COMPLEXITY_RATIO_THRESHOLD = 5.0
COMPLEXITY_PENALTY_STEP = 0.1
COMPLEXITY_PENALTY_CAP = 0.35
PARTIAL_COMPLEXITY_PENALTY = 0.6

# (max prompt coverage, min prompt tokens, multiplier), first hit wins
LOW_COVERAGE_PENALTIES = (
    (0.2, 8, 0.5),
    (0.25, 6, 0.65),
)


def round_half_up(value: float) -> int:
    """Round like a human would (2.5 -> 3), not banker's rounding."""
    return int(math.floor(value + 0.5))


@lru_cache(maxsize=4096)
def tokenize_pattern(pattern_key: str) -> Tuple[str, ...]:
    return tuple(tokenize(pattern_key))


def is_word_variation(word1: str, word2: str) -> bool:
    """True when one word is an explicit variant of the other in WORD_VARIATIONS."""
    if word2 in WORD_VARIATIONS.get(word1, ()):
        return True
    return word1 in WORD_VARIATIONS.get(word2, ())


def is_root_word_match(word1: str, word2: str) -> bool:
    """
    True when the words share a root once a common suffix is stripped.

    "rounded" -> "round" matches "round" and "rounds", but arbitrary
    substrings never match. Words shorter than four characters ("red")
    never take part.
    """
    if len(word1) < ROOT_MIN_WORD_LENGTH or len(word2) < ROOT_MIN_WORD_LENGTH:
        return False
    for suffix in ROOT_SUFFIXES:
        if word1.endswith(suffix):
            root1 = word1[:-len(suffix)]
            if len(root1) >= ROOT_MIN_STEM_LENGTH and word2.startswith(root1):
                return True
        if word2.endswith(suffix):
            root2 = word2[:-len(suffix)]
            if len(root2) >= ROOT_MIN_STEM_LENGTH and word1.startswith(root2):
                return True
    return False


def get_synonyms(word: str) -> List[str]:
    return list(WORD_VARIATIONS.get(word, ()))


def fuzzy_match(str1: str, str2: str) -> int:
    """Character-level similarity of two strings as a 0-100 integer."""
    str1 = str1.lower()
    str2 = str2.lower()
    if str1 == str2:
        return 100
    return round_half_up(SequenceMatcher(None, str1, str2).ratio() * 100)


def score_keyword_match(request_keywords: Dict[str, int], pattern_keywords: Dict[str, int]) -> int:
    """Percentage of request keywords that also appear in the pattern keywords."""
    if not request_keywords:
        return 0
    matched = sum(1 for keyword in request_keywords if keyword in pattern_keywords)
    return round_half_up(matched / len(request_keywords) * 100)


class PatternScorer:
    """Scores one prompt against one pattern key."""

    def __init__(self):
        self.calls = 0

    def score(self, prompt_tokens: Sequence[str], pattern_key: str, prompt: Optional[str] = None) -> int:
        """
        Score a tokenized prompt against a pattern key.

        Args:
            prompt_tokens: Tokens of the normalized prompt
            pattern_key: Normalized pattern phrase
            prompt: Full normalized prompt; equality with the key scores 100

        Returns:
            Integer score in [0, 100]. 100 is reserved for exact equality,
            every inferred match is capped at 95.
        """
        self.calls += 1
        if prompt is not None and prompt == pattern_key:
            return EXACT_MATCH_SCORE

        pattern_tokens = tokenize_pattern(pattern_key)
        if not pattern_tokens:
            return 0

        found_pattern_tokens = 0
        exact_matches = 0
        variation_matches = 0
        root_word_matches = 0
        weak_matches = 0

        for pattern_token in pattern_tokens:
            if pattern_token in prompt_tokens:
                found_pattern_tokens += 1
                exact_matches += 1
                if pattern_token in WEAK_MATCH_WORDS:
                    weak_matches += 1
            elif any(is_word_variation(token, pattern_token) for token in prompt_tokens):
                found_pattern_tokens += 1
                variation_matches += 1
            elif any(is_root_word_match(token, pattern_token) for token in prompt_tokens):
                found_pattern_tokens += 1
                root_word_matches += 1

        # A non-exact prompt token earns one point per inference kind, so coverage can exceed 1.0
        matched_prompt_tokens = 0
        fuzzy_prompt_matches = 0
        for token in prompt_tokens:
            if token in pattern_tokens:
                matched_prompt_tokens += 1
                continue
            if any(is_word_variation(token, p) for p in pattern_tokens):
                fuzzy_prompt_matches += 1
            if any(is_root_word_match(token, p) for p in pattern_tokens):
                fuzzy_prompt_matches += 1

        pattern_token_count = len(pattern_tokens)
        token_count = len(prompt_tokens)

        strong_matches = found_pattern_tokens - weak_matches
        if strong_matches == 0 and found_pattern_tokens < pattern_token_count:
            return 0

        pattern_coverage = found_pattern_tokens / pattern_token_count
        prompt_coverage = (matched_prompt_tokens + fuzzy_prompt_matches) / token_count if token_count else 0.0
        complexity_ratio = token_count / pattern_token_count
        inference_matches = variation_matches + root_word_matches

        if pattern_coverage >= 1.0:
            score = FULL_COVERAGE_BASE + round_half_up(prompt_coverage * FULL_COVERAGE_PROMPT_BONUS)
            score = self._inference_penalty(score, inference_matches, exact_matches)
            if strong_matches == 0:
                score = round_half_up(score * WEAK_ONLY_PENALTY)
            if complexity_ratio >= COMPLEXITY_RATIO_THRESHOLD:
                penalty = min(COMPLEXITY_PENALTY_CAP, COMPLEXITY_PENALTY_STEP * (complexity_ratio - 4))
                score = round_half_up(score * (1 - penalty))
            score = self._low_coverage_penalty(score, prompt_coverage, token_count)
            return min(MAX_INFERRED_SCORE, max(0, score))

        # A multi-word pattern must be fully present in a multi-word prompt
        if pattern_token_count >= 2 and token_count >= 2:
            return 0

        if pattern_coverage >= PARTIAL_COVERAGE_MINIMUM:
            score = (round_half_up(PARTIAL_COVERAGE_BASE + pattern_coverage * PARTIAL_COVERAGE_PATTERN_WEIGHT)
                     + round_half_up(prompt_coverage * PARTIAL_COVERAGE_PROMPT_BONUS))
            score = self._inference_penalty(score, inference_matches, exact_matches)
            if complexity_ratio >= COMPLEXITY_RATIO_THRESHOLD:
                score = round_half_up(score * PARTIAL_COMPLEXITY_PENALTY)
            score = self._low_coverage_penalty(score, prompt_coverage, token_count)
            return max(0, score)

        return 0

    @staticmethod
    def _inference_penalty(score: int, inference_matches: int, exact_matches: int) -> int:
        # Variation/root hits are guesses about intent ("round" may not mean corners)
        if inference_matches > 0 and exact_matches == 0:
            return round_half_up(score * ALL_INFERRED_PENALTY)
        if inference_matches > exact_matches:
            return round_half_up(score * MOSTLY_INFERRED_PENALTY)
        return score

    @staticmethod
    def _low_coverage_penalty(score: int, prompt_coverage: float, token_count: int) -> int:
        for max_coverage, min_tokens, multiplier in LOW_COVERAGE_PENALTIES:
            if prompt_coverage < max_coverage and token_count > min_tokens:
                return round_half_up(score * multiplier)
        return score
