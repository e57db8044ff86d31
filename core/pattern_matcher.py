"""
Pattern Matcher Module
Matches a free-text style request against the pattern library.

Pipeline: normalize -> cache lookup -> exact key shortcut -> score every
pattern -> rank -> filter -> combine up to three patterns -> cache store.
Every prompt maps to a MatchResult; confidence 0 means "no match".
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .element_context import ElementContext
from .pattern_scorer import PatternScorer, round_half_up, tokenize_pattern
from .pattern_source import PatternSource
from .prompt_normalizer import normalize, tokenize
from .result_cache import ResultCache

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 70

# Combination tuning
MIN_CANDIDATE_SCORE = 50
SELECTIVE_TOP_SCORE = 70
STRICT_TOP_SCORE = 90
STRICT_SCORE_WINDOW = 10
SELECTIVE_SCORE_WINDOW = 25
MAX_COMBINED_PATTERNS = 3
BEST_MATCH_WEIGHT = 0.7
SUPPORTING_MATCH_WEIGHT = 0.3

HIGH_CONFIDENCE = 80
MEDIUM_CONFIDENCE = 60

SOURCE_MATCHER = 'pattern_matcher'
SOURCE_CACHE = 'result_cache'


class ConfidenceLevel(str, Enum):
    NONE = 'none'
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


class Recommendation(str, Enum):
    PATTERN = 'pattern'
    NEEDS_AI_FALLBACK = 'needs_ai_fallback'
    FULL_AI_GENERATION = 'full_ai_generation'


@dataclass
class MatchCandidate:
    pattern_key: str
    css: Dict[str, str]
    score: int
    token_count: int


@dataclass
class MatchResult:
    css: Dict[str, str] = field(default_factory=dict)
    confidence: int = 0
    matched_patterns: List[str] = field(default_factory=list)
    confidence_level: ConfidenceLevel = ConfidenceLevel.NONE
    recommendation: Recommendation = Recommendation.FULL_AI_GENERATION
    match_time_ms: float = 0.0
    source: str = SOURCE_MATCHER
    context: Optional[ElementContext] = None

    @property
    def pattern_id(self) -> Optional[str]:
        return self.matched_patterns[0] if self.matched_patterns else None

    @property
    def served_from_cache(self) -> bool:
        return self.source == SOURCE_CACHE

    @property
    def partial_match(self) -> bool:
        return self.recommendation is Recommendation.NEEDS_AI_FALLBACK

    @property
    def fallback_reason(self) -> Optional[str]:
        if self.recommendation is Recommendation.NEEDS_AI_FALLBACK:
            return 'Low confidence score'
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-ready dictionary."""
        return {
            'css': dict(self.css),
            'confidence': self.confidence,
            'matched_patterns': list(self.matched_patterns),
            'confidence_level': self.confidence_level.value,
            'recommendation': self.recommendation.value,
            'match_time_ms': self.match_time_ms,
            'source': self.source,
            'pattern_id': self.pattern_id,
            'fallback_reason': self.fallback_reason,
            'partial_match': self.partial_match,
            'context': self.context.to_dict() if self.context else None,
        }


def confidence_level_for(confidence: int) -> ConfidenceLevel:
    if confidence >= HIGH_CONFIDENCE:
        return ConfidenceLevel.HIGH
    if confidence >= MEDIUM_CONFIDENCE:
        return ConfidenceLevel.MEDIUM
    if confidence > 0:
        return ConfidenceLevel.LOW
    return ConfidenceLevel.NONE


def recommendation_for(confidence: int, threshold: int) -> Recommendation:
    if confidence == 0:
        return Recommendation.FULL_AI_GENERATION
    if confidence >= threshold:
        return Recommendation.PATTERN
    return Recommendation.NEEDS_AI_FALLBACK


class PatternMatcher:
    def __init__(self,
                 source: PatternSource,
                 cache: Optional[ResultCache] = None,
                 scorer: Optional[PatternScorer] = None,
                 confidence_threshold: int = DEFAULT_CONFIDENCE_THRESHOLD):
        self.source = source
        self.cache = cache
        self.scorer = scorer or PatternScorer()
        self.confidence_threshold = DEFAULT_CONFIDENCE_THRESHOLD
        self.set_confidence_threshold(confidence_threshold)

    def set_confidence_threshold(self, threshold: int) -> None:
        if not 0 <= threshold <= 100:
            raise ValueError(f"Confidence threshold must be within 0-100, got {threshold}")
        self.confidence_threshold = threshold

    def match(self, prompt: str, context: Optional[ElementContext] = None) -> MatchResult:
        """
        Match a prompt against every pattern and combine the best hits.

        Args:
            prompt: Free-text style request, e.g. "make this button blue"
            context: Optional target element, copied onto the result

        Returns:
            MatchResult; the caller applies css directly when the
            recommendation is PATTERN and escalates otherwise.
        """
        start_time = time.perf_counter()
        normalized = normalize(prompt)

        if self.cache is not None:
            cached = self.cache.get(normalized)
            if cached is not None:
                logger.debug(f"Cache hit for {normalized!r}")
                return self._build_result(cached.css, cached.confidence, cached.matched_patterns,
                                          start_time, context, SOURCE_CACHE)

        patterns = self.source.get_all_patterns()
        if normalized in patterns:
            css = dict(patterns[normalized])
            confidence = 100
            matched = [normalized]
        else:
            candidates = self.find_matches(normalized)
            css, confidence, matched = self.combine_matches(candidates, normalized)

        if self.cache is not None:
            self.cache.set(normalized, css, confidence, matched)
        return self._build_result(css, confidence, matched, start_time, context, SOURCE_MATCHER)

    def find_matches(self, normalized_prompt: str) -> List[MatchCandidate]:
        """Score every pattern; return non-zero candidates, best first, simpler patterns first on ties."""
        tokens = tokenize(normalized_prompt)
        candidates = []
        for pattern_key, css in self.source.get_all_patterns().items():
            score = self.scorer.score(tokens, pattern_key, normalized_prompt)
            if score > 0:
                candidates.append(MatchCandidate(
                    pattern_key=pattern_key,
                    css=css,
                    score=score,
                    token_count=len(tokenize_pattern(pattern_key)),
                ))
        candidates.sort(key=lambda candidate: (-candidate.score, candidate.token_count))
        logger.debug(f"{len(candidates)} candidate patterns for {normalized_prompt!r}")
        return candidates

    def combine_matches(self, candidates: List[MatchCandidate], normalized_prompt: str):
        """
        Merge the best candidates into one CSS map.

        Returns:
            (css, confidence, matched_patterns); css keeps the first selected
            pattern's value for each property.
        """
        filtered = [c for c in candidates if c.score >= MIN_CANDIDATE_SCORE]
        if not filtered:
            return {}, 0, []

        filtered = self._narrow_by_top_score(filtered, normalized_prompt)
        selected = self._select(filtered)

        combined_css: Dict[str, str] = {}
        for candidate in selected:
            for prop, value in candidate.css.items():
                combined_css.setdefault(prop, value)

        scores = [c.score for c in selected]
        if len(scores) == 1:
            confidence = scores[0]
        else:
            others = scores[1:]
            confidence = round_half_up(scores[0] * BEST_MATCH_WEIGHT
                                       + sum(others) / len(others) * SUPPORTING_MATCH_WEIGHT)
        confidence = min(100, max(0, confidence))
        return combined_css, confidence, [c.pattern_key for c in selected]

    def _narrow_by_top_score(self, filtered: List[MatchCandidate], normalized_prompt: str) -> List[MatchCandidate]:
        top = filtered[0]
        if top.score >= STRICT_TOP_SCORE:
            top_tokens = set(tokenize_pattern(top.pattern_key))
            kept = []
            for candidate in filtered:
                if top.score - candidate.score <= STRICT_SCORE_WINDOW:
                    kept.append(candidate)
                elif candidate.score >= SELECTIVE_TOP_SCORE:
                    # Keep a strong extra pattern only if the user literally asked for what it adds
                    unique_tokens = [t for t in tokenize_pattern(candidate.pattern_key) if t not in top_tokens]
                    if unique_tokens and all(t in normalized_prompt for t in unique_tokens):
                        kept.append(candidate)
            return kept
        if top.score >= SELECTIVE_TOP_SCORE:
            return [c for c in filtered if top.score - c.score < SELECTIVE_SCORE_WINDOW]
        return filtered

    @staticmethod
    def _select(filtered: List[MatchCandidate]) -> List[MatchCandidate]:
        # Past the limit, a candidate still gets in if it brings a property nobody covers yet
        selected = []
        covered = set()
        for candidate in filtered:
            adds_property = any(prop not in covered for prop in candidate.css)
            if len(selected) < MAX_COMBINED_PATTERNS or adds_property:
                selected.append(candidate)
                covered.update(candidate.css)
        return selected

    def _build_result(self, css, confidence, matched_patterns, start_time, context, source) -> MatchResult:
        return MatchResult(
            css=dict(css),
            confidence=confidence,
            matched_patterns=list(matched_patterns),
            confidence_level=confidence_level_for(confidence),
            recommendation=recommendation_for(confidence, self.confidence_threshold),
            match_time_ms=(time.perf_counter() - start_time) * 1000,
            source=source,
            context=context,
        )
