"""
Pattern Library Module
Entry point that wires a pattern source, a result cache and a matcher.
"""

import logging
from typing import Dict, Optional

from utils.config import MatcherSettings
from .element_context import ElementContext
from .pattern_matcher import MatchResult, PatternMatcher
from .pattern_source import CategoryPatternSource, JsonPatternSource, PatternSource, PatternTable
from .result_cache import ResultCache

logger = logging.getLogger(__name__)


class PatternLibrary:
    def __init__(self,
                 source: Optional[PatternSource] = None,
                 cache: Optional[ResultCache] = None,
                 settings: Optional[MatcherSettings] = None):
        self.settings = settings or MatcherSettings()
        self.source = source if source is not None else CategoryPatternSource()
        self.cache = cache
        self.matcher = PatternMatcher(
            self.source,
            cache=cache,
            confidence_threshold=self.settings.confidence_threshold,
        )

    @classmethod
    def from_settings(cls, settings: MatcherSettings) -> 'PatternLibrary':
        """Build the library described by settings: JSON patterns when patterns_dir is set, cache per backend settings."""
        if settings.patterns_dir:
            logger.info(f"Loading patterns from {settings.patterns_dir}")
            source = JsonPatternSource(settings.patterns_dir)
        else:
            source = CategoryPatternSource()
        return cls(source=source, cache=ResultCache.from_settings(settings), settings=settings)

    def match(self, prompt: str, context: Optional[ElementContext] = None) -> MatchResult:
        return self.matcher.match(prompt, context)

    def can_handle(self, prompt: str, min_confidence: int = 70) -> bool:
        """Quick check: would the library answer this prompt on its own?"""
        return self.match(prompt).confidence >= min_confidence

    def get_all_patterns(self) -> PatternTable:
        return {key: dict(css) for key, css in self.source.get_all_patterns().items()}

    def get_patterns_by_category(self, category: str) -> PatternTable:
        return self.source.get_patterns_by_category(category)

    def get_category_counts(self) -> Dict[str, int]:
        return self.source.get_category_counts()

    def get_pattern_count(self) -> int:
        return self.source.get_pattern_count()

    def clear_cache(self) -> int:
        if self.cache is None:
            return 0
        return self.cache.clear()

    def cache_stats(self) -> Dict[str, float]:
        if self.cache is None:
            return {'hits': 0, 'misses': 0, 'hit_rate': 0.0}
        return self.cache.stats()
