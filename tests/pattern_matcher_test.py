import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.element_context import ElementContext
from core.pattern_matcher import (
    ConfidenceLevel,
    PatternMatcher,
    Recommendation,
    confidence_level_for,
    recommendation_for,
)
from core.pattern_scorer import PatternScorer
from core.pattern_source import CategoryPatternSource, DictPatternSource
from core.result_cache import ResultCache, SQLiteCacheStore


@pytest.fixture(scope='module')
def builtin_matcher():
    return PatternMatcher(CategoryPatternSource())


def test_exact_key_match(builtin_matcher):
    result = builtin_matcher.match("Make this BLUE!")
    assert result.css == {'color': '#0073aa'}
    assert result.confidence == 100
    assert result.matched_patterns == ['make this blue']
    assert result.confidence_level is ConfidenceLevel.HIGH
    assert result.recommendation is Recommendation.PATTERN
    assert result.pattern_id == 'make this blue'
    assert result.fallback_reason is None

def test_gibberish_needs_full_generation(builtin_matcher):
    result = builtin_matcher.match("asdkj qwoeiru zzxcv")
    assert result.css == {}
    assert result.confidence == 0
    assert result.matched_patterns == []
    assert result.confidence_level is ConfidenceLevel.NONE
    assert result.recommendation is Recommendation.FULL_AI_GENERATION

def test_empty_prompt_never_raises(builtin_matcher):
    for prompt in ["", "   ", "?!?", "the a an"]:
        result = builtin_matcher.match(prompt)
        assert result.confidence == 0
        assert result.css == {}

def test_builtin_match_stays_in_range(builtin_matcher):
    for prompt in ["rounded corners", "big bold heading", "center the text with a shadow"]:
        result = builtin_matcher.match(prompt)
        assert 0 <= result.confidence <= 100
        assert len(result.matched_patterns) >= (1 if result.confidence else 0)

def test_combines_two_equal_matches():
    matcher = PatternMatcher(DictPatternSource({
        'blue': {'color': '#0073aa'},
        'shadow': {'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'},
    }))
    result = matcher.match("blue and shadow")
    assert result.matched_patterns == ['blue', 'shadow']
    assert result.css == {'color': '#0073aa', 'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'}
    assert result.confidence == 85

def test_first_selected_pattern_wins_property_conflicts():
    matcher = PatternMatcher(DictPatternSource({
        'blue': {'color': '#0073aa'},
        'blue button': {'background-color': '#0073aa', 'color': '#fff'},
        'rounded': {'border-radius': '4px'},
    }))
    result = matcher.match("blue button rounded")
    assert result.matched_patterns == ['blue button', 'blue', 'rounded']
    assert result.css == {'background-color': '#0073aa', 'color': '#fff', 'border-radius': '4px'}
    assert list(result.css) == ['background-color', 'color', 'border-radius']
    assert result.confidence == 86

def test_strong_top_match_keeps_only_literal_extras():
    matcher = PatternMatcher(DictPatternSource({
        'blue shadow': {'box-shadow': '0 0 5px #0073aa'},
        'shadow': {'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'},
        'blue': {'color': '#0073aa'},
        'glow': {'filter': 'drop-shadow(0 0 4px #0073aa)'},
        'rounded corners': {'border-radius': '5px'},
    }))
    result = matcher.match("blue bluish shadow shadowed glow")
    assert result.matched_patterns == ['blue shadow', 'glow']
    assert result.css == {'box-shadow': '0 0 5px #0073aa', 'filter': 'drop-shadow(0 0 4px #0073aa)'}
    assert result.confidence == 88

def test_extra_pattern_beyond_three_only_when_it_adds_a_property():
    matcher = PatternMatcher(DictPatternSource({
        'red': {'color': '#dc3232'},
        'bold': {'font-weight': 'bold'},
        'italic': {'font-style': 'italic'},
        'underline': {'text-decoration': 'underline'},
        'strong': {'font-weight': '900'},
    }))
    result = matcher.match("red bold italic underline strong")
    assert result.matched_patterns == ['red', 'bold', 'italic', 'underline']
    assert result.css['font-weight'] == 'bold'
    assert result.confidence == 71
    assert result.confidence_level is ConfidenceLevel.MEDIUM
    assert result.recommendation is Recommendation.PATTERN

def test_low_score_needs_fallback():
    matcher = PatternMatcher(DictPatternSource({'shadow': {'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'}}))
    result = matcher.match(
        "give the card a shadow with shadowed edges and soft shadows around the photo gallery frame")
    assert result.confidence == 54
    assert result.confidence_level is ConfidenceLevel.LOW
    assert result.recommendation is Recommendation.NEEDS_AI_FALLBACK
    assert result.partial_match
    assert result.fallback_reason == 'Low confidence score'

def test_scores_below_fifty_are_dropped():
    matcher = PatternMatcher(DictPatternSource({'blue': {'color': '#0073aa'}}))
    assert matcher.find_matches("blue one two three four five six seven eight")[0].score == 25
    result = matcher.match("blue one two three four five six seven eight")
    assert result.confidence == 0
    assert result.css == {}
    assert result.recommendation is Recommendation.FULL_AI_GENERATION

def test_inferred_word_reaches_partial_match():
    matcher = PatternMatcher(DictPatternSource({'rounded corners': {'border-radius': '5px'}}))
    result = matcher.match("round")
    assert result.confidence == 52
    assert result.css == {'border-radius': '5px'}
    assert result.recommendation is Recommendation.NEEDS_AI_FALLBACK

def test_threshold_controls_recommendation():
    matcher = PatternMatcher(DictPatternSource({'shadow': {'box-shadow': 'none'}}), confidence_threshold=90)
    result = matcher.match("shadow please")
    assert result.confidence == 85
    assert result.recommendation is Recommendation.NEEDS_AI_FALLBACK
    matcher.set_confidence_threshold(80)
    assert matcher.match("shadow please").recommendation is Recommendation.PATTERN

def test_invalid_threshold_rejected():
    matcher = PatternMatcher(DictPatternSource({'blue': {'color': 'blue'}}))
    with pytest.raises(ValueError):
        matcher.set_confidence_threshold(101)
    with pytest.raises(ValueError):
        PatternMatcher(DictPatternSource({'blue': {'color': 'blue'}}), confidence_threshold=-1)

def test_find_matches_orders_ties_by_simpler_pattern():
    matcher = PatternMatcher(DictPatternSource({
        'blue text': {'color': '#0073aa'},
        'blue': {'color': '#0073aa'},
    }))
    candidates = matcher.find_matches("blue text")
    assert [c.pattern_key for c in candidates] == ['blue text', 'blue']
    assert candidates[0].score > candidates[1].score
    assert candidates[1].token_count == 1

def test_context_is_copied_onto_result():
    matcher = PatternMatcher(DictPatternSource({'blue': {'color': '#0073aa'}}))
    context = ElementContext(tag_name='button', class_list=('btn',))
    result = matcher.match("blue", context)
    assert result.context == context
    assert result.to_dict()['context'] == {'tag_name': 'button', 'class_list': ['btn']}

def test_to_dict_is_json_ready():
    matcher = PatternMatcher(DictPatternSource({'blue': {'color': '#0073aa'}}))
    data = matcher.match("blue").to_dict()
    assert data['confidence_level'] == 'high'
    assert data['recommendation'] == 'pattern'
    assert data['source'] == 'pattern_matcher'
    assert data['pattern_id'] == 'blue'
    assert data['partial_match'] is False
    assert data['match_time_ms'] >= 0

def test_cached_result_skips_scoring():
    scorer = PatternScorer()
    cache = ResultCache(SQLiteCacheStore(':memory:'))
    matcher = PatternMatcher(DictPatternSource({
        'blue': {'color': '#0073aa'},
        'shadow': {'box-shadow': 'none'},
    }), cache=cache, scorer=scorer)
    first = matcher.match("blue and shadow")
    calls_after_first = scorer.calls
    assert calls_after_first > 0
    second = matcher.match("  BLUE and shadow!! ")
    assert scorer.calls == calls_after_first
    assert second.source == 'result_cache'
    assert second.served_from_cache
    assert second.css == first.css
    assert second.confidence == first.confidence
    assert second.matched_patterns == first.matched_patterns
    assert cache.stats()['hits'] == 1

def test_exact_matches_are_cached_too():
    cache = ResultCache(SQLiteCacheStore(':memory:'))
    matcher = PatternMatcher(DictPatternSource({'blue': {'color': '#0073aa'}}), cache=cache)
    matcher.match("blue")
    assert cache.is_cached("blue")

def test_cached_result_uses_current_threshold():
    cache = ResultCache(SQLiteCacheStore(':memory:'))
    matcher = PatternMatcher(DictPatternSource({'shadow': {'box-shadow': 'none'}}), cache=cache)
    assert matcher.match("shadow please").recommendation is Recommendation.PATTERN
    matcher.set_confidence_threshold(90)
    result = matcher.match("shadow please")
    assert result.source == 'result_cache'
    assert result.recommendation is Recommendation.NEEDS_AI_FALLBACK

@pytest.mark.parametrize("confidence,level", [
    (100, ConfidenceLevel.HIGH),
    (80, ConfidenceLevel.HIGH),
    (79, ConfidenceLevel.MEDIUM),
    (60, ConfidenceLevel.MEDIUM),
    (59, ConfidenceLevel.LOW),
    (1, ConfidenceLevel.LOW),
    (0, ConfidenceLevel.NONE),
])
def test_confidence_levels(confidence, level):
    assert confidence_level_for(confidence) is level

def test_recommendation_boundaries():
    assert recommendation_for(70, 70) is Recommendation.PATTERN
    assert recommendation_for(69, 70) is Recommendation.NEEDS_AI_FALLBACK
    assert recommendation_for(0, 0) is Recommendation.FULL_AI_GENERATION
    assert recommendation_for(0, 70) is Recommendation.FULL_AI_GENERATION
