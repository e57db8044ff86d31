"""
Pattern Source Module
Supplies the prompt-key -> CSS table the matcher scores against.

Category tables are merged lazily in a fixed order. When two categories
define the same key the later category wins, so with the built-in order
(colors, typography, spacing, borders, shadows, layout, buttons) the layout
definitions of "horizontal center" and "space around" replace the spacing ones.
"""

import json
import logging
import threading
from pathlib import Path
from types import ModuleType
from typing import Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

import tinycss2

from patterns import borders, buttons, colors, layout, shadows, spacing, typography
from utils.file_utils import list_pattern_files, read_json_file
from .prompt_normalizer import normalize, tokenize

logger = logging.getLogger(__name__)

CssMap = Dict[str, str]
PatternTable = Dict[str, CssMap]
CategoryEntries = Sequence[Tuple[str, Mapping[str, str]]]

DEFAULT_CATEGORIES: Tuple[ModuleType, ...] = (
    colors, typography, spacing, borders, shadows, layout, buttons,
)


class PatternSourceError(ValueError):
    """Raised when a category table is malformed."""


class JsonObjectPairs(list):
    """(key, value) pairs of one JSON object, kept apart from JSON arrays."""


class PatternSource(Protocol):
    """Read-only view over a pattern library. The matcher depends on nothing else."""

    def get_all_patterns(self) -> PatternTable: ...

    def get_patterns_by_category(self, category: str) -> PatternTable: ...

    def get_categories(self) -> List[str]: ...

    def get_category_counts(self) -> Dict[str, int]: ...

    def get_pattern_count(self) -> int: ...


def is_plausible_declaration(prop: str, value: str) -> bool:
    """Check that prop/value parse as exactly one CSS declaration. Values are not interpreted."""
    nodes = tinycss2.parse_declaration_list(f"{prop}: {value}", skip_comments=True, skip_whitespace=True)
    if len(nodes) != 1 or nodes[0].type != 'declaration':
        return False
    declaration = nodes[0]
    if declaration.lower_name != prop.lower():
        return False
    return any(token.type != 'whitespace' for token in declaration.value)


def validate_category(category: str, entries: CategoryEntries) -> PatternTable:
    """
    Validate one category's entries and return them as an ordered table.

    Raises:
        PatternSourceError: On duplicate or non-normalized keys, keys made only
            of stop words, empty CSS maps or implausible declarations.
    """
    table: PatternTable = {}
    for key, css in entries:
        if not isinstance(key, str) or not key:
            raise PatternSourceError(f"[{category}] pattern keys must be non-empty strings, got {key!r}")
        if key in table:
            raise PatternSourceError(f"[{category}] duplicate pattern key: {key!r}")
        if normalize(key) != key:
            raise PatternSourceError(f"[{category}] pattern key is not normalized: {key!r}")
        if not tokenize(key):
            raise PatternSourceError(f"[{category}] pattern key has no meaningful words: {key!r}")
        if not isinstance(css, Mapping) or not css:
            raise PatternSourceError(f"[{category}] pattern {key!r} has no CSS declarations")
        for prop, value in css.items():
            if not isinstance(prop, str) or not isinstance(value, str):
                raise PatternSourceError(f"[{category}] pattern {key!r} has a non-string declaration: {prop!r}")
            if not is_plausible_declaration(prop, value):
                raise PatternSourceError(f"[{category}] pattern {key!r} has an invalid declaration: {prop}: {value}")
        table[key] = dict(css)
    return table


class MergedPatternSource:
    """Base class: merges validated category tables on first access."""

    def __init__(self):
        self._lock = threading.Lock()
        self._categories: Optional[Dict[str, PatternTable]] = None
        self._patterns: Optional[PatternTable] = None

    def _load_categories(self) -> List[Tuple[str, CategoryEntries]]:
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._patterns is not None:
            return
        with self._lock:
            if self._patterns is not None:
                return
            categories: Dict[str, PatternTable] = {}
            merged: PatternTable = {}
            for name, entries in self._load_categories():
                if name in categories:
                    raise PatternSourceError(f"Category loaded twice: {name}")
                table = validate_category(name, entries)
                categories[name] = table
                for key, css in table.items():
                    if key in merged:
                        logger.debug(f"Pattern {key!r} from '{name}' overrides an earlier category")
                    merged[key] = css
            self._categories = categories
            self._patterns = merged
            logger.info(f"Loaded {len(merged)} patterns from {len(categories)} categories")

    def reload(self) -> None:
        """Drop the merged table; the next access loads it again."""
        with self._lock:
            self._categories = None
            self._patterns = None

    def get_all_patterns(self) -> PatternTable:
        """Return the merged table. Treat it as read-only; it is shared between calls."""
        self._ensure_loaded()
        return self._patterns

    def get_patterns_by_category(self, category: str) -> PatternTable:
        self._ensure_loaded()
        table = self._categories.get(category)
        if table is None:
            return {}
        return {key: dict(css) for key, css in table.items()}

    def get_categories(self) -> List[str]:
        self._ensure_loaded()
        return list(self._categories)

    def get_category_counts(self) -> Dict[str, int]:
        """Pattern count per category, before cross-category overrides."""
        self._ensure_loaded()
        return {name: len(table) for name, table in self._categories.items()}

    def get_pattern_count(self) -> int:
        """Number of effective (merged) patterns."""
        return len(self.get_all_patterns())


class CategoryPatternSource(MergedPatternSource):
    """The built-in library: one Python module per category exposing CATEGORY and PATTERNS."""

    def __init__(self, categories: Sequence[ModuleType] = DEFAULT_CATEGORIES):
        super().__init__()
        self.category_modules = tuple(categories)

    def _load_categories(self) -> List[Tuple[str, CategoryEntries]]:
        return [(module.CATEGORY, module.PATTERNS) for module in self.category_modules]


class DictPatternSource(MergedPatternSource):
    """A single in-memory table, e.g. a project-specific library or a test fixture."""

    def __init__(self, patterns: Mapping[str, Mapping[str, str]], category: str = 'custom'):
        super().__init__()
        self.category = category
        self._entries = [(key, dict(css)) for key, css in patterns.items()]

    def _load_categories(self) -> List[Tuple[str, CategoryEntries]]:
        return [(self.category, self._entries)]


class JsonPatternSource(MergedPatternSource):
    """
    Categories stored as JSON files, one per category (borders.json, colors.json, ...).

    Files load in file-name order. Each file holds an object mapping pattern
    keys to {property: value} objects.
    """

    def __init__(self, directory: str | Path):
        super().__init__()
        self.directory = Path(directory)

    def _load_categories(self) -> List[Tuple[str, CategoryEntries]]:
        categories = []
        for path in list_pattern_files(self.directory):
            # Pairs instead of dicts so duplicate keys in a file stay visible
            try:
                pairs = read_json_file(path, object_pairs_hook=JsonObjectPairs)
            except json.JSONDecodeError as e:
                raise PatternSourceError(f"{path.name} is not valid JSON: {e}") from e
            if not isinstance(pairs, JsonObjectPairs):
                raise PatternSourceError(f"{path.name} must contain a JSON object")
            entries = []
            for key, css_pairs in pairs:
                if not isinstance(css_pairs, JsonObjectPairs):
                    raise PatternSourceError(f"{path.name}: pattern {key!r} must map to an object")
                css = dict(css_pairs)
                if len(css) != len(css_pairs):
                    raise PatternSourceError(f"{path.name}: pattern {key!r} repeats a property")
                entries.append((key, css))
            categories.append((path.stem, entries))
            logger.debug(f"Read {len(entries)} patterns from {path}")
        return categories
