"""
Element Context Module
Describes the element a style request targets (tag name and classes).

Matching does not read the context yet; it travels with the request so
downstream generators receive it unchanged.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Any

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class ElementContext:
    tag_name: Optional[str] = None
    class_list: Tuple[str, ...] = ()

    @classmethod
    def from_markup(cls, markup: str) -> 'ElementContext':
        """Build a context from the first element of an HTML snippet, e.g. '<button class="btn primary">'."""
        soup = BeautifulSoup(markup, 'html.parser')
        tag = soup.find(True)
        if tag is None:
            return cls()
        return cls(tag_name=tag.name, class_list=tuple(tag.get('class') or ()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tag_name': self.tag_name,
            'class_list': list(self.class_list),
        }
