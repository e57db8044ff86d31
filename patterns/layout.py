"""
Layout Patterns
Display, flexbox, positioning, sizing, overflow, float and stacking.
"""

from typing import Dict, List, Tuple

CATEGORY = 'layout'

PATTERNS: List[Tuple[str, Dict[str, str]]] = [
    # Display properties
    ('hide this', {'display': 'none'}),
    ('hide', {'display': 'none'}),
    ('hidden', {'display': 'none'}),
    ('show this', {'display': 'block'}),
    ('show', {'display': 'block'}),
    ('visible', {'display': 'block'}),
    ('block', {'display': 'block'}),
    ('inline', {'display': 'inline'}),
    ('inline block', {'display': 'inline-block'}),
    ('flex', {'display': 'flex'}),
    ('flexbox', {'display': 'flex'}),
    ('grid', {'display': 'grid'}),

    # Flexbox patterns
    ('center with flex', {
        'display': 'flex',
        'justify-content': 'center',
        'align-items': 'center',
    }),
    ('flex center', {
        'display': 'flex',
        'justify-content': 'center',
        'align-items': 'center',
    }),
    ('space between', {
        'display': 'flex',
        'justify-content': 'space-between',
    }),
    ('space around', {
        'display': 'flex',
        'justify-content': 'space-around',
    }),
    ('flex row', {
        'display': 'flex',
        'flex-direction': 'row',
    }),
    ('flex column', {
        'display': 'flex',
        'flex-direction': 'column',
    }),
    ('vertical center', {
        'display': 'flex',
        'align-items': 'center',
    }),
    ('horizontal center', {
        'display': 'flex',
        'justify-content': 'center',
    }),

    # Positioning
    ('absolute', {'position': 'absolute'}),
    ('absolute position', {'position': 'absolute'}),
    ('relative', {'position': 'relative'}),
    ('relative position', {'position': 'relative'}),
    ('fixed', {'position': 'fixed'}),
    ('fixed position', {'position': 'fixed'}),
    ('sticky', {'position': 'sticky'}),
    ('sticky position', {'position': 'sticky'}),
    ('static', {'position': 'static'}),

    # Width and height
    ('full width', {'width': '100%'}),
    ('100 width', {'width': '100%'}),
    ('full height', {'height': '100%'}),
    ('100 height', {'height': '100%'}),
    ('half width', {'width': '50%'}),
    ('50 width', {'width': '50%'}),
    ('auto width', {'width': 'auto'}),
    ('auto height', {'height': 'auto'}),

    # Overflow
    ('scrollable', {'overflow': 'auto'}),
    ('scroll', {'overflow': 'auto'}),
    ('hide overflow', {'overflow': 'hidden'}),
    ('overflow hidden', {'overflow': 'hidden'}),
    ('overflow visible', {'overflow': 'visible'}),

    # Float
    ('float left', {'float': 'left'}),
    ('float right', {'float': 'right'}),
    ('no float', {'float': 'none'}),
    ('clear float', {'clear': 'both'}),

    # Z-index
    ('bring to front', {'z-index': '100'}),
    ('send to back', {'z-index': '1'}),
    ('on top', {'z-index': '999'}),
]


def get_patterns() -> Dict[str, Dict[str, str]]:
    return {key: dict(css) for key, css in PATTERNS}
