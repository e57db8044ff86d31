"""
Spacing Patterns
Padding and margin, general and per side.
"""

from typing import Dict, List, Tuple

CATEGORY = 'spacing'

PATTERNS: List[Tuple[str, Dict[str, str]]] = [
    # Padding - general
    ('add padding', {'padding': '20px'}),
    ('padding', {'padding': '20px'}),
    ('with padding', {'padding': '20px'}),
    ('give it padding', {'padding': '20px'}),
    ('small padding', {'padding': '10px'}),
    ('tiny padding', {'padding': '5px'}),
    ('medium padding', {'padding': '20px'}),
    ('large padding', {'padding': '40px'}),
    ('big padding', {'padding': '40px'}),
    ('huge padding', {'padding': '60px'}),
    ('no padding', {'padding': '0'}),
    ('remove padding', {'padding': '0'}),

    # Padding - specific sides
    ('padding left', {'padding-left': '20px'}),
    ('left padding', {'padding-left': '20px'}),
    ('padding right', {'padding-right': '20px'}),
    ('right padding', {'padding-right': '20px'}),
    ('padding top', {'padding-top': '20px'}),
    ('top padding', {'padding-top': '20px'}),
    ('padding bottom', {'padding-bottom': '20px'}),
    ('bottom padding', {'padding-bottom': '20px'}),

    # Margin - general
    ('add margin', {'margin': '20px'}),
    ('margin', {'margin': '20px'}),
    ('with margin', {'margin': '20px'}),
    ('give it margin', {'margin': '20px'}),
    ('small margin', {'margin': '10px'}),
    ('tiny margin', {'margin': '5px'}),
    ('medium margin', {'margin': '20px'}),
    ('large margin', {'margin': '40px'}),
    ('big margin', {'margin': '40px'}),
    ('huge margin', {'margin': '60px'}),
    ('no margin', {'margin': '0'}),
    ('remove margin', {'margin': '0'}),

    # Margin - specific sides
    ('margin left', {'margin-left': '20px'}),
    ('left margin', {'margin-left': '20px'}),
    ('margin right', {'margin-right': '20px'}),
    ('right margin', {'margin-right': '20px'}),
    ('margin top', {'margin-top': '20px'}),
    ('top margin', {'margin-top': '20px'}),
    ('margin bottom', {'margin-bottom': '20px'}),
    ('bottom margin', {'margin-bottom': '20px'}),

    # Margin auto (centering)
    ('center with margin', {'margin': '0 auto'}),
    ('margin auto', {'margin': '0 auto'}),
    ('auto margin', {'margin': '0 auto'}),
    ('horizontal center', {'margin': '0 auto'}),

    # Vertical spacing
    ('space above', {'margin-top': '20px'}),
    ('space below', {'margin-bottom': '20px'}),
    ('space around', {'margin': '20px'}),

    # Combined padding and margin
    ('padding and margin', {
        'padding': '20px',
        'margin': '20px',
    }),
    ('add spacing', {
        'padding': '20px',
        'margin': '20px',
    }),
]


def get_patterns() -> Dict[str, Dict[str, str]]:
    return {key: dict(css) for key, css in PATTERNS}
