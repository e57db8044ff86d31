"""
Shadow Patterns
Box shadows, text shadows and glow effects.
"""

from typing import Dict, List, Tuple

CATEGORY = 'shadows'

PATTERNS: List[Tuple[str, Dict[str, str]]] = [
    # Basic box shadows
    ('add shadow', {'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'}),
    ('shadow', {'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'}),
    ('with shadow', {'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'}),
    ('give it shadow', {'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'}),
    ('no shadow', {'box-shadow': 'none'}),
    ('remove shadow', {'box-shadow': 'none'}),

    # Shadow intensities
    ('subtle shadow', {'box-shadow': '0 1px 2px rgba(0,0,0,0.05)'}),
    ('light shadow', {'box-shadow': '0 1px 3px rgba(0,0,0,0.08)'}),
    ('medium shadow', {'box-shadow': '0 2px 4px rgba(0,0,0,0.1)'}),
    ('heavy shadow', {'box-shadow': '0 4px 8px rgba(0,0,0,0.15)'}),
    ('deep shadow', {'box-shadow': '0 8px 16px rgba(0,0,0,0.2)'}),
    ('strong shadow', {'box-shadow': '0 8px 16px rgba(0,0,0,0.2)'}),
    ('very deep shadow', {'box-shadow': '0 12px 24px rgba(0,0,0,0.25)'}),

    # Shadow directions
    ('drop shadow', {'box-shadow': '0 4px 6px rgba(0,0,0,0.1)'}),
    ('inner shadow', {'box-shadow': 'inset 0 2px 4px rgba(0,0,0,0.1)'}),
    ('inset shadow', {'box-shadow': 'inset 0 2px 4px rgba(0,0,0,0.1)'}),

    # Elevated/raised effects
    ('elevated', {'box-shadow': '0 4px 12px rgba(0,0,0,0.15)'}),
    ('raised', {'box-shadow': '0 4px 12px rgba(0,0,0,0.15)'}),
    ('floating', {'box-shadow': '0 8px 24px rgba(0,0,0,0.15)'}),

    # Text shadows
    ('text shadow', {'text-shadow': '1px 1px 2px rgba(0,0,0,0.2)'}),
    ('text drop shadow', {'text-shadow': '2px 2px 4px rgba(0,0,0,0.3)'}),
    ('subtle text shadow', {'text-shadow': '1px 1px 1px rgba(0,0,0,0.1)'}),
    ('heavy text shadow', {'text-shadow': '2px 2px 6px rgba(0,0,0,0.4)'}),

    # Glow effects
    ('glow', {'box-shadow': '0 0 10px rgba(0,123,255,0.5)'}),
    ('glow effect', {'box-shadow': '0 0 10px rgba(0,123,255,0.5)'}),
    ('text glow', {'text-shadow': '0 0 8px rgba(0,123,255,0.8)'}),
    ('blue glow', {'box-shadow': '0 0 15px rgba(0,115,170,0.6)'}),
    ('green glow', {'box-shadow': '0 0 15px rgba(70,180,80,0.6)'}),
    ('red glow', {'box-shadow': '0 0 15px rgba(220,50,50,0.6)'}),

    # Combined shadows
    ('layered shadow', {'box-shadow': '0 2px 4px rgba(0,0,0,0.1), 0 8px 16px rgba(0,0,0,0.1)'}),
    ('complex shadow', {'box-shadow': '0 2px 4px rgba(0,0,0,0.1), 0 8px 16px rgba(0,0,0,0.1)'}),
]


def get_patterns() -> Dict[str, Dict[str, str]]:
    return {key: dict(css) for key, css in PATTERNS}
