"""
Button Patterns
Complete button recipes: colors, sizes, shapes and variants.
"""

from typing import Dict, List, Tuple

CATEGORY = 'buttons'

PATTERNS: List[Tuple[str, Dict[str, str]]] = [
    # Basic button styles
    ('button', {
        'padding': '10px 20px',
        'border-radius': '4px',
        'border': 'none',
        'cursor': 'pointer',
        'display': 'inline-block',
        'text-align': 'center',
        'text-decoration': 'none',
        'transition': 'all 0.3s ease',
    }),
    ('make this a button', {
        'padding': '10px 20px',
        'border-radius': '4px',
        'border': 'none',
        'cursor': 'pointer',
        'display': 'inline-block',
        'text-align': 'center',
        'text-decoration': 'none',
    }),

    # Blue buttons
    ('blue button', {
        'background-color': '#0073aa',
        'color': '#ffffff',
        'padding': '10px 20px',
        'border-radius': '4px',
        'border': 'none',
        'cursor': 'pointer',
        'display': 'inline-block',
        'text-align': 'center',
        'font-weight': '500',
    }),
    ('primary button', {
        'background-color': '#0073aa',
        'color': '#ffffff',
        'padding': '12px 24px',
        'border-radius': '4px',
        'border': 'none',
        'cursor': 'pointer',
        'font-weight': '600',
    }),

    # Red buttons
    ('red button', {
        'background-color': '#dc3232',
        'color': '#ffffff',
        'padding': '10px 20px',
        'border-radius': '4px',
        'border': 'none',
        'cursor': 'pointer',
    }),
    ('danger button', {
        'background-color': '#dc3232',
        'color': '#ffffff',
        'padding': '10px 20px',
        'border-radius': '4px',
        'border': 'none',
    }),
    ('delete button', {
        'background-color': '#a00',
        'color': '#ffffff',
        'padding': '8px 16px',
        'border-radius': '4px',
    }),

    # Green buttons
    ('green button', {
        'background-color': '#46b450',
        'color': '#ffffff',
        'padding': '10px 20px',
        'border-radius': '4px',
        'border': 'none',
        'cursor': 'pointer',
    }),
    ('success button', {
        'background-color': '#46b450',
        'color': '#ffffff',
        'padding': '10px 20px',
        'border-radius': '4px',
    }),

    # Secondary/neutral buttons
    ('secondary button', {
        'background-color': '#f0f0f0',
        'color': '#333333',
        'padding': '10px 20px',
        'border-radius': '4px',
        'border': '1px solid #ddd',
        'cursor': 'pointer',
    }),
    ('gray button', {
        'background-color': '#666666',
        'color': '#ffffff',
        'padding': '10px 20px',
        'border-radius': '4px',
    }),
    ('grey button', {
        'background-color': '#666666',
        'color': '#ffffff',
        'padding': '10px 20px',
        'border-radius': '4px',
    }),

    # Button sizes
    ('large button', {
        'padding': '16px 32px',
        'font-size': '18px',
        'border-radius': '6px',
    }),
    ('small button', {
        'padding': '6px 12px',
        'font-size': '12px',
        'border-radius': '3px',
    }),

    # Button shapes
    ('rounded button', {
        'border-radius': '50px',
        'padding': '10px 24px',
    }),
    ('square button', {
        'border-radius': '0',
        'padding': '10px 20px',
    }),
    ('pill button', {
        'border-radius': '100px',
        'padding': '12px 32px',
    }),

    # Button states and effects
    ('button with shadow', {
        'box-shadow': '0 2px 4px rgba(0,0,0,0.2)',
        'padding': '10px 20px',
        'border-radius': '4px',
    }),
    ('flat button', {
        'box-shadow': 'none',
        'border': 'none',
        'background-color': '#f0f0f0',
        'padding': '10px 20px',
    }),
    ('outlined button', {
        'background-color': 'transparent',
        'border': '2px solid #0073aa',
        'color': '#0073aa',
        'padding': '10px 20px',
        'border-radius': '4px',
    }),
    ('ghost button', {
        'background-color': 'transparent',
        'border': '1px solid currentColor',
        'padding': '10px 20px',
        'border-radius': '4px',
    }),
]


def get_patterns() -> Dict[str, Dict[str, str]]:
    return {key: dict(css) for key, css in PATTERNS}
