"""
Color Patterns
Text colors, background colors, admin palette and status colors.
"""

from typing import Dict, List, Tuple

CATEGORY = 'colors'

PATTERNS: List[Tuple[str, Dict[str, str]]] = [
    # Basic blue colors
    ('blue', {'color': '#0073aa'}),
    ('make this blue', {'color': '#0073aa'}),
    ('blue text', {'color': '#0073aa'}),
    ('color blue', {'color': '#0073aa'}),
    ('light blue', {'color': '#00a0d2'}),
    ('dark blue', {'color': '#005177'}),
    ('bright blue', {'color': '#00b9eb'}),
    ('navy blue', {'color': '#003050'}),

    # Basic red colors
    ('red', {'color': '#dc3232'}),
    ('red text', {'color': '#dc3232'}),
    ('make this red', {'color': '#dc3232'}),
    ('color red', {'color': '#dc3232'}),
    ('light red', {'color': '#f56e28'}),
    ('dark red', {'color': '#8a1b1b'}),
    ('bright red', {'color': '#ff3333'}),

    # Basic green colors
    ('green', {'color': '#46b450'}),
    ('green text', {'color': '#46b450'}),
    ('make this green', {'color': '#46b450'}),
    ('color green', {'color': '#46b450'}),
    ('light green', {'color': '#5fd35f'}),
    ('dark green', {'color': '#2e7d32'}),

    # Basic yellow colors
    ('yellow', {'color': '#ffb900'}),
    ('yellow text', {'color': '#ffb900'}),
    ('make this yellow', {'color': '#ffb900'}),
    ('light yellow', {'color': '#ffd700'}),
    ('dark yellow', {'color': '#e6a800'}),

    # Basic orange colors
    ('orange', {'color': '#f56e28'}),
    ('orange text', {'color': '#f56e28'}),
    ('make this orange', {'color': '#f56e28'}),
    ('light orange', {'color': '#ff8c3a'}),
    ('dark orange', {'color': '#d85a1a'}),

    # Basic purple colors
    ('purple', {'color': '#826eb4'}),
    ('purple text', {'color': '#826eb4'}),
    ('make this purple', {'color': '#826eb4'}),
    ('light purple', {'color': '#a88cd4'}),
    ('dark purple', {'color': '#5e4d80'}),

    # Neutral colors
    ('black', {'color': '#000000'}),
    ('black text', {'color': '#000000'}),
    ('white', {'color': '#ffffff'}),
    ('white text', {'color': '#ffffff'}),
    ('gray', {'color': '#666666'}),
    ('grey', {'color': '#666666'}),
    ('gray text', {'color': '#666666'}),
    ('grey text', {'color': '#666666'}),
    ('light gray', {'color': '#cccccc'}),
    ('light grey', {'color': '#cccccc'}),
    ('dark gray', {'color': '#333333'}),
    ('dark grey', {'color': '#333333'}),

    # Background colors - blue
    ('blue background', {'background-color': '#0073aa'}),
    ('light blue background', {'background-color': '#00a0d2'}),
    ('dark blue background', {'background-color': '#005177'}),

    # Background colors - red
    ('red background', {'background-color': '#dc3232'}),
    ('light red background', {'background-color': '#f56e28'}),
    ('dark red background', {'background-color': '#8a1b1b'}),

    # Background colors - green
    ('green background', {'background-color': '#46b450'}),
    ('light green background', {'background-color': '#5fd35f'}),
    ('dark green background', {'background-color': '#2e7d32'}),

    # Background colors - yellow
    ('yellow background', {'background-color': '#ffb900'}),
    ('light yellow background', {'background-color': '#ffd700'}),

    # Background colors - neutral
    ('white background', {'background-color': '#ffffff'}),
    ('black background', {'background-color': '#000000'}),
    ('gray background', {'background-color': '#666666'}),
    ('grey background', {'background-color': '#666666'}),
    ('light gray background', {'background-color': '#f0f0f0'}),
    ('light grey background', {'background-color': '#f0f0f0'}),
    ('dark gray background', {'background-color': '#333333'}),
    ('dark grey background', {'background-color': '#333333'}),

    # Admin palette
    ('wordpress blue', {'color': '#0073aa'}),
    ('wp blue', {'color': '#0073aa'}),
    ('admin blue', {'color': '#0073aa'}),
    ('admin red', {'color': '#dc3232'}),
    ('admin green', {'color': '#46b450'}),
    ('admin orange', {'color': '#f56e28'}),

    # Status colors
    ('success', {'color': '#46b450'}),
    ('success green', {'color': '#46b450'}),
    ('error', {'color': '#dc3232'}),
    ('error red', {'color': '#dc3232'}),
    ('warning', {'color': '#ffb900'}),
    ('warning yellow', {'color': '#ffb900'}),
    ('info', {'color': '#00a0d2'}),
    ('info blue', {'color': '#00a0d2'}),

    # Combined patterns
    ('blue with white background', {
        'color': '#0073aa',
        'background-color': '#ffffff',
    }),
    ('white with blue background', {
        'color': '#ffffff',
        'background-color': '#0073aa',
    }),
    ('black with white background', {
        'color': '#000000',
        'background-color': '#ffffff',
    }),
    ('white with black background', {
        'color': '#ffffff',
        'background-color': '#000000',
    }),
    ('red with white background', {
        'color': '#dc3232',
        'background-color': '#ffffff',
    }),
    ('green with white background', {
        'color': '#46b450',
        'background-color': '#ffffff',
    }),
]


def get_patterns() -> Dict[str, Dict[str, str]]:
    return {key: dict(css) for key, css in PATTERNS}
