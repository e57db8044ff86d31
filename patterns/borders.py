"""
Border Patterns
Border styles, widths, colors, radius and per-side borders.
"""

from typing import Dict, List, Tuple

CATEGORY = 'borders'

PATTERNS: List[Tuple[str, Dict[str, str]]] = [
    # Basic borders
    ('add border', {'border': '1px solid #cccccc'}),
    ('border', {'border': '1px solid #cccccc'}),
    ('with border', {'border': '1px solid #cccccc'}),
    ('give it a border', {'border': '1px solid #cccccc'}),
    ('no border', {'border': 'none'}),
    ('remove border', {'border': 'none'}),

    # Border styles
    ('solid border', {'border': '1px solid #cccccc'}),
    ('dashed border', {'border': '1px dashed #cccccc'}),
    ('dotted border', {'border': '1px dotted #cccccc'}),
    ('double border', {'border': '3px double #cccccc'}),

    # Border widths
    ('thin border', {'border': '1px solid #cccccc'}),
    ('medium border', {'border': '2px solid #cccccc'}),
    ('thick border', {'border': '4px solid #cccccc'}),
    ('heavy border', {'border': '5px solid #cccccc'}),

    # Border colors
    ('black border', {'border': '1px solid #000000'}),
    ('white border', {'border': '1px solid #ffffff'}),
    ('gray border', {'border': '1px solid #666666'}),
    ('grey border', {'border': '1px solid #666666'}),
    ('blue border', {'border': '1px solid #0073aa'}),
    ('red border', {'border': '1px solid #dc3232'}),
    ('green border', {'border': '1px solid #46b450'}),
    ('yellow border', {'border': '1px solid #ffb900'}),
    ('light gray border', {'border': '1px solid #cccccc'}),
    ('light grey border', {'border': '1px solid #cccccc'}),
    ('dark gray border', {'border': '1px solid #333333'}),
    ('dark grey border', {'border': '1px solid #333333'}),

    # Border radius (rounded corners)
    ('rounded corners', {'border-radius': '5px'}),
    ('rounded', {'border-radius': '5px'}),
    ('round corners', {'border-radius': '5px'}),
    ('slightly rounded', {'border-radius': '3px'}),
    ('very rounded', {'border-radius': '10px'}),
    ('extra rounded', {'border-radius': '15px'}),
    ('completely rounded', {'border-radius': '50%'}),
    ('circle', {'border-radius': '50%'}),
    ('pill shape', {'border-radius': '50px'}),
    ('no rounded corners', {'border-radius': '0'}),
    ('square corners', {'border-radius': '0'}),

    # Specific side borders
    ('border top', {'border-top': '1px solid #cccccc'}),
    ('top border', {'border-top': '1px solid #cccccc'}),
    ('border bottom', {'border-bottom': '1px solid #cccccc'}),
    ('bottom border', {'border-bottom': '1px solid #cccccc'}),
    ('border left', {'border-left': '1px solid #cccccc'}),
    ('left border', {'border-left': '1px solid #cccccc'}),
    ('border right', {'border-right': '1px solid #cccccc'}),
    ('right border', {'border-right': '1px solid #cccccc'}),

    # Combined patterns
    ('blue border rounded', {
        'border': '1px solid #0073aa',
        'border-radius': '5px',
    }),
    ('thick red border', {'border': '4px solid #dc3232'}),
    ('thin gray border', {'border': '1px solid #cccccc'}),
]


def get_patterns() -> Dict[str, Dict[str, str]]:
    return {key: dict(css) for key, css in PATTERNS}
