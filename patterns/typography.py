"""
Typography Patterns
Font size, weight, alignment, decoration, transform and spacing of text.
"""

from typing import Dict, List, Tuple

CATEGORY = 'typography'

PATTERNS: List[Tuple[str, Dict[str, str]]] = [
    # Font sizes
    ('small text', {'font-size': '12px'}),
    ('small font', {'font-size': '12px'}),
    ('make this small', {'font-size': '12px'}),
    ('tiny text', {'font-size': '10px'}),
    ('tiny font', {'font-size': '10px'}),
    ('normal text', {'font-size': '16px'}),
    ('normal font', {'font-size': '16px'}),
    ('medium text', {'font-size': '18px'}),
    ('medium font', {'font-size': '18px'}),
    ('large text', {'font-size': '24px'}),
    ('large font', {'font-size': '24px'}),
    ('make this large', {'font-size': '24px'}),
    ('big text', {'font-size': '24px'}),
    ('big font', {'font-size': '24px'}),
    ('huge text', {'font-size': '36px'}),
    ('huge font', {'font-size': '36px'}),
    ('very large text', {'font-size': '32px'}),
    ('very large font', {'font-size': '32px'}),
    ('extra large text', {'font-size': '32px'}),
    ('extra large font', {'font-size': '32px'}),

    # Font weights
    ('bold', {'font-weight': 'bold'}),
    ('bold text', {'font-weight': 'bold'}),
    ('make this bold', {'font-weight': 'bold'}),
    ('make it bold', {'font-weight': 'bold'}),
    ('heavy text', {'font-weight': '700'}),
    ('extra bold', {'font-weight': '800'}),
    ('very bold', {'font-weight': '800'}),
    ('light text', {'font-weight': '300'}),
    ('light font', {'font-weight': '300'}),
    ('thin text', {'font-weight': '200'}),
    ('thin font', {'font-weight': '200'}),
    ('normal weight', {'font-weight': 'normal'}),
    ('regular weight', {'font-weight': 'normal'}),

    # Text alignment
    ('center this', {'text-align': 'center'}),
    ('center text', {'text-align': 'center'}),
    ('center align', {'text-align': 'center'}),
    ('align center', {'text-align': 'center'}),
    ('centered', {'text-align': 'center'}),
    ('left align', {'text-align': 'left'}),
    ('align left', {'text-align': 'left'}),
    ('left text', {'text-align': 'left'}),
    ('right align', {'text-align': 'right'}),
    ('align right', {'text-align': 'right'}),
    ('right text', {'text-align': 'right'}),
    ('justify', {'text-align': 'justify'}),
    ('justify text', {'text-align': 'justify'}),
    ('justified', {'text-align': 'justify'}),

    # Text decoration
    ('underline', {'text-decoration': 'underline'}),
    ('underline this', {'text-decoration': 'underline'}),
    ('underline text', {'text-decoration': 'underline'}),
    ('strikethrough', {'text-decoration': 'line-through'}),
    ('strike through', {'text-decoration': 'line-through'}),
    ('cross out', {'text-decoration': 'line-through'}),
    ('line through', {'text-decoration': 'line-through'}),
    ('no underline', {'text-decoration': 'none'}),
    ('remove underline', {'text-decoration': 'none'}),
    ('no decoration', {'text-decoration': 'none'}),

    # Text transform
    ('uppercase', {'text-transform': 'uppercase'}),
    ('all caps', {'text-transform': 'uppercase'}),
    ('make uppercase', {'text-transform': 'uppercase'}),
    ('capitalize', {'text-transform': 'capitalize'}),
    ('capitalize this', {'text-transform': 'capitalize'}),
    ('title case', {'text-transform': 'capitalize'}),
    ('lowercase', {'text-transform': 'lowercase'}),
    ('make lowercase', {'text-transform': 'lowercase'}),
    ('all lowercase', {'text-transform': 'lowercase'}),

    # Line height
    ('tight lines', {'line-height': '1.2'}),
    ('tight spacing', {'line-height': '1.2'}),
    ('normal line height', {'line-height': '1.5'}),
    ('normal spacing', {'line-height': '1.5'}),
    ('loose lines', {'line-height': '2'}),
    ('loose spacing', {'line-height': '2'}),
    ('double spaced', {'line-height': '2'}),
    ('single spaced', {'line-height': '1'}),

    # Letter spacing
    ('spread out', {'letter-spacing': '2px'}),
    ('wide letters', {'letter-spacing': '2px'}),
    ('spaced out', {'letter-spacing': '2px'}),
    ('tight letters', {'letter-spacing': '-0.5px'}),
    ('condensed', {'letter-spacing': '-0.5px'}),
    ('normal letter spacing', {'letter-spacing': 'normal'}),

    # Font style
    ('italic', {'font-style': 'italic'}),
    ('italicize', {'font-style': 'italic'}),
    ('make italic', {'font-style': 'italic'}),
    ('slanted', {'font-style': 'italic'}),
    ('not italic', {'font-style': 'normal'}),
    ('remove italic', {'font-style': 'normal'}),
]


def get_patterns() -> Dict[str, Dict[str, str]]:
    return {key: dict(css) for key, css in PATTERNS}
