"""
Void elements: tag names that never take children or a close tag.
"""

# Case-sensitive, as written in the source
VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr'
})


def is_void_element(tag: str) -> bool:
    return tag in VOID_ELEMENTS
