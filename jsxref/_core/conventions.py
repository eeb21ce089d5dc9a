import re
from typing import Final

_INTRINSIC_TAG_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r'^[a-z]|-')


def is_intrinsic_tag_name(name: str, /) -> bool:
    """
    Checks if given element name follows the built-in tag convention
    (starts with a lowercase letter or contains a hyphen),
    so it denotes a host element rather than a binding.
    """
    return _INTRINSIC_TAG_NAME_PATTERN.search(name) is not None
