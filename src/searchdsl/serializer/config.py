"""
Serialization Configuration Module.

Options controlling how a normalized request is encoded to JSON text. They do
not change the normalized structure produced by
[`OrderedSerializer.normalize()`][searchdsl.serializer.OrderedSerializer.normalize].
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SerializationConfig:
    """
    Encoding settings for [`OrderedSerializer.dumps()`][searchdsl.serializer.OrderedSerializer.dumps]
    and [`Search.to_json()`][searchdsl.search.Search.to_json].

    The defaults produce the compact form used for request fingerprints.
    """

    indent: Optional[int] = None
    """
    Number of spaces used to pretty-print nested levels.
    `None` produces compact output with no whitespace between tokens.
    """

    sort_unknown_keys: bool = True
    """
    When True, keys that have no declared position (field names, aggregation
    names, ...) are emitted alphabetically, so the text does not depend on the
    order the request was built in. Set it to False to keep insertion order.
    """

    ensure_ascii: bool = False
    """Escape every non-ASCII character in the output."""
