"""Record source protocol.

The persistence layer a column cache falls back to when no explicit lookup
function is registered. The cache never builds queries itself.
"""

from typing import Any, Optional
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class RecordSource(Protocol):
    """Model class able to return the first record whose column equals value."""

    @classmethod
    def find_first_by(cls, column: str, value: str) -> Optional[Any]:
        """Return the first matching record or None."""
        ...
