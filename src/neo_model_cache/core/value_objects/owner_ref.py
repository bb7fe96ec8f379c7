"""Owner reference value object.

ONLY owner identity - normalizes the type (or plain name) on whose behalf
caches are registered, so all cache state can be partitioned by owner.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from ..exceptions.store import InvalidOwnerError


@dataclass(frozen=True, eq=False)
class OwnerRef:
    """Owner reference value object.

    Class owners are compared by the class object itself, so two distinct
    classes sharing a ``module.QualName`` (factory-built or reloaded classes)
    never share cache state. String owners are compared by name and never
    equal a class owner.
    """

    name: str
    owner_type: Optional[type] = field(default=None, repr=False)

    def __post_init__(self):
        """Validate owner name on creation."""
        if not self.name or not self.name.strip():
            raise InvalidOwnerError(self.name, "owner name cannot be empty")

    @classmethod
    def of(cls, owner: Any) -> "OwnerRef":
        """Create an owner reference from a class, a string or another reference."""
        if isinstance(owner, OwnerRef):
            return owner
        if isinstance(owner, type):
            return cls(f"{owner.__module__}.{owner.__qualname__}", owner)
        if isinstance(owner, str):
            return cls(owner)
        raise InvalidOwnerError(owner, "expected a class or a non-empty string")

    @property
    def identity(self) -> Tuple[str, Any]:
        """Value used for equality and hashing."""
        if self.owner_type is not None:
            return ("type", self.owner_type)
        return ("name", self.name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, OwnerRef):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    @property
    def is_type(self) -> bool:
        """Whether the owner is a real class accessors can be installed on."""
        return self.owner_type is not None

    @property
    def display_name(self) -> str:
        """Short name used in messages."""
        if self.owner_type is not None:
            return self.owner_type.__name__
        return self.name

    def __str__(self) -> str:
        return self.name
