"""Model class integration.

Mixing CachedModelMixin into a model class adds class-level helpers that
register caches with the class as owner:

    class User(CachedModelMixin, Base):
        @classmethod
        def find_first_by(cls, column, value):
            return session.query(cls).filter(getattr(cls, column) == value).first()

    User.lazy_cache("admin", lambda: User.find_first_by("email", "admin@x.com"))
    User.cache_by_column("email", as_="by_email")

    User.admin()
    User.by_email("a@x.com")
"""

from typing import Any, Callable, ClassVar, Optional

from .core.entities.cache_settings import CacheSettings
from .core.exceptions.registration import MissingLookupError
from .core.protocols.record_source import RecordSource
from .core.value_objects.owner_ref import OwnerRef
from .model_cache import ModelCache, get_default_model_cache


class CachedModelMixin:
    """Adds lazy and column cache helpers to a model class.

    Caches go to the process-wide ModelCache unless the class sets
    ``__model_cache__`` to its own instance.
    """

    __model_cache__: ClassVar[Optional[ModelCache]] = None

    @classmethod
    def model_cache(cls) -> ModelCache:
        return cls.__model_cache__ or get_default_model_cache()

    @classmethod
    def lazy_cache(cls, name: str, compute: Optional[Callable[[], Any]] = None, **options: Any) -> None:
        """Register a lazy cache; ``cls.<name>()`` returns the memoized result."""
        cls.model_cache().register_lazy_cache(cls, name, compute, options)

    @classmethod
    def expire_lazy_cache(cls, name: Optional[str] = None) -> int:
        """Expire one lazy cache of the class, or all of them when no name is given."""
        return cls.model_cache().invalidate_lazy_cache(cls, name)

    @classmethod
    def cache_by_column(
        cls,
        column: str,
        lookup: Optional[Callable[[str], Optional[Any]]] = None,
        as_: Optional[str] = None,
        **options: Any
    ) -> None:
        """Register a column cache; ``cls.<as_ or column>(key)`` returns the record.

        Without ``lookup`` the class's ``find_first_by(column, value)`` is used.
        """
        if lookup is None:
            lookup = _record_source_lookup(cls, str(column))
        if as_ is not None:
            options["as"] = as_
        cls.model_cache().register_column_cache(cls, column, lookup, options)

    @classmethod
    def cache_settings(cls) -> CacheSettings:
        return cls.model_cache().get_settings(cls)


def _record_source_lookup(model: RecordSource, column: str) -> Callable[[str], Optional[Any]]:
    finder = getattr(model, "find_first_by", None)
    if not callable(finder):
        raise MissingLookupError.for_column(OwnerRef.of(model).display_name, column)

    def lookup(value: str) -> Optional[Any]:
        return finder(column, value)

    return lookup
