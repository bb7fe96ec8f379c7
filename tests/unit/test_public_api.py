"""
Unit tests for the module-level public surface and error responses.
"""

import pytest

import neo_model_cache
from neo_model_cache import (
    DuplicateNameError,
    InvalidOwnerError,
    MissingLookupError,
    ModelCacheError,
    OwnerRef,
    RegistrationError,
    create_error_response,
    fetch_column_cache,
    fetch_lazy_cache,
    get_default_model_cache,
    get_settings,
    invalidate_lazy_cache,
    register_column_cache,
    register_lazy_cache,
    reset_default_model_cache,
)


class TestModuleFunctions:
    """Test the process-wide default cache."""

    def test_register_fetch_invalidate(self, user_model, mocker):
        compute = mocker.Mock(return_value="R")
        register_lazy_cache(user_model, "featured", compute)

        assert user_model.featured() == "R"
        assert fetch_lazy_cache(user_model, "featured") == "R"
        assert compute.call_count == 1

        invalidate_lazy_cache(user_model, "featured")
        user_model.featured()
        assert compute.call_count == 2

    def test_register_column_cache(self, user_model, make_record):
        record = make_record(id=1)
        register_column_cache(user_model, "email", lambda email: record, {"as": "by_email"})

        assert user_model.by_email("a@x.com") is record
        assert fetch_column_cache(user_model, "email", "a@x.com") is record

    def test_register_column_cache_without_lookup(self, user_model, model_cache):
        """The lookup argument is optional and its absence is a registration error."""
        with pytest.raises(MissingLookupError):
            register_column_cache(user_model, "email")
        with pytest.raises(MissingLookupError):
            model_cache.register_column_cache(user_model, "email", options={"as": "by_email"})

        assert not hasattr(user_model, "email")
        assert not hasattr(user_model, "by_email")

    def test_get_settings(self, user_model):
        register_lazy_cache(user_model, "featured", lambda: 1, {"ttl": 10})

        assert get_settings(user_model).ttl_seconds == 10

    def test_reset_removes_accessors(self, user_model):
        register_lazy_cache(user_model, "featured", lambda: 1)
        first = get_default_model_cache()

        reset_default_model_cache()

        assert not hasattr(user_model, "featured")
        assert get_default_model_cache() is not first

    def test_version(self):
        assert neo_model_cache.__version__


class TestOwnerRef:
    """Test owner normalization."""

    def test_class_owner(self, user_model):
        owner = OwnerRef.of(user_model)

        assert owner.is_type
        assert owner.display_name == "User"
        assert owner.name.endswith("User")
        assert OwnerRef.of(owner) is owner

    def test_string_owner(self):
        owner = OwnerRef.of("User")

        assert not owner.is_type
        assert owner == OwnerRef("User")

    def test_class_owner_never_equals_string_owner(self, user_model):
        owner = OwnerRef.of(user_model)

        assert owner != OwnerRef.of(owner.name)
        assert len({owner, OwnerRef.of(owner.name), OwnerRef.of(user_model)}) == 2

    def test_invalid_owner(self):
        with pytest.raises(InvalidOwnerError):
            OwnerRef.of("")
        with pytest.raises(InvalidOwnerError):
            OwnerRef.of(42)


class TestErrors:
    """Test the error hierarchy."""

    def test_hierarchy(self):
        assert issubclass(DuplicateNameError, RegistrationError)
        assert issubclass(RegistrationError, ModelCacheError)

    def test_error_response(self, user_model):
        register_lazy_cache(user_model, "featured", lambda: 1)

        with pytest.raises(DuplicateNameError) as exc_info:
            register_lazy_cache(user_model, "featured", lambda: 2)

        response = create_error_response(exc_info.value)
        assert response["error"]["code"] == "DUPLICATE_ACCESSOR_NAME"
        assert response["error"]["type"] == "DuplicateNameError"
        assert response["error"]["details"]["name"] == "featured"
