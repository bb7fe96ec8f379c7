"""Unit tests for the accessor binder."""

import pytest

from neo_model_cache import AccessorBinder, CacheAccessor, DuplicateNameError


class TestAccessorBinder:
    """Test accessor installation and lookup."""

    def test_install_on_class(self):
        class User:
            pass

        binder = AccessorBinder()
        binder.install_accessor(User, "featured", lambda: "R")

        assert User.featured() == "R"
        assert User().featured() == "R"
        assert isinstance(User.__dict__["featured"], CacheAccessor)
        assert User.featured.__name__ == "featured"

    def test_accessor_visible_to_subclasses(self):
        class User:
            pass

        class Admin(User):
            pass

        binder = AccessorBinder()
        binder.install_accessor(User, "featured", lambda: "R")

        assert Admin.featured() == "R"
        assert binder.has_accessor(Admin, "featured")

    def test_has_accessor_sees_plain_members(self):
        class User:
            def save(self):
                pass

        binder = AccessorBinder()

        assert binder.has_accessor(User, "save")
        assert binder.has_accessor(User, "__init__")
        assert not binder.has_accessor(User, "featured")

    def test_install_duplicate_raises(self):
        class User:
            pass

        binder = AccessorBinder()
        binder.install_accessor(User, "featured", lambda: 1)

        with pytest.raises(DuplicateNameError):
            binder.install_accessor(User, "featured", lambda: 2)

        assert User.featured() == 1

    def test_string_owner_dispatch(self):
        binder = AccessorBinder()
        binder.install_accessor("User", "by_email", lambda email: email.upper())

        assert binder.has_accessor("User", "by_email")
        assert binder.call("User", "by_email", "a@x.com") == "A@X.COM"
        assert binder.accessor_names("User") == ["by_email"]

    def test_resolve_unknown_raises_attribute_error(self):
        binder = AccessorBinder()

        with pytest.raises(AttributeError):
            binder.call("User", "missing")

    def test_remove_accessor(self):
        class User:
            pass

        binder = AccessorBinder()
        binder.install_accessor(User, "featured", lambda: 1)

        assert binder.remove_accessor(User, "featured") is True
        assert not hasattr(User, "featured")
        assert binder.remove_accessor(User, "featured") is False
        assert binder.owners() == []
