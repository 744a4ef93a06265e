"""Tests for builder error codes and messages."""

from cssbuilder import (
    Category,
    DuplicateFragmentError,
    OutOfOrderError,
    SelectorBuilderError,
    generate_error_message,
)


class TestGenerateErrorMessage:
    def test_known_codes(self):
        assert generate_error_message("duplicate-fragment").startswith("Element, id and pseudo-element")
        assert generate_error_message("out-of-order").startswith("Selector parts should be arranged")
    def test_fragment_context(self):
        assert generate_error_message("out-of-order", "class").endswith("(got class)")

    def test_unknown_code_falls_back_to_code(self):
        assert generate_error_message("no-such-code", "class") == "no-such-code"


class TestExceptions:
    def test_hierarchy(self):
        for cls in (DuplicateFragmentError, OutOfOrderError):
            assert issubclass(cls, SelectorBuilderError)
        assert issubclass(SelectorBuilderError, ValueError)

    def test_attributes(self):
        err = OutOfOrderError(Category.PSEUDO_CLASS, "hover")
        assert err.code == "out-of-order"
        assert err.category is Category.PSEUDO_CLASS
        assert err.value == "hover"
        assert str(err).endswith("(got pseudo-class)")

    def test_without_category(self):
        err = DuplicateFragmentError()
        assert err.category is None
        assert str(err) == generate_error_message("duplicate-fragment")
