"""Error codes, messages and exceptions for the selector builder.

Every failure the builder reports carries a kebab-case code so callers can
branch on ``error.code`` without matching message text.
"""

from __future__ import annotations

from typing import Any

DUPLICATE_FRAGMENT = "duplicate-fragment"
OUT_OF_ORDER = "out-of-order"


def generate_error_message(code: str, fragment: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        fragment: Optional fragment category name to include for context

    Returns:
        Human-readable error message string
    """
    messages = {
        DUPLICATE_FRAGMENT: "Element, id and pseudo-element should not occur more then one time inside the selector",
        OUT_OF_ORDER: (
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        ),
    }

    message = messages.get(code, code)

    if fragment and code in messages:
        return f"{message} (got {fragment})"

    return message


class SelectorBuilderError(ValueError):
    """Raised when a fragment cannot be added to a selector."""

    code: str
    category: Any
    value: str | None

    def __init__(self, code: str, category: Any = None, value: str | None = None) -> None:
        self.code = code
        self.category = category
        self.value = value
        label = category.label if category is not None else None
        super().__init__(generate_error_message(code, label))


class DuplicateFragmentError(SelectorBuilderError):
    """Element, id or pseudo-element set a second time on one selector."""

    def __init__(self, category: Any = None, value: str | None = None) -> None:
        super().__init__(DUPLICATE_FRAGMENT, category, value)


class OutOfOrderError(SelectorBuilderError):
    """Fragment added after a fragment of a later category."""

    def __init__(self, category: Any = None, value: str | None = None) -> None:
        super().__init__(OUT_OF_ORDER, category, value)
