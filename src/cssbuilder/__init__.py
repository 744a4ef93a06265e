from .builder import (
    COMBINATORS,
    Category,
    CombinedSelector,
    CompoundSelector,
    SelectorBuilder,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
    stringify,
)
from .errors import (
    DuplicateFragmentError,
    OutOfOrderError,
    SelectorBuilderError,
    generate_error_message,
)
from .records import Rectangle, from_json, to_json

__all__ = [
    "COMBINATORS",
    "Category",
    "CombinedSelector",
    "CompoundSelector",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorBuilderError",
    "attr",
    "class_",
    "combine",
    "css_selector_builder",
    "element",
    "from_json",
    "generate_error_message",
    "id",
    "pseudo_class",
    "pseudo_element",
    "stringify",
    "to_json",
]
