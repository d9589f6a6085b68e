"""selectorkit — build CSS selector strings from composable parts."""

from __future__ import annotations

from selectorkit.domain.errors import DuplicateFragmentError, OrderError, SelectorError
from selectorkit.domain.fragments import FragmentKind
from selectorkit.domain.selectors import (
    CombinedSelector,
    Combinator,
    Selector,
    SelectorBuilder,
    combine,
)
from selectorkit.facade import CssSelectorBuilder, css_selector_builder

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Combinator",
    "CombinedSelector",
    "CssSelectorBuilder",
    "DuplicateFragmentError",
    "FragmentKind",
    "OrderError",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "combine",
    "css_selector_builder",
]
