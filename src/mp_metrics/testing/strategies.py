"""Testing – Hypothesis strategies for metric and label names.

Requires the ``hypothesis`` package:

    pip install "mp-metrics[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "0123456789"


def metric_name_strategy() -> "SearchStrategy[str]":
    """Names matching ``[a-zA-Z_:][a-zA-Z0-9_:]*``."""
    st = _require_hypothesis()
    head = st.sampled_from(_LETTERS + "_:")
    tail = st.text(alphabet=_LETTERS + _DIGITS + "_:", max_size=24)
    return st.builds(lambda h, t: h + t, head, tail)


def label_name_strategy() -> "SearchStrategy[str]":
    """Non-reserved names matching ``[a-zA-Z_][a-zA-Z0-9_]*``."""
    st = _require_hypothesis()
    head = st.sampled_from(_LETTERS + "_")
    tail = st.text(alphabet=_LETTERS + _DIGITS + "_", max_size=16)
    return st.builds(lambda h, t: h + t, head, tail).filter(lambda n: not n.startswith("__"))


def label_set_strategy(*, min_size: int = 0, max_size: int = 5) -> "SearchStrategy[dict[str, str]]":
    """Label dicts with valid names and arbitrary values."""
    st = _require_hypothesis()
    return st.dictionaries(
        keys=label_name_strategy(),
        values=st.text(max_size=12),
        min_size=min_size,
        max_size=max_size,
    )


def bucket_boundaries_strategy(*, max_size: int = 10) -> "SearchStrategy[list[float]]":
    """Strictly ascending finite boundary lists (possibly empty)."""
    st = _require_hypothesis()
    return st.sets(
        st.floats(allow_nan=False, allow_infinity=False, min_value=-1e9, max_value=1e9),
        max_size=max_size,
    ).map(sorted)


__all__ = [
    "bucket_boundaries_strategy",
    "label_name_strategy",
    "label_set_strategy",
    "metric_name_strategy",
]
