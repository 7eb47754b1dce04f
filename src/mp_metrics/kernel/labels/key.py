"""Kernel labels – Label value object and the canonical LabelSetKey.

A :class:`LabelSetKey` identifies one time series inside a family.  Two label
sets holding the same ``(name, value)`` pairs produce equal keys whatever order
they were supplied in, while the original order is preserved separately for
export.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Union

from mp_metrics.kernel.errors import DuplicateLabelNameError

LabelsInput = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


@dataclasses.dataclass(frozen=True)
class Label:
    """One ``(name, value)`` pair attached to a metric instance."""

    name: str
    value: str

    def as_tuple(self) -> tuple[str, str]:
        return (self.name, self.value)


def to_labels(labels: LabelsInput) -> tuple[Label, ...]:
    """Normalise a mapping or an iterable of pairs into an ordered label tuple.

    Insertion order is kept.  Duplicate names raise
    :class:`DuplicateLabelNameError`.
    """
    if labels is None:
        return ()
    pairs = labels.items() if isinstance(labels, Mapping) else labels
    result: list[Label] = []
    seen: set[str] = set()
    for item in pairs:
        if isinstance(item, Label):
            name, value = item.name, item.value
        else:
            name, value = item
        if name in seen:
            raise DuplicateLabelNameError(name)
        seen.add(name)
        result.append(Label(name, str(value)))
    return tuple(result)


@dataclasses.dataclass(frozen=True)
class LabelSetKey:
    """Order-independent, hashable identity of a label set."""

    pairs: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_labels(cls, labels: LabelsInput) -> "LabelSetKey":
        """Build the canonical key for *labels*."""
        return cls._from_ordered(to_labels(labels))

    @classmethod
    def _from_ordered(cls, labels: tuple[Label, ...]) -> "LabelSetKey":
        return cls(tuple(sorted(label.as_tuple() for label in labels)))

    @classmethod
    def merge(
        cls,
        constant: tuple[Label, ...],
        dynamic: LabelsInput,
    ) -> tuple["LabelSetKey", tuple[Label, ...]]:
        """Merge constant and dynamic labels.

        Returns the canonical key together with the export-ordered labels
        (constant labels first, then dynamic labels in supplied order).
        """
        ordered = constant + to_labels(dynamic)
        names = [label.name for label in ordered]
        if len(set(names)) != len(names):
            seen: set[str] = set()
            for name in names:
                if name in seen:
                    raise DuplicateLabelNameError(
                        name, f"Label name {name!r} collides with a constant label"
                    )
                seen.add(name)
        return cls._from_ordered(ordered), ordered

    def as_dict(self) -> dict[str, str]:
        return dict(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


__all__ = ["Label", "LabelSetKey", "LabelsInput", "to_labels"]
