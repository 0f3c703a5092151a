"""Stable category → color bindings shared across independent charts.

A binding pairs each category label with one color, once. Charts then ask
for colors *by label*, so dropping or reordering categories in one chart
never shifts the colors another chart shows for the same labels.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType

from .errors import ArityMismatch, DuplicateLabel, UnknownLabel

logger = logging.getLogger(__name__)


class CategoryColorBinding(Mapping):
    """Immutable, ordered label → color mapping.

    Iterates labels in construction order. Use :meth:`resolve` (or the
    module-level :func:`resolve`) to turn the labels a chart displays into
    the colors to draw them with.
    """

    __slots__ = ("_colors",)

    def __init__(self, labels: Iterable[Hashable], colors: Iterable) -> None:
        labels = tuple(labels)
        colors = tuple(colors)
        if len(labels) != len(colors):
            raise ArityMismatch(len(labels), len(colors))

        pairs: dict = {}
        for label, color in zip(labels, colors):
            if label in pairs:
                raise DuplicateLabel(label)
            pairs[label] = color

        object.__setattr__(self, "_colors", MappingProxyType(pairs))
        logger.debug(f"Bound {len(pairs)} categories: {list(pairs)}")

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy and pickle would otherwise restore the slot through __setattr__
        return (type(self), (self.labels, self.colors))

    # Mapping protocol

    def __getitem__(self, label):
        try:
            return self._colors[label]
        except KeyError:
            raise UnknownLabel(label, self._colors) from None

    def __iter__(self) -> Iterator:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, label) -> bool:
        return label in self._colors

    def __eq__(self, other) -> bool:
        if not isinstance(other, CategoryColorBinding):
            return NotImplemented
        return list(self._colors.items()) == list(other._colors.items())

    def __hash__(self) -> int:
        return hash(tuple(self._colors.items()))

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self._colors.items())
        return f"{type(self).__name__}({{{pairs}}})"

    @property
    def labels(self) -> tuple:
        return tuple(self._colors)

    @property
    def colors(self) -> tuple:
        return tuple(self._colors.values())

    def resolve(self, labels: Iterable[Hashable]) -> list:
        """Colors for ``labels``, in the order the labels were given.

        Raises :class:`UnknownLabel` for the first label with no color.
        """
        return [self[label] for label in labels]

    def restrict(self, labels: Iterable[Hashable]) -> CategoryColorBinding:
        """A new binding holding only ``labels``, in request order."""
        labels = tuple(labels)
        return CategoryColorBinding(labels, self.resolve(labels))

    def recolor(self, colors: Iterable) -> CategoryColorBinding:
        """A new binding with the same labels and replacement colors."""
        return CategoryColorBinding(self.labels, colors)


def bind(labels: Iterable[Hashable], colors: Iterable) -> CategoryColorBinding:
    """Pair the i-th label with the i-th color.

    Raises :class:`ArityMismatch` if the lengths differ and
    :class:`DuplicateLabel` if a label repeats.
    """
    return CategoryColorBinding(labels, colors)


def resolve(binding: CategoryColorBinding, labels: Iterable[Hashable]) -> list:
    """Colors of ``labels`` in ``binding``, in the requested order."""
    return binding.resolve(labels)


def from_palette(labels: Iterable[Hashable], palette: Sequence) -> CategoryColorBinding:
    """Bind labels to the leading colors of ``palette``.

    The palette is never cycled: running out of colors raises
    :class:`ArityMismatch`, since reusing a color would merge two categories.
    """
    labels = tuple(labels)
    if len(labels) > len(palette):
        raise ArityMismatch(len(labels), len(palette))
    return CategoryColorBinding(labels, palette[: len(labels)])
