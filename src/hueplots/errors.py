"""Errors raised when a category→color binding is built or read incorrectly."""


class BindingError(ValueError):
    """Base class for category/color binding contract violations."""


class ArityMismatch(BindingError):
    """Labels and colors were not supplied in equal numbers."""

    def __init__(self, n_labels: int, n_colors: int) -> None:
        self.n_labels = n_labels
        self.n_colors = n_colors
        super().__init__(
            f"Got {n_labels} label(s) but {n_colors} color(s); "
            "a binding needs exactly one color per label"
        )


class DuplicateLabel(BindingError):
    """The same label appeared more than once."""

    def __init__(self, label) -> None:
        self.label = label
        super().__init__(f"Label {label!r} appears more than once")


class UnknownLabel(BindingError, KeyError):
    """A requested label has no color in the binding.

    Also a ``KeyError``, so ``Mapping.get`` and ``in`` keep working.
    """

    def __init__(self, label, known) -> None:
        self.label = label
        self.known = tuple(known)
        super().__init__(
            f"No color bound to label {label!r} (known labels: "
            f"{', '.join(repr(k) for k in self.known)})"
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]
