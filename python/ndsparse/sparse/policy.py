"""Missing-entry policies.

A policy decides what reading an unassigned coordinate means and whether
writing a particular value is stored at all:

- :class:`DefaultSubstitution` -- unassigned reads return ``default``;
  assigning ``default`` removes the entry instead of storing it.
- :class:`Strict` -- unassigned reads raise ``OutOfRangeError``; every write
  is stored verbatim, zeros included.

Policies are small immutable values; arrays compare equal only when their
policies compare equal.
"""


class Strict:
    """Unassigned reads fail; every assignment is retained."""

    __slots__ = ()

    def __eq__(self, other):
        return isinstance(other, Strict)

    def __hash__(self):
        return hash(Strict)

    def __repr__(self):
        return "Strict()"


class DefaultSubstitution:
    """Unassigned reads return ``default``; writing ``default`` removes the entry.

    Parameters
    ----------
    default : scalar, optional
        Value of every unassigned coordinate. ``None`` asks the owning array
        to use the additive identity of its dtype.
    """

    __slots__ = ("default",)

    def __init__(self, default=None):
        self.default = default

    def __eq__(self, other):
        if not isinstance(other, DefaultSubstitution):
            return False
        return bool(self.default == other.default)

    def __hash__(self):
        return hash((DefaultSubstitution, self.default))

    def __repr__(self):
        return f"DefaultSubstitution(default={self.default!r})"


def is_strict(policy) -> bool:
    return isinstance(policy, Strict)
