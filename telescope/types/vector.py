from __future__ import annotations


class Vector(list):
    """Ordered sequence with append-at-the-end `cons` semantics.

    Kept distinct from a plain list: a Vector never compares equal to a list
    holding the same items.
    """

    __slots__ = ()

    def __eq__(self, other):
        return isinstance(other, Vector) and list.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({list.__repr__(self)})"
