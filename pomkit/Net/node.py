# Net/node.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:  # pragma: no cover
    from .arc import Arc


@dataclass(eq=False)
class Place:
    """
    A place of a Petri net.

    Places are compared and hashed by identity; two places with the same
    ``id`` in different nets are different objects.

    :param id: Identifier, unique within the owning net.
    :type id: str
    :param marking: Number of tokens. Only used by the general isomorphism
        test.
    :type marking: int
    """

    id: str
    marking: int = 0
    ingoing_arcs: List["Arc"] = field(default_factory=list, repr=False)
    outgoing_arcs: List["Arc"] = field(default_factory=list, repr=False)

    def get_id(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return (
            f"Place(id={self.id!r}, marking={self.marking}, "
            f"in={len(self.ingoing_arcs)}, out={len(self.outgoing_arcs)})"
        )


@dataclass(eq=False)
class Transition:
    """
    A labelled transition of a Petri net.

    :param id: Identifier, unique within the owning net.
    :type id: str
    :param label: Activity label; the empty string marks a silent transition.
    :type label: str
    """

    id: str
    label: str = ""
    ingoing_arcs: List["Arc"] = field(default_factory=list, repr=False)
    outgoing_arcs: List["Arc"] = field(default_factory=list, repr=False)

    def get_id(self) -> str:
        return self.id

    @property
    def is_silent(self) -> bool:
        return self.label == ""

    def __repr__(self) -> str:
        return f"Transition(id={self.id!r}, label={self.label!r})"
