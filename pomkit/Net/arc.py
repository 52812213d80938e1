# Net/arc.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .node import Place, Transition

Node = Union[Place, Transition]


class ArcKind(str, Enum):
    """Direction of an arc in the bipartite place/transition graph."""

    PLACE_TO_TRANSITION = "place_to_transition"
    TRANSITION_TO_PLACE = "transition_to_place"


@dataclass(eq=False)
class Arc:
    """
    Weighted arc between a place and a transition (either direction).

    The ``kind`` tag is fixed at construction so that consumers can tell the
    direction apart without inspecting the endpoint types.

    :param source: Source node.
    :type source: Union[Place, Transition]
    :param destination: Destination node.
    :type destination: Union[Place, Transition]
    :param weight: Arc multiplicity, defaults to 1.
    :type weight: int
    :raises ValueError: If both endpoints are places or both are transitions.
    """

    source: Node
    destination: Node
    weight: int = 1
    kind: ArcKind = field(init=False)

    def __post_init__(self) -> None:
        if isinstance(self.source, Place) and isinstance(self.destination, Transition):
            self.kind = ArcKind.PLACE_TO_TRANSITION
        elif isinstance(self.source, Transition) and isinstance(
            self.destination, Place
        ):
            self.kind = ArcKind.TRANSITION_TO_PLACE
        else:
            raise ValueError(
                "An arc must connect a place and a transition, got "
                f"{self.source!r} -> {self.destination!r}"
            )

    @property
    def source_id(self) -> str:
        return self.source.id

    @property
    def destination_id(self) -> str:
        return self.destination.id

    def __repr__(self) -> str:
        return f"Arc({self.source_id!r} -> {self.destination_id!r}, weight={self.weight})"
