# Net/petri_net.py
from __future__ import annotations

from typing import Dict, List, Optional, Set, Union

from .arc import Arc, ArcKind, Node
from .node import Place, Transition

NodeRef = Union[Place, Transition, str]


class PetriNet:
    """
    Bipartite multigraph of places and transitions.

    Nodes are owned by the net and keyed by string ids that are unique across
    both node kinds. Arcs keep direct references to their endpoints and are
    registered in the ``ingoing_arcs`` / ``outgoing_arcs`` lists of both
    endpoints. The sets :attr:`input_places` and :attr:`output_places` are
    kept up to date on every mutation.

    :param frequency: Number of traces this net represents, if known.
    :type frequency: Optional[int]

    Examples
    --------
    .. code-block:: python

        net = PetriNet()
        p0 = net.add_place()
        t = net.add_transition("a")
        p1 = net.add_place()
        net.add_arc(p0, t)
        net.add_arc(t, p1)
        assert net.input_places == {p0.id}
        assert net.output_places == {p1.id}
    """

    def __init__(self, frequency: Optional[int] = None) -> None:
        self.frequency: Optional[int] = frequency
        self._places: Dict[str, Place] = {}
        self._transitions: Dict[str, Transition] = {}
        self._arcs: Dict[Arc, None] = {}
        self._input_places: Set[str] = set()
        self._output_places: Set[str] = set()
        self._place_counter = 0
        self._transition_counter = 0

    # ------------------------------------------------------------------
    # Ids
    # ------------------------------------------------------------------
    def _has_id(self, node_id: str) -> bool:
        return node_id in self._places or node_id in self._transitions

    def _next_place_id(self) -> str:
        while True:
            self._place_counter += 1
            pid = f"p_{self._place_counter}"
            if not self._has_id(pid):
                return pid

    def _next_transition_id(self) -> str:
        while True:
            self._transition_counter += 1
            tid = f"t_{self._transition_counter}"
            if not self._has_id(tid):
                return tid

    # ------------------------------------------------------------------
    # Adding
    # ------------------------------------------------------------------
    def add_place(self, place_id: Optional[str] = None, marking: int = 0) -> Place:
        """
        Create a place and add it to the net.

        :param place_id: Custom id. If ``None``, a new ``p_<n>`` id is generated.
        :type place_id: Optional[str]
        :param marking: Initial token count.
        :type marking: int
        :returns: The created place.
        :rtype: Place
        :raises KeyError: If ``place_id`` is already used by a node of this net.
        """
        if place_id is None:
            place_id = self._next_place_id()
        elif self._has_id(place_id):
            raise KeyError(f"Node id {place_id!r} already exists")
        place = Place(id=place_id, marking=marking)
        self._places[place_id] = place
        self._input_places.add(place_id)
        self._output_places.add(place_id)
        return place

    def add_transition(
        self, label: str = "", transition_id: Optional[str] = None
    ) -> Transition:
        """
        Create a transition and add it to the net.

        :param label: Activity label, empty for a silent transition.
        :type label: str
        :param transition_id: Custom id. If ``None``, a new ``t_<n>`` id is
            generated.
        :type transition_id: Optional[str]
        :returns: The created transition.
        :rtype: Transition
        :raises KeyError: If ``transition_id`` is already used by a node of
            this net.
        """
        if transition_id is None:
            transition_id = self._next_transition_id()
        elif self._has_id(transition_id):
            raise KeyError(f"Node id {transition_id!r} already exists")
        transition = Transition(id=transition_id, label=label)
        self._transitions[transition_id] = transition
        return transition

    def add_arc(self, source: NodeRef, destination: NodeRef, weight: int = 1) -> Arc:
        """
        Connect two nodes of this net.

        :param source: Source node or its id.
        :param destination: Destination node or its id.
        :param weight: Arc weight.
        :type weight: int
        :returns: The created arc.
        :rtype: Arc
        :raises KeyError: If an endpoint does not belong to this net.
        :raises ValueError: If both endpoints are of the same kind.
        """
        src = self._resolve(source)
        dst = self._resolve(destination)
        arc = Arc(src, dst, weight)
        self._arcs[arc] = None
        src.outgoing_arcs.append(arc)
        dst.ingoing_arcs.append(arc)
        if arc.kind is ArcKind.TRANSITION_TO_PLACE:
            self._input_places.discard(dst.id)
        else:
            self._output_places.discard(src.id)
        return arc

    # ------------------------------------------------------------------
    # Removing
    # ------------------------------------------------------------------
    def remove_arc(self, arc: Arc) -> None:
        """
        Remove an arc and detach it from both endpoints.

        :param arc: Arc of this net.
        :type arc: Arc
        :raises KeyError: If the arc is not part of this net.
        """
        if arc not in self._arcs:
            raise KeyError(arc)
        del self._arcs[arc]
        arc.source.outgoing_arcs.remove(arc)
        arc.destination.ingoing_arcs.remove(arc)
        if arc.kind is ArcKind.TRANSITION_TO_PLACE:
            place = arc.destination
            if not place.ingoing_arcs and place.id in self._places:
                self._input_places.add(place.id)
        else:
            place = arc.source
            if not place.outgoing_arcs and place.id in self._places:
                self._output_places.add(place.id)

    def remove_place(self, place: Union[Place, str]) -> None:
        """
        Remove a place together with every arc touching it.

        :param place: Place or place id.
        :raises KeyError: If the place is not part of this net.
        """
        p = self._resolve_place(place)
        del self._places[p.id]
        self._input_places.discard(p.id)
        self._output_places.discard(p.id)
        for arc in list(p.ingoing_arcs) + list(p.outgoing_arcs):
            self.remove_arc(arc)

    def remove_transition(self, transition: Union[Transition, str]) -> None:
        """
        Remove a transition together with every arc touching it.

        :param transition: Transition or transition id.
        :raises KeyError: If the transition is not part of this net.
        """
        t = self._resolve_transition(transition)
        for arc in list(t.ingoing_arcs) + list(t.outgoing_arcs):
            self.remove_arc(arc)
        del self._transitions[t.id]

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------
    def get_place(self, place_id: str) -> Optional[Place]:
        return self._places.get(place_id)

    def get_transition(self, transition_id: str) -> Optional[Transition]:
        return self._transitions.get(transition_id)

    def get_places(self) -> List[Place]:
        return list(self._places.values())

    def get_transitions(self) -> List[Transition]:
        return list(self._transitions.values())

    def get_arcs(self) -> List[Arc]:
        return list(self._arcs)

    def get_place_count(self) -> int:
        return len(self._places)

    def get_transition_count(self) -> int:
        return len(self._transitions)

    def get_arc_count(self) -> int:
        return len(self._arcs)

    @property
    def input_places(self) -> Set[str]:
        """Ids of places without ingoing arcs."""
        return self._input_places

    @property
    def output_places(self) -> Set[str]:
        """Ids of places without outgoing arcs."""
        return self._output_places

    def is_empty(self) -> bool:
        return not self._places and not self._transitions

    def clone(self) -> PetriNet:
        """
        Deep copy that keeps every node id, so nodes of the copy can be looked
        up with the ids of the original.

        :returns: Independent copy of this net.
        :rtype: PetriNet
        """
        result = PetriNet(frequency=self.frequency)
        for p in self._places.values():
            result.add_place(p.id, marking=p.marking)
        for t in self._transitions.values():
            result.add_transition(t.label, transition_id=t.id)
        for a in self._arcs:
            result.add_arc(a.source_id, a.destination_id, a.weight)
        result._place_counter = self._place_counter
        result._transition_counter = self._transition_counter
        return result

    def _resolve(self, node: NodeRef) -> Node:
        node_id = node if isinstance(node, str) else node.id
        found = self._places.get(node_id) or self._transitions.get(node_id)
        if found is None or (not isinstance(node, str) and found is not node):
            raise KeyError(f"Node {node_id!r} is not part of this net")
        return found

    def _resolve_place(self, place: Union[Place, str]) -> Place:
        pid = place if isinstance(place, str) else place.id
        found = self._places.get(pid)
        if found is None or (not isinstance(place, str) and found is not place):
            raise KeyError(f"Place {pid!r} is not part of this net")
        return found

    def _resolve_transition(self, transition: Union[Transition, str]) -> Transition:
        tid = transition if isinstance(transition, str) else transition.id
        found = self._transitions.get(tid)
        if found is None or (
            not isinstance(transition, str) and found is not transition
        ):
            raise KeyError(f"Transition {tid!r} is not part of this net")
        return found

    def __repr__(self) -> str:
        return (
            f"PetriNet(places={len(self._places)}, "
            f"transitions={len(self._transitions)}, arcs={len(self._arcs)}, "
            f"frequency={self.frequency})"
        )
