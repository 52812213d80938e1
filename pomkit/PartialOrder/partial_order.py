# PartialOrder/partial_order.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set

import networkx as nx


@dataclass(eq=False)
class Event:
    """
    An event of a :class:`PartialOrder`.

    :param id: Identifier, unique within the partial order.
    :type id: str
    :param label: Activity label.
    :type label: str
    """

    id: str
    label: str
    next_events: Set[str] = field(default_factory=set)
    previous_events: Set[str] = field(default_factory=set)


class PartialOrder:
    """
    Canonical view of a partial order: labelled events and direct precedence
    edges between them, without the place layer of a Petri net.
    """

    def __init__(self) -> None:
        self._events: Dict[str, Event] = {}

    def add_event(self, event_id: str, label: str) -> Event:
        """
        :raises KeyError: If ``event_id`` already exists.
        """
        if event_id in self._events:
            raise KeyError(f"Event id {event_id!r} already exists")
        e = Event(event_id, label)
        self._events[event_id] = e
        return e

    def add_edge(self, pre_id: str, post_id: str) -> None:
        """
        :raises KeyError: If either event is unknown.
        """
        pre = self._events[pre_id]
        post = self._events[post_id]
        pre.next_events.add(post_id)
        post.previous_events.add(pre_id)

    def get_event(self, event_id: str) -> Optional[Event]:
        return self._events.get(event_id)

    @property
    def events(self) -> List[Event]:
        return list(self._events.values())

    @property
    def initial_events(self) -> List[Event]:
        return [e for e in self._events.values() if not e.previous_events]

    @property
    def final_events(self) -> List[Event]:
        return [e for e in self._events.values() if not e.next_events]

    def edge_count(self) -> int:
        return sum(len(e.next_events) for e in self._events.values())

    def to_digraph(self) -> nx.DiGraph:
        """
        Export as a networkx ``DiGraph`` with a ``label`` node attribute.

        :returns: Directed graph over event ids.
        :rtype: networkx.DiGraph
        """
        G = nx.DiGraph()
        for e in self._events.values():
            G.add_node(e.id, label=e.label)
        for e in self._events.values():
            for n in e.next_events:
                G.add_edge(e.id, n)
        return G

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"PartialOrder(events={len(self._events)}, edges={self.edge_count()})"
