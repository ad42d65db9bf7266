from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class Site:
    id: int


@dataclass
class River:
    source: int
    target: int
    claimed: bool = False
    # Only meaningful while claimed is True.
    owner: int = 0

    def other_end(self, site: int) -> int:
        return self.target if site == self.source else self.source

    def owned_by(self, punter: int) -> bool:
        return self.claimed and self.owner == punter


def build_adjacency_index(
    rivers: Iterable[River], sites: Iterable[Site] = ()
) -> Dict[int, List[int]]:
    """Map every site id to the indices of the rivers touching it.

    Rivers are visited in declaration order, so each adjacency list is
    ordered by river index. A self-loop is appended twice to its site.
    Sites without rivers get an empty list.
    """
    adjacency: Dict[int, List[int]] = {site.id: [] for site in sites}
    for index, river in enumerate(rivers):
        adjacency.setdefault(river.source, []).append(index)
        adjacency.setdefault(river.target, []).append(index)
    return adjacency


@dataclass
class Map:
    sites: List[Site]
    rivers: List[River]
    mines: List[int]
    adjacency: Dict[int, List[int]] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        self.reindex()

    def reindex(self) -> None:
        self.adjacency = build_adjacency_index(self.rivers, self.sites)

    def incident(self, site: int) -> List[int]:
        return self.adjacency.get(site, [])

    def clone(self) -> "Map":
        return Map(
            sites=list(self.sites),
            rivers=[
                River(river.source, river.target, river.claimed, river.owner)
                for river in self.rivers
            ],
            mines=list(self.mines),
        )
