from __future__ import annotations

from typing import Any, Dict, List

from punter.errors import MessageFormatError
from punter.game.map import Map, River, Site
from punter.game.state import GameState, initial_state


def require(record: Any, key: str) -> Any:
    if not isinstance(record, dict):
        raise MessageFormatError(f"Expected an object holding {key!r}, got {type(record).__name__}")
    if key not in record:
        raise MessageFormatError(f"Missing field {key!r}")
    return record[key]


def as_id(value: Any, name: str) -> int:
    # bool is an int subclass; JSON true/false is never a valid id.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise MessageFormatError(f"Field {name!r} must be a non-negative integer, got {value!r}")
    return value


def as_list(value: Any, name: str) -> List[Any]:
    if not isinstance(value, list):
        raise MessageFormatError(f"Field {name!r} must be a list")
    return value


def map_to_dict(game_map: Map) -> Dict[str, Any]:
    return {
        "sites": [{"id": site.id} for site in game_map.sites],
        "rivers": [
            {
                "source": river.source,
                "target": river.target,
                "claimed": river.claimed,
                "owner": river.owner,
            }
            for river in game_map.rivers
        ],
        "mines": list(game_map.mines),
    }


def map_from_dict(record: Any) -> Map:
    sites = [Site(as_id(require(site, "id"), "id")) for site in as_list(require(record, "sites"), "sites")]
    rivers: List[River] = []
    for entry in as_list(require(record, "rivers"), "rivers"):
        river = River(
            source=as_id(require(entry, "source"), "source"),
            target=as_id(require(entry, "target"), "target"),
        )
        if entry.get("claimed"):
            river.claimed = True
            river.owner = as_id(require(entry, "owner"), "owner")
        rivers.append(river)
    mines = [as_id(mine, "mines") for mine in as_list(require(record, "mines"), "mines")]
    return Map(sites=sites, rivers=rivers, mines=mines)


def state_to_dict(state: GameState) -> Dict[str, Any]:
    return {
        "punter": state.punter,
        "punters": state.punters,
        "map": map_to_dict(state.map),
    }


def state_from_dict(record: Any) -> GameState:
    return initial_state(
        punter=as_id(require(record, "punter"), "punter"),
        punters=as_id(require(record, "punters"), "punters"),
        game_map=map_from_dict(require(record, "map")),
    )
