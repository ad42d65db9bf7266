from __future__ import annotations

import sys

from conftest import make_state
from punter.game.actions import Claim, Pass
from punter.game.state import initial_state
from punter.strategy import best_extension, choose_move
from punter.utils.serialization import map_from_dict


def test_single_river_from_mine_is_claimed():
    state = make_state([(0, 1)], [0])
    assert choose_move(state) == Claim(punter=0, source=0, target=1)


def test_pass_when_others_own_everything():
    state = make_state([(0, 1), (1, 2)], [0], owners={0: 1, 1: 1})
    assert choose_move(state) == Pass(punter=0)


def test_owned_chain_is_extended_before_a_fresh_edge():
    # 0 is the mine; 0-1 is ours, 1-2 and 2-3 are free, 0-4 is a lone free edge.
    state = make_state([(0, 4), (0, 1), (1, 2), (2, 3)], [0], owners={1: 0})
    extension = best_extension(state)
    assert (extension.river, extension.score) == (2, 2)
    assert choose_move(state) == Claim(punter=0, source=1, target=2)


def test_other_punters_rivers_are_not_walked():
    state = make_state([(0, 1), (1, 2)], [0], owners={0: 1})
    assert best_extension(state) is None
    assert choose_move(state) == Claim(punter=0, source=1, target=2)


def test_dead_end_chain_falls_back_to_first_unclaimed():
    state = make_state([(5, 6), (0, 1), (7, 8)], [0], owners={1: 0})
    assert best_extension(state) is None
    assert choose_move(state) == Claim(punter=0, source=5, target=6)


def test_owned_cycle_terminates_and_takes_longest_route():
    state = make_state([(0, 1), (1, 2), (2, 0), (2, 3)], [0], owners={0: 0, 1: 0, 2: 0})
    extension = best_extension(state)
    assert (extension.river, extension.score) == (3, 3)


def test_owned_self_loop_does_not_recurse_forever():
    state = make_state([(0, 0), (0, 1)], [0], owners={0: 0})
    assert choose_move(state) == Claim(punter=0, source=0, target=1)


def test_ties_go_to_the_first_mine_explored():
    state = make_state([(5, 6), (0, 1)], [0, 5])
    assert choose_move(state) == Claim(punter=0, source=0, target=1)


def test_choice_is_repeatable(sample_map):
    state = initial_state(1, 2, map_from_dict(sample_map))
    state.map.rivers[1].claimed = True
    state.map.rivers[1].owner = 1
    first = choose_move(state)
    assert choose_move(state) == first
    assert choose_move(state.clone()) == first


def test_never_passes_while_a_river_is_free():
    edges = [(0, 1), (1, 2), (2, 3), (3, 4)]
    for free in range(len(edges)):
        owners = {index: 1 for index in range(len(edges)) if index != free}
        move = choose_move(make_state(edges, [0], owners=owners))
        assert isinstance(move, Claim)
        assert (move.source, move.target) == edges[free]


def test_chain_longer_than_the_recursion_limit():
    length = sys.getrecursionlimit() + 500
    edges = [(site, site + 1) for site in range(length)] + [(length, length + 1)]
    state = make_state(edges, [0], owners={index: 0 for index in range(length)})
    extension = best_extension(state)
    assert (extension.river, extension.score) == (length, length + 1)
    assert choose_move(state) == Claim(punter=0, source=length, target=length + 1)


def test_search_leaves_no_marks_between_turns():
    state = make_state([(0, 1), (1, 2), (2, 0), (2, 3)], [0, 2], owners={0: 0, 1: 0, 2: 0})
    first = best_extension(state)
    assert best_extension(state) == first
