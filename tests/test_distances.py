# tests/test_distances.py
import pytest

from mazegrid.config import MazeConfig
from mazegrid.engine.distances import DistanceField
from mazegrid.grid import Grid
from mazegrid.mapgen.generator import generate_grid
from mazegrid.mapgen.sidewinder import run_sidewinder
from mazegrid.primitives import Col, Direction, GridPos, Row
from mazegrid.rng import SequenceRandom

ORIGIN = GridPos(Row(0), Col(0))

def maze(cols, rows, seed=7):
    return generate_grid(MazeConfig(columns=cols, rows=rows, seed=seed))

def snake_3x2():
    # Path: (0,0) N (1,0) E (1,1) E (1,2) S (0,2) W (0,1)
    return run_sidewinder(Grid.new(3, 2), SequenceRandom([1, 1, 2, 2, 1]))

def test_new_snapshot():
    d = DistanceField.new(ORIGIN)
    assert dict(d.distances) == {ORIGIN: 0}
    assert d.frontier == (ORIGIN,)
    assert d.max_distance == 0
    assert not d.is_terminal

def test_exact_distances_on_scripted_maze():
    d = DistanceField.new(ORIGIN).run_to_completion(snake_3x2())
    assert dict(d.distances) == {
        GridPos.at(0, 0): 0,
        GridPos.at(1, 0): 1,
        GridPos.at(1, 1): 2,
        GridPos.at(1, 2): 3,
        GridPos.at(0, 2): 4,
        GridPos.at(0, 1): 5,
    }
    assert d.max_distance == 5
    assert d.is_terminal

def test_step_does_not_mutate_previous_snapshot():
    grid = snake_3x2()
    first = DistanceField.new(ORIGIN)
    second = first.step(grid)
    assert dict(first.distances) == {ORIGIN: 0}
    assert first.frontier == (ORIGIN,)
    assert dict(second.distances) == {ORIGIN: 0, GridPos.at(1, 0): 1}
    assert second.frontier == (GridPos.at(1, 0),)
    assert second.max_distance == 1

def test_terminal_snapshot_steps_to_none():
    grid = snake_3x2()
    d = DistanceField.new(ORIGIN).run_to_completion(grid)
    assert d.step(grid) is None

def test_distance_absent_before_reached():
    grid = snake_3x2()
    d = DistanceField.new(ORIGIN).step(grid)
    assert d.distance(GridPos.at(1, 0)) == 1
    assert d.distance(GridPos.at(0, 1)) is None

def test_history_keeps_every_snapshot():
    grid = snake_3x2()
    history = DistanceField.new(ORIGIN).run_to_completion_all(grid)
    assert len(history) == 7  # initial + one per position
    assert [h.visited_count for h in history] == [1, 2, 3, 4, 5, 6, 6]
    assert [h.max_distance for h in history] == [0, 1, 2, 3, 4, 5, 5]
    assert dict(history[0].distances) == {ORIGIN: 0}
    assert history[-1].is_terminal

def test_sixteen_steps_on_4x4():
    grid = maze(4, 4)
    d = DistanceField.new(ORIGIN)
    steps = 0
    while True:
        nxt = d.step(grid)
        if nxt is None:
            break
        steps += 1
        d = nxt
    assert steps == 16

@pytest.mark.parametrize("cols,rows", [(2, 2), (4, 4), (4, 8), (8, 30)])
def test_visits_every_position(cols, rows):
    grid = maze(cols, rows)
    d = DistanceField.new(ORIGIN).run_to_completion(grid)
    assert len(d.distances) == cols * rows
    assert sorted(d.distances) == grid.positions()

def test_all_distances_up_to_6_on_4x4():
    for seed in (1, 2, 3, 4):
        d = DistanceField.new(ORIGIN).run_to_completion(maze(4, 4, seed))
        values = set(d.distances.values())
        for x in range(7):
            assert x in values

def open_neighbors(grid, pos):
    cell = grid.get(pos)
    for direction in Direction:
        if cell.is_open_to(direction):
            yield grid.relative_position(pos, direction)

def test_distances_are_shortest_paths():
    grid = maze(9, 6, seed=31)
    d = DistanceField.new(GridPos.at(2, 4)).run_to_completion(grid)
    for pos, dist in d.distances.items():
        near = [d.distances[other] for other in open_neighbors(grid, pos)]
        # in a tree every neighbor is one step closer or one step farther
        assert all(abs(n - dist) == 1 for n in near)
        if pos != d.root:
            assert dist - 1 in near
        else:
            assert dist == 0

def test_walled_grid_terminates_with_root_only():
    grid = Grid.new(3, 3)
    history = DistanceField.new(ORIGIN).run_to_completion_all(grid)
    assert len(history) == 2
    assert dict(history[-1].distances) == {ORIGIN: 0}
    assert history[-1].is_terminal

def test_same_grid_feeds_independent_runs():
    grid = maze(5, 5)
    a = DistanceField.new(ORIGIN).run_to_completion(grid)
    b = DistanceField.new(GridPos.at(4, 4)).run_to_completion(grid)
    assert a.distance(GridPos.at(4, 4)) == b.distance(ORIGIN)
    assert a.root == ORIGIN and b.root == GridPos.at(4, 4)

@pytest.mark.parametrize("cols,rows", [(1, 1), (3, 2), (6, 6), (10, 4)])
def test_single_pass_run_matches_stepped_history(cols, rows):
    grid = maze(cols, rows, seed=cols * rows)
    root = GridPos.at(rows - 1, 0)
    fast = DistanceField.new(root).run_to_completion(grid)
    history = DistanceField.new(root).run_to_completion_all(grid)
    last = history[-1]
    assert dict(fast.distances) == dict(last.distances)
    assert fast.max_distance == last.max_distance
    assert fast.frontier == last.frontier == ()
    assert fast.root == root

def test_run_to_completion_resumes_mid_history():
    grid = maze(5, 5, seed=3)
    history = DistanceField.new(ORIGIN).run_to_completion_all(grid)
    resumed = history[4].run_to_completion(grid)
    assert dict(resumed.distances) == dict(history[-1].distances)
    assert resumed.max_distance == history[-1].max_distance
    # the snapshot it started from is unchanged
    assert history[4].visited_count < resumed.visited_count

def test_run_to_completion_on_walled_grid():
    d = DistanceField.new(ORIGIN).run_to_completion(Grid.new(3, 3))
    assert dict(d.distances) == {ORIGIN: 0}
    assert d.is_terminal and d.max_distance == 0

def test_snapshots_are_not_hashable():
    d = DistanceField.new(ORIGIN)
    with pytest.raises(TypeError):
        hash(d)
    assert d == DistanceField.new(ORIGIN)
