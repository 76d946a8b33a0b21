#!/usr/bin/env python3
# Minimal playback viewer for maze distance fields (needs the "viewer" extra).
# - Draws walls from the grid, shades visited cells by distance / max_distance
# - Snapshot shown = elapsed playback ticks * steps-per-second / 60
# - Space: pause/resume   R: new seed   Esc: quit
# - 60 Hz fixed loop

import argparse, logging
import pygame
from mazegrid.config import ALGORITHM_NAMES, DEFAULTS, MazeConfig
from mazegrid.engine.distances import DistanceField
from mazegrid.mapgen.generator import generate_grid
from mazegrid.primitives import Direction, GridPos

BG = (16, 16, 24)
WALL = (230, 230, 230)
NEAR = (40, 200, 120)
FAR = (40, 40, 160)

def shade(d, max_d):
    t = d / max_d if max_d else 0.0
    return tuple(int(n + (f - n) * t) for n, f in zip(NEAR, FAR))

def build(cfg, root):
    grid = generate_grid(cfg)
    history = DistanceField.new(root).run_to_completion_all(grid)
    return grid, history

def draw(screen, grid, snap, max_d, cell_px, margin):
    # Screen y grows downward; row 0 is the southern row, so flip it.
    def corner(row, col):
        return (margin + col * cell_px, margin + (grid.row_count - 1 - row) * cell_px)

    for cell in grid.cells():
        x, y = corner(cell.pos.row, cell.pos.col)
        d = snap.distance(cell.pos)
        if d is not None:
            pygame.draw.rect(screen, shade(d, max_d), pygame.Rect(x, y, cell_px, cell_px))

    for cell in grid.cells():
        x, y = corner(cell.pos.row, cell.pos.col)
        x1, y1 = x + cell_px, y + cell_px
        if not cell.is_open_to(Direction.NORTH):
            pygame.draw.line(screen, WALL, (x, y), (x1, y), 2)
        if not cell.is_open_to(Direction.SOUTH):
            pygame.draw.line(screen, WALL, (x, y1), (x1, y1), 2)
        if not cell.is_open_to(Direction.WEST):
            pygame.draw.line(screen, WALL, (x, y), (x, y1), 2)
        if not cell.is_open_to(Direction.EAST):
            pygame.draw.line(screen, WALL, (x1, y), (x1, y1), 2)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--cols", type=int, default=DEFAULTS.columns)
    ap.add_argument("--rows", type=int, default=DEFAULTS.rows)
    ap.add_argument("--algorithm", choices=ALGORITHM_NAMES, default=DEFAULTS.algorithm)
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--cell", type=int, default=24, help="Cell size in pixels")
    ap.add_argument("--speed", type=int, default=10, help="Flood-fill steps per second")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        cfg = MazeConfig(columns=args.cols, rows=args.rows, algorithm=args.algorithm, seed=args.seed)
    except ValueError as e:
        ap.error(str(e))
    root = GridPos.at(0, 0)
    grid, history = build(cfg, root)

    margin = args.cell // 2
    pygame.init()
    screen = pygame.display.set_mode((cfg.columns * args.cell + 2 * margin,
                                      cfg.rows * args.cell + 2 * margin))
    clock = pygame.time.Clock()

    ticks, paused, running = 0, False, True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_SPACE:
                    paused = not paused
                elif ev.key == pygame.K_r:
                    cfg = MazeConfig(columns=cfg.columns, rows=cfg.rows,
                                     algorithm=cfg.algorithm, seed=cfg.seed + 1)
                    grid, history = build(cfg, root)
                    ticks = 0

        if not paused:
            ticks += 1
        idx = min(len(history) - 1, ticks * args.speed // 60)
        snap = history[idx]

        screen.fill(BG)
        draw(screen, grid, snap, history[-1].max_distance, args.cell, margin)
        pygame.display.set_caption(
            f"Maze viewer: {cfg.algorithm} seed {cfg.seed}  step {idx}/{len(history) - 1}"
            f"  max {snap.max_distance}{'  [paused]' if paused else ''}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
