#!/usr/bin/env python3
"""
Orthogonal A* Viewer: animates one expansion per tick.

- Keyboard:
    [1]/[2]/[3]  -> switch map
    [T]          -> toggle direction-change penalty
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit
- Mouse:
    left click on a cell -> toggle block (search resets)

Config: --cost=, --penalty=, --log= (see orthostar.config)
"""

import logging
import sys
import time
from typing import Dict, List, Optional, Set, Tuple

import pygame

from orthostar import config
from orthostar.core.astar import AStarSearch
from orthostar.core.maps import MapSpec, load_map
from orthostar.core.types import Position

log = logging.getLogger(__name__)

# ---------- Config ----------
MAP_FILES = {
    "01_blocked_column": config.MAP_DIR / "01_blocked_column.json",
    "02_corridors":      config.MAP_DIR / "02_corridors.json",
    "03_walled_in":      config.MAP_DIR / "03_walled_in.json",
}
PANEL_W = 320
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 48
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255, 255, 255)
BLACK       = (  0,   0,   0)
BLUE        = ( 70, 130, 180)
RED         = (220,  50,  47)
FLOOR_GRAY  = (200, 200, 200)
BLOCK_DARK  = ( 40,  44,  52)
OPEN_CYAN_A = (0, 150, 255, 110)
CLOSED_MAG_A = (255, 0, 120, 90)
PATH_MINT   = (0, 255, 200)
BG_DARK     = ( 24,  26,  32)
TEXT_LIGHT  = (230, 235, 240)
ACCENT_GOLD = (255, 210, 0)


class Viewer:
    def __init__(self, spec: MapSpec, map_key: str = "custom", argv: Optional[List[str]] = None):
        pygame.init()
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 26)

        self.argv = argv or []
        self.selected_map_key = map_key
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 8
        self._last_step_t = 0.0

        self.open_set: Set[Position] = set()
        self.closed_set: Set[Position] = set()
        self.path: List[Position] = []
        self.running = False
        self.state = "Idle"
        self._last_metrics: Dict[str, object] = {}

        self._load_spec(spec)
        pygame.display.set_caption(f"Orthogonal A* - {self.spec.name}")

    # ---------- setup ----------
    def _load_spec(self, spec: MapSpec):
        self.spec = spec
        # --cost/--penalty (or env) override what the map file says
        cost = config.resolve_move_cost(self.argv, default=spec.move_cost)
        penalty = config.resolve_turn_penalty(self.argv, default=spec.turn_penalty)
        self.search = AStarSearch(spec.grid, move_cost=cost, turn_penalty=penalty)
        self._layout()
        self._reset()

    def _layout(self):
        rows, cols = self.spec.grid.dimensions()
        self.cell_size = max(14, min(CELL_SIZE_DEFAULT, (720 - 2 * GRID_MARGIN) // rows))
        w = GRID_MARGIN * 2 + cols * self.cell_size + PANEL_W
        h = max(GRID_MARGIN * 2 + rows * self.cell_size, 420)
        self.screen = pygame.display.set_mode((w, h))
        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.open_set.clear()
        self.closed_set.clear()
        self.path = []
        self.search.reset(self.spec.start, self.spec.goal)
        self.open_set.add(self.spec.start)
        self._last_metrics = self.search.metrics()

    # ---------- loop ----------
    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self.search.step()
        for c in res.opened: self.open_set.add(c)
        for c in res.closed:
            self.open_set.discard(c)
            self.closed_set.add(c)
        if res.path is not None: self.path = res.path
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "exhausted":
            self.state = "No path"; self.running = False
        else:
            self.state = "Running" if self.running else "Paused"
        if res.metrics:
            self._last_metrics = res.metrics

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    if self.state not in ("Done", "No path"):
                        self.running = not self.running
                        self.state = "Running" if self.running else "Paused"
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key == pygame.K_t:
                    self._toggle_penalty()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self.steps_per_sec = min(60, self.steps_per_sec + 1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self.steps_per_sec = max(1, self.steps_per_sec - 1)
                elif e.key == pygame.K_1:
                    self._switch_map("01_blocked_column")
                elif e.key == pygame.K_2:
                    self._switch_map("02_corridors")
                elif e.key == pygame.K_3:
                    self._switch_map("03_walled_in")
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                self._toggle_block_at(e.pos)

    def _toggle_penalty(self):
        self.search.turn_penalty = None if self.search.turn_penalty else config.DEFAULT_TURN_PENALTY
        self._reset()

    def _toggle_block_at(self, pos: Tuple[int, int]):
        ox, oy = self._grid_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        grid = self.spec.grid
        if not grid.in_bounds(row, col) or (row, col) in (self.spec.start, self.spec.goal):
            return
        grid.set_block(row, col, not grid.is_blocked(row, col))
        self._reset()

    def _switch_map(self, key: str):
        if key not in MAP_FILES: return
        try:
            spec = load_map(MAP_FILES[key])
        except (OSError, ValueError, KeyError, IndexError) as ex:
            log.error("Failed to load map %s: %s", key, ex)
            return
        self.selected_map_key = key
        self._load_spec(spec)
        pygame.display.set_caption(f"Orthogonal A* - {spec.name}")

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BG_DARK)
        self._draw_grid()
        self._draw_metrics()
        pygame.display.flip()

    def _cell_rect(self, cell: Position) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        return pygame.Rect(ox + col * cs, oy + row * cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        grid = self.spec.grid
        rows, cols = grid.dimensions()
        for row in range(rows):
            for col in range(cols):
                rect = self._cell_rect((row, col))
                pygame.draw.rect(self.screen, BLOCK_DARK if grid.is_blocked(row, col) else FLOOR_GRAY, rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        for cells, color in ((self.closed_set, CLOSED_MAG_A), (self.open_set, OPEN_CYAN_A)):
            for cell in cells:
                s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(color)
                self.screen.blit(s, self._cell_rect(cell).topleft)

        if len(self.path) >= 2:
            pts = [self._cell_rect(c).center for c in self.path]
            pygame.draw.lines(self.screen, PATH_MINT, False, pts, 5)

        self._draw_badge(self.spec.start, BLUE, "S")
        self._draw_badge(self.spec.goal, RED, "G")

    def _draw_badge(self, cell: Position, color: Tuple[int, int, int], label: str):
        center = self._cell_rect(cell).center
        pygame.draw.circle(self.screen, color, center, max(6, self.cell_size // 2 - 4))
        txt = self.font.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=center))

    def _draw_metrics(self):
        rows, cols = self.spec.grid.dimensions()
        x0 = GRID_MARGIN * 2 + cols * self.cell_size + 8
        y0 = GRID_MARGIN

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        m = self._last_metrics
        line("Metrics", big=True, color=ACCENT_GOLD)
        line(f"State: {self.state}")
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("total_cost") is not None:
            line(f"Total Cost: {m['total_cost']}")
        line("-" * 26)
        line(f"Map: {self.spec.name}")
        line(f"Step cost: {self.search.move_cost}")
        line(f"Turn penalty: {self.search.turn_penalty or 'off'}")
        line(f"Speed: {self.steps_per_sec} steps/s")


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    config.setup_logging(argv)
    map_path = config.resolve_option("map", "ORTHOSTAR_MAP", None, argv)
    key = "custom" if map_path else "01_blocked_column"
    try:
        spec = load_map(map_path or MAP_FILES[key])
        viewer = Viewer(spec, key, argv)
    except (OSError, ValueError, KeyError, IndexError) as ex:
        log.error("Failed to load default map: %s", ex)
        sys.exit(1)
    viewer.run()


if __name__ == "__main__":
    main()
