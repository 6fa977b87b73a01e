import logging
import pygame
from pathviz import config
from pathviz.app.session import Session
from pathviz.core.errors import UserInputError

logger = logging.getLogger(__name__)

ALGO_KEYS = {
    pygame.K_1: "bfs",
    pygame.K_2: "dijkstra",
    pygame.K_3: "astar",
}


class Renderer:
    def __init__(self, session: Session, cell_size: int = config.CELL_SIZE, record=False):
        self.session = session
        self.cell_size = cell_size
        self.screen_width = session.cols * cell_size
        self.screen_height = session.rows * cell_size + config.HUD_HEIGHT

        from pathviz.viz.recorder import VideoRecorder
        self.recorder = VideoRecorder(active=record)

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.mouse_down = False

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Pathfinding Visualizer - {self.session.cols}x{self.session.rows}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

    def world_to_screen(self, wx, wy):
        return wx * self.cell_size, wy * self.cell_size

    def screen_to_world(self, sx, sy):
        return int(sx // self.cell_size), int(sy // self.cell_size)

    def paint(self, pos):
        wx, wy = self.screen_to_world(*pos)
        self.session.click(wx, wy)

    def handle_key(self, key, now_ms):
        session = self.session
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key in ALGO_KEYS:
            session.select_algorithm(ALGO_KEYS[key])
        elif key == pygame.K_SPACE:
            try:
                session.start(now_ms)
            except UserInputError as e:
                session.notice = str(e)
                logger.warning(str(e))
        elif key == pygame.K_r:
            session.reset()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            session.set_delay(session.delay_ms + config.DELAY_STEP_MS)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            session.set_delay(session.delay_ms - config.DELAY_STEP_MS)

    def handle_input(self):
        now_ms = pygame.time.get_ticks()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key, now_ms)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.mouse_down = True
                self.paint(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.mouse_down = False

            elif event.type == pygame.MOUSEMOTION and self.mouse_down:
                self.paint(event.pos)

    def fill_cell(self, cell, color):
        px, py = self.world_to_screen(cell.x, cell.y)
        pygame.draw.rect(self.surface, color, (px, py, self.cell_size, self.cell_size))

    def draw_grid(self):
        """Draws walls, search overlay, endpoints and path onto self.surface."""
        session = self.session
        self.surface.fill(config.COLOR_BG)

        # 1. Grid lines & walls
        for cell in session.grid:
            px, py = self.world_to_screen(cell.x, cell.y)
            pygame.draw.rect(self.surface, config.COLOR_GRID_LINE, (px, py, self.cell_size, self.cell_size), 1)
            if cell.is_wall:
                self.fill_cell(cell, config.COLOR_WALL)

        # 2. Closed then open set
        for cell in session.state.visited:
            self.fill_cell(cell, config.COLOR_VISITED)
        for cell in session.state.frontier:
            self.fill_cell(cell, config.COLOR_FRONTIER)

        # 3. Path (goal back to, not including, start)
        for cell in session.path:
            self.fill_cell(cell, config.COLOR_PATH)

        # 4. Endpoints on top
        if session.start_cell is not None:
            self.fill_cell(session.start_cell, config.COLOR_START)
        if session.goal_cell is not None and not session.path:
            self.fill_cell(session.goal_cell, config.COLOR_GOAL)

    def draw_hud(self):
        session = self.session
        metrics = session.state.metrics
        top = session.rows * self.cell_size
        pygame.draw.rect(self.surface, config.COLOR_HUD_BG, (0, top, self.screen_width, config.HUD_HEIGHT))

        status = "Running" if session.running else "Idle"
        rec_status = " REC" if self.recorder.active else ""
        info = [
            f"[1] BFS [2] Dijkstra [3] A*   Algo: {session.algorithm.label}   Delay: {session.delay_ms:.0f}ms (+/-)",
            f"Visited: {metrics.visited_count}   Time: {metrics.elapsed():.2f}s   Path: {len(session.path)}   {status}{rec_status}",
        ]
        for i, text in enumerate(info):
            lbl = self.font.render(text, True, config.COLOR_HUD_TEXT)
            self.surface.blit(lbl, (8, top + 6 + i * 20))

        if session.notice:
            lbl = self.font.render(session.notice, True, config.COLOR_NOTICE)
            self.surface.blit(lbl, (8, top + 46))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.session.tick(pygame.time.get_ticks())

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(config.FPS)

        self.recorder.stop()
        pygame.quit()
