# =========================================================================
# PYGAME GUI
# Thin front end: renders the session and turns clicks and keys into
# session calls.
# =========================================================================

import logging

import pygame
from dotenv import load_dotenv

from .config import DIFFICULTY_LEVELS, SUPPORTED_SIZES, GameConfig
from .errors import SudokuError
from .hints import Hint, NoHintReason
from .session import GameSession, SolutionStatus

logger = logging.getLogger(__name__)

HINT_MESSAGES = {
    NoHintReason.NO_FORCED_CELL: "No further hints available.",
    NoHintReason.BREAKS_UNIQUENESS: "No safe hint: puzzle would not stay unique.",
    NoHintReason.NO_SOLUTION: "No hint: some entries are wrong, the puzzle cannot be completed.",
}

CHECK_MESSAGES = {
    SolutionStatus.SOLVED: "Congratulations, solution is correct!",
    SolutionStatus.INCOMPLETE: "Please fill in all cells.",
    SolutionStatus.INCORRECT: "Incorrect solution. Try again.",
}


class SudokuApp:
    def __init__(self, config=None):
        pygame.init()
        self.config = config or GameConfig()
        self.WINDOW_WIDTH = self.config.window_width
        self.WINDOW_HEIGHT = self.config.window_height

        self.screen = pygame.display.set_mode((self.WINDOW_WIDTH, self.WINDOW_HEIGHT))
        pygame.display.set_caption("Sudoku")

        # Color Palette
        self.BG_COLOR = (245, 247, 250)
        self.GRID_BG = (255, 255, 255)
        self.BLACK = (30, 30, 30)
        self.PRIMARY = (79, 70, 229)
        self.PRIMARY_LIGHT = (129, 140, 248)
        self.PRIMARY_DARK = (55, 48, 163)
        self.SUCCESS = (34, 197, 94)
        self.ERROR = (239, 68, 68)
        self.SELECTION = (224, 231, 255)
        self.SELECTION_BORDER = (129, 140, 248)
        self.TEXT_GRAY = (100, 116, 139)
        self.SUBGRID_LINE = (203, 213, 225)
        self.CONFLICT_HIGHLIGHT = (255, 100, 100)
        self.CONFLICT_BORDER = (200, 50, 50)

        # Grid positioning
        self.GRID_SIZE = 480
        self.GRID_X = 30
        self.GRID_Y = 70
        self.PANEL_X = self.GRID_X + self.GRID_SIZE + 30
        self.PANEL_WIDTH = self.WINDOW_WIDTH - self.PANEL_X - 30

        # Fonts
        self.font_title = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 32)
        self.font_small = pygame.font.Font(None, 22)
        self.font_tiny = pygame.font.Font(None, 18)
        self.cell_fonts = {}

        self.session = GameSession(self.config.grid_size, self.config.level, self.config.seed)
        self.selected = None
        self.message = ""
        self.message_timer = 0
        self.buttons = []
        self.pending_digit = None

        # Key Mapping for Numpad support. 0 clears, or completes 10..16 after a 1
        self.key_mapping = {}
        for num in range(10):
            self.key_mapping[getattr(pygame, f"K_{num}")] = num
            self.key_mapping[getattr(pygame, f"K_KP{num}")] = num

    @property
    def size(self):
        return self.session.size

    @property
    def cell_size(self):
        return self.GRID_SIZE // self.size

    def cell_font(self):
        if self.size not in self.cell_fonts:
            self.cell_fonts[self.size] = pygame.font.Font(None, int(self.cell_size * 0.8))
        return self.cell_fonts[self.size]

    def show_message(self, text, frames=180):
        self.message = text
        self.message_timer = frames

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def run_action(self, action, *args):
        """Calls a session action, turning rejected requests into a message."""
        try:
            return action(*args)
        except (SudokuError, ValueError) as e:
            logger.error("Rejected request: %s", e)
            self.show_message(str(e))
            return None

    def new_puzzle(self):
        self.run_action(self.session.new_puzzle)
        self.selected = None
        self.show_message("")

    def restart(self):
        self.run_action(self.session.start_new_game)
        self.selected = None
        self.show_message("New game started.")

    def set_level(self, level):
        self.run_action(self.session.set_level, level)
        self.selected = None

    def set_grid_size(self, size):
        self.run_action(self.session.set_grid_size, size)
        self.selected = None

    def change_seed(self, step):
        self.run_action(self.session.set_seed, self.session.seed + step)
        self.selected = None

    def give_hint(self):
        result = self.run_action(self.session.request_hint)
        if isinstance(result, Hint):
            self.selected = result.position
            self.show_message(f"Hint: {result.value} at row {result.position.row + 1}, "
                              f"column {result.position.col + 1}")
        elif result is not None:
            self.show_message(HINT_MESSAGES[result.reason])

    def undo_move(self):
        move = self.session.undo()
        if move is None:
            self.show_message("Nothing to undo", 60)
            return
        self.selected = move.position
        self.show_message("Move undone", 60)

    def check_solution(self):
        check = self.session.check_solution()
        self.show_message(CHECK_MESSAGES[check.status], 240)

    def next_level(self):
        bonus = self.session.next_puzzle()
        if bonus:
            self.selected = None
            self.show_message(f"+{bonus} points. Next puzzle (seed {self.session.seed}).")

    def enter_value(self, value):
        if self.selected is None:
            return
        row, col = self.selected
        if value is None:
            self.run_action(self.session.clear_cell, row, col)
        else:
            self.run_action(self.session.fill_cell, row, col, value)

    def type_digit(self, digit):
        """
        Enters a typed digit. On boards larger than 9x9 a digit may extend
        the one typed just before it, so 1 then 6 enters 16.
        """
        value = digit
        if self.pending_digit is not None and self.pending_digit * 10 + digit <= self.size:
            value = self.pending_digit * 10 + digit
        self.pending_digit = value if value >= 1 and value * 10 <= self.size else None
        if value == 0:
            self.enter_value(None)
        elif value <= self.size:
            self.enter_value(value)

    def matching_cells(self):
        """Other cells holding the same value as the selected one."""
        if self.selected is None:
            return set()
        row, col = self.selected
        value = self.session.grid[row][col]
        if value is None:
            return set()
        return {(r, c) for r in range(self.size) for c in range(self.size)
                if (r, c) != (row, col) and self.session.grid[r][c] == value}

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw_rounded_rect(self, surface, color, rect, radius=10):
        """Utility to draw a rectangle with rounded corners."""
        pygame.draw.rect(surface, color, pygame.Rect(rect), border_radius=radius)

    def draw_button(self, text, x, y, width, height, color, text_color, action):
        """Draws a clickable button and registers its click area."""
        self.draw_rounded_rect(self.screen, color, (x, y, width, height), 8)
        text_surface = self.font_small.render(text, True, text_color)
        self.screen.blit(text_surface, text_surface.get_rect(center=(x + width // 2, y + height // 2)))
        rect = pygame.Rect(x, y, width, height)
        self.buttons.append((text, rect, action))
        return rect

    def draw_stat_card(self, label, value, x, y, width):
        """Draws a statistic display card (Score, Level...)."""
        self.draw_rounded_rect(self.screen, self.GRID_BG, (x, y, width, 50), 8)
        self.screen.blit(self.font_tiny.render(label, True, self.TEXT_GRAY), (x + 12, y + 8))
        self.screen.blit(self.font_medium.render(str(value), True, self.BLACK), (x + 12, y + 24))

    def draw_grid(self):
        """Draws the grid background and lines, thick on box borders."""
        span = self.cell_size * self.size
        box = int(self.size ** 0.5)
        self.draw_rounded_rect(self.screen, self.GRID_BG, (self.GRID_X, self.GRID_Y, span, span), 6)
        for i in range(self.size + 1):
            thick = i % box == 0
            color = self.BLACK if thick else self.SUBGRID_LINE
            offset = i * self.cell_size
            pygame.draw.line(self.screen, color, (self.GRID_X, self.GRID_Y + offset),
                             (self.GRID_X + span, self.GRID_Y + offset), 3 if thick else 1)
            pygame.draw.line(self.screen, color, (self.GRID_X + offset, self.GRID_Y),
                             (self.GRID_X + offset, self.GRID_Y + span), 3 if thick else 1)

    def draw_selection(self):
        if self.selected is None:
            return
        row, col = self.selected
        inner = (self.GRID_X + col * self.cell_size + 2, self.GRID_Y + row * self.cell_size + 2,
                 self.cell_size - 4, self.cell_size - 4)
        pygame.draw.rect(self.screen, self.SELECTION, inner)
        pygame.draw.rect(self.screen, self.SELECTION_BORDER, inner, 3)

    def draw_matching(self):
        surf = pygame.Surface((self.cell_size - 4, self.cell_size - 4))
        surf.set_alpha(90)
        surf.fill(self.PRIMARY_LIGHT)
        for row, col in self.matching_cells():
            self.screen.blit(surf, (self.GRID_X + col * self.cell_size + 2,
                                    self.GRID_Y + row * self.cell_size + 2))

    def draw_conflict_highlights(self, conflicts):
        for row, col in conflicts:
            x = self.GRID_X + col * self.cell_size
            y = self.GRID_Y + row * self.cell_size
            surf = pygame.Surface((self.cell_size - 4, self.cell_size - 4))
            surf.set_alpha(80)
            surf.fill(self.CONFLICT_HIGHLIGHT)
            self.screen.blit(surf, (x + 2, y + 2))
            pygame.draw.rect(self.screen, self.CONFLICT_BORDER,
                             (x + 2, y + 2, self.cell_size - 4, self.cell_size - 4), 2)

    def draw_numbers(self, conflicts):
        font = self.cell_font()
        for row in range(self.size):
            for col in range(self.size):
                value = self.session.grid[row][col]
                if value is None:
                    continue
                if self.session.is_prefilled(row, col):
                    color = self.BLACK
                elif (row, col) in conflicts:
                    color = self.ERROR
                elif (row, col) in self.session.hinted:
                    color = self.SUCCESS
                else:
                    color = self.PRIMARY
                center = (self.GRID_X + col * self.cell_size + self.cell_size // 2,
                          self.GRID_Y + row * self.cell_size + self.cell_size // 2)
                text = font.render(str(value), True, color)
                self.screen.blit(text, text.get_rect(center=center))

    def draw_number_pad(self):
        """One button per value plus Clear, under the grid."""
        y = self.GRID_Y + self.GRID_SIZE + 15
        count = self.size + 1
        width = (self.GRID_SIZE - (count - 1) * 4) // count
        for i in range(count):
            x = self.GRID_X + i * (width + 4)
            if i < self.size:
                self.draw_button(str(i + 1), x, y, width, 34, self.PRIMARY_LIGHT, (255, 255, 255),
                                 lambda v=i + 1: self.enter_value(v))
            else:
                self.draw_button("Clear", x, y, width, 34, self.TEXT_GRAY, (255, 255, 255),
                                 lambda: self.enter_value(None))

    def draw_panel(self):
        x, w = self.PANEL_X, self.PANEL_WIDTH
        half = (w - 10) // 2
        session = self.session
        self.draw_stat_card("SCORE", session.score, x, self.GRID_Y, half)
        self.draw_stat_card("LEVEL", session.difficulty.name, x + half + 10, self.GRID_Y, half)
        self.draw_stat_card("SIZE", f"{self.size}x{self.size}", x, self.GRID_Y + 60, half)
        self.draw_stat_card("SEED", session.seed, x + half + 10, self.GRID_Y + 60, half)

        white = (255, 255, 255)
        actions = [("New Puzzle", self.new_puzzle), ("Hint", self.give_hint),
                   ("Undo", self.undo_move), ("Check", self.check_solution),
                   ("Restart", self.restart)]
        y = self.GRID_Y + 130
        for label, action in actions:
            self.draw_button(label, x, y, w, 36, self.PRIMARY, white, action)
            y += 44

        third = (w - 10) // 3
        for i, (level, difficulty) in enumerate(sorted(DIFFICULTY_LEVELS.items())):
            color = self.PRIMARY_DARK if level == session.level else self.TEXT_GRAY
            self.draw_button(difficulty.name, x + i * (third + 5), y, third, 32, color, white,
                             lambda lv=level: self.set_level(lv))
        y += 40
        for i, size in enumerate(SUPPORTED_SIZES):
            color = self.PRIMARY_DARK if size == self.size else self.TEXT_GRAY
            self.draw_button(f"{size}x{size}", x + i * (third + 5), y, third, 32, color, white,
                             lambda s=size: self.set_grid_size(s))
        y += 40
        self.draw_button("Seed -", x, y, half, 32, self.TEXT_GRAY, white, lambda: self.change_seed(-1))
        self.draw_button("Seed +", x + half + 10, y, half, 32, self.TEXT_GRAY, white,
                         lambda: self.change_seed(1))
        y += 40
        if session.solved:
            self.draw_button("Next Level", x, y, w, 36, self.SUCCESS, white, self.next_level)

    def draw_message(self):
        if self.message_timer <= 0 or not self.message:
            return
        text = self.font_small.render(self.message, True, self.PRIMARY_DARK)
        self.screen.blit(text, text.get_rect(midleft=(self.GRID_X, self.GRID_Y - 15)))
        self.message_timer -= 1

    def render(self):
        self.buttons = []
        self.screen.fill(self.BG_COLOR)
        title = self.font_title.render("Sudoku", True, self.PRIMARY_DARK)
        self.screen.blit(title, title.get_rect(midleft=(self.GRID_X, 28)))

        conflicts = self.session.conflicts()
        self.draw_grid()
        self.draw_matching()
        self.draw_selection()
        self.draw_conflict_highlights(conflicts)
        self.draw_numbers(conflicts)
        self.draw_number_pad()
        self.draw_panel()
        self.draw_message()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def cell_at(self, pos):
        x, y = pos
        span = self.cell_size * self.size
        if self.GRID_X <= x < self.GRID_X + span and self.GRID_Y <= y < self.GRID_Y + span:
            return (y - self.GRID_Y) // self.cell_size, (x - self.GRID_X) // self.cell_size
        return None

    def handle_click(self, pos):
        """Selects the cell or fires the button under the cursor."""
        self.pending_digit = None
        cell = self.cell_at(pos)
        if cell is not None:
            self.selected = cell
            return
        for _label, rect, action in self.buttons:
            if rect.collidepoint(pos):
                action()
                return

    def handle_key(self, key):
        num = self.key_mapping.get(key)
        if num is None:
            self.pending_digit = None
        if key == pygame.K_h:
            self.give_hint()
            return
        if key == pygame.K_u:
            self.undo_move()
            return
        if self.selected is None:
            return

        row, col = self.selected
        if num is not None:
            self.type_digit(num)
        elif key in (pygame.K_DELETE, pygame.K_BACKSPACE):
            self.enter_value(None)

        # Arrow Key Navigation
        if key == pygame.K_UP and row > 0:
            self.selected = (row - 1, col)
        elif key == pygame.K_DOWN and row < self.size - 1:
            self.selected = (row + 1, col)
        elif key == pygame.K_LEFT and col > 0:
            self.selected = (row, col - 1)
        elif key == pygame.K_RIGHT and col < self.size - 1:
            self.selected = (row, col + 1)

    def run(self):
        """Main game loop."""
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)

            self.render()
            pygame.display.flip()
            clock.tick(self.config.fps)

        pygame.quit()


def main():
    load_dotenv()
    config = GameConfig()
    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        level=getattr(logging, config.log_level, logging.INFO))
    SudokuApp(config).run()


if __name__ == "__main__":
    main()
