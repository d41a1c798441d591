import argparse
import math
import random
import pygame
import config
from simulation import SimulationState


def draw_circles(surface, frame, width=None):
    """Stroke every (center, radius, color) entry of a frame as a circle outline."""
    width = width if width is not None else config.CIRCLE_STROKE_WIDTH
    drawn = 0
    for center, radius, color in frame:
        # Skip anything that can't be drawn this frame
        try:
            if not (math.isfinite(center[0]) and math.isfinite(center[1]) and math.isfinite(radius)):
                continue
            radius = min(config.MAX_RENDER_RADIUS, radius)
            if radius <= 0:
                continue
            pygame.draw.circle(surface, color, center, radius, width)
            drawn += 1
        except (TypeError, ValueError, OverflowError):
            continue
    return drawn


class BouncingCircles:
    """
    Interactive window: click to add circles, clear them with the button or C key.
    Input events and frames are handled on the same loop, so a frame never overlaps an add or clear.
    """
    def __init__(self, width=None, height=None, rng=None):
        pygame.init()

        self.width = width if width is not None else config.WINDOW_WIDTH
        self.height = height if height is not None else config.WINDOW_HEIGHT
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        pygame.display.set_caption(config.WINDOW_TITLE)

        self.simulation = SimulationState(rng=rng)

        # UI state
        self.show_ui = True

        # Clock for consistent frame rate
        self.clock = pygame.time.Clock()
        self.running = True

        # Font for UI
        self.font = pygame.font.Font(None, config.UI_FONT_SIZE)

    def stop(self):
        """Stop the loop; no further frames run after the current one."""
        self.running = False

    def clear_button_center(self):
        w, h = self.screen.get_size()
        offset = config.CLEAR_BUTTON_MARGIN + config.CLEAR_BUTTON_RADIUS
        return w - offset, h - offset

    def is_on_clear_button(self, pos):
        cx, cy = self.clear_button_center()
        return math.hypot(pos[0] - cx, pos[1] - cy) <= config.CLEAR_BUTTON_RADIUS

    def on_tap(self, pos):
        """Handle a pointer press in window coordinates."""
        if self.is_on_clear_button(pos):
            self.on_clear()
        else:
            self.simulation.add_circle((float(pos[0]), float(pos[1])))

    def on_clear(self):
        count = len(self.simulation)
        self.simulation.clear()
        print(f"Cleared {count} circles")

    def step(self):
        """Run one animation frame and draw it."""
        self.simulation.tick()
        self.render()

    def render(self):
        """Render the entire frame."""
        self.screen.fill(config.BACKGROUND_COLOR)

        frame = self.simulation.render_frame(self.screen.get_size())
        draw_circles(self.screen, frame)

        self.render_clear_button()

        if self.show_ui:
            self.render_ui()

        pygame.display.flip()

    def render_clear_button(self):
        cx, cy = self.clear_button_center()
        radius = config.CLEAR_BUTTON_RADIUS
        pygame.draw.circle(self.screen, config.CLEAR_BUTTON_COLOR, (cx, cy), radius)

        # Cross icon
        arm = radius * 0.4
        pygame.draw.line(self.screen, config.CLEAR_BUTTON_ICON_COLOR,
                         (cx - arm, cy - arm), (cx + arm, cy + arm), config.CLEAR_BUTTON_ICON_WIDTH)
        pygame.draw.line(self.screen, config.CLEAR_BUTTON_ICON_COLOR,
                         (cx - arm, cy + arm), (cx + arm, cy - arm), config.CLEAR_BUTTON_ICON_WIDTH)

    def render_ui(self):
        """Render the user interface overlay."""
        y_offset = config.UI_MARGIN

        title_text = self.font.render(config.WINDOW_TITLE, True, config.UI_TITLE_COLOR)
        self.screen.blit(title_text, (config.UI_MARGIN, y_offset))
        y_offset += config.UI_LINE_HEIGHT

        circles = self.simulation.circles
        growing = sum(1 for circle in circles if circle.is_growing)
        stats = [
            f"Circles: {len(circles)}/{config.MAX_CIRCLES}",
            f"Growing: {growing}  Shrinking: {len(circles) - growing}",
            f"FPS: {self.clock.get_fps():.0f}"
        ]

        for stat in stats:
            stat_text = self.font.render(stat, True, config.UI_TEXT_COLOR)
            self.screen.blit(stat_text, (config.UI_MARGIN, y_offset))
            y_offset += config.UI_STATS_SPACING

        controls_start_y = self.screen.get_height() - config.CONTROLS_FROM_BOTTOM
        for i, control in enumerate(config.CONTROLS):
            color = config.UI_TITLE_COLOR if i == 0 else config.UI_SECONDARY_COLOR
            control_text = self.font.render(control, True, color)
            self.screen.blit(control_text, (config.UI_MARGIN, controls_start_y + i * config.CONTROLS_LINE_HEIGHT))

    def handle_events(self, events=None):
        """Handle user input events."""
        for event in (events if events is not None else pygame.event.get()):
            if event.type == pygame.QUIT:
                self.stop()

            elif event.type == pygame.KEYDOWN:
                if event.key == config.KEY_EXIT:
                    self.stop()

                elif event.key == config.KEY_CLEAR:
                    self.on_clear()

                elif event.key == config.KEY_TOGGLE_UI:
                    self.show_ui = not self.show_ui

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == config.TAP_MOUSE_BUTTON:
                    self.on_tap(event.pos)

    def run(self):
        """Main animation loop."""
        print(f"{config.WINDOW_TITLE}: {self.width}x{self.height} @ {config.FPS} FPS")
        while self.running:
            self.clock.tick(config.FPS)

            self.handle_events()
            if not self.running:
                break
            self.step()

        pygame.quit()


def main():
    """Main function to start the animation."""
    parser = argparse.ArgumentParser(description="Circles that grow and shrink, turning around when they touch each other or the window edge")
    parser.add_argument("--width", type=int, default=config.WINDOW_WIDTH, help="Window width in pixels")
    parser.add_argument("--height", type=int, default=config.WINDOW_HEIGHT, help="Window height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for circle colors")
    args = parser.parse_args()

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")

    app = BouncingCircles(
        width=args.width,
        height=args.height,
        rng=random.Random(args.seed)
    )
    app.run()


if __name__ == "__main__":
    main()
