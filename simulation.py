import math
import random
import config


class Circle:
    """
    Represents a single circle that keeps expanding and contracting.
    Direction changes are requested during detection and applied on the next radius update.
    """
    def __init__(self, center, color, radius=None, velocity=None):
        self._center = (float(center[0]), float(center[1]))
        self.color = color
        self.radius = radius if radius is not None else config.INITIAL_RADIUS
        self.velocity = velocity if velocity is not None else config.INITIAL_VELOCITY
        self.pending_flip = False

    @property
    def center(self):
        return self._center

    @property
    def is_growing(self):
        return self.velocity > 0.0

    def request_flip(self):
        """Mark this circle to reverse direction on its next radius update."""
        self.pending_flip = True

    def flip_if_zero(self):
        """Turn a shrinking circle around once it is back at its minimum size."""
        if self.velocity < 0.0 and self.radius <= config.MIN_RADIUS:
            self.request_flip()

    def flip_intersecting_circles(self, other):
        """Mark both circles to flip if their outlines touch or cross."""
        dx = self._center[0] - other.center[0]
        dy = self._center[1] - other.center[1]
        distance = math.sqrt(dx ** 2 + dy ** 2)

        if distance < self.radius + other.radius:
            # Edge case: a circle nested inside another without touching it is ignored
            if distance >= abs(self.radius - other.radius):
                self.request_flip()
                other.request_flip()

    def flip_if_intersects_view(self, viewport_size):
        """
        Reverse growth if the circle extends past the viewport expanded by EXPAND_BORDERS.
        The viewport size is only known at draw time, so this runs separately from the pairwise checks.
        """
        if self.velocity <= 0.0:
            return

        width, height = viewport_size
        x, y = self._center
        border = config.EXPAND_BORDERS

        if (x - self.radius < -border or
                y - self.radius < -border or
                x + self.radius > width + border or
                y + self.radius > height + border):
            self.request_flip()

    def _apply_flip(self):
        if self.pending_flip:
            self.velocity = -self.velocity
            self.pending_flip = False

    def update_radius(self):
        """Apply any pending flip, then grow or shrink by the current velocity."""
        self._apply_flip()
        self.radius += self.velocity

    def __repr__(self):
        return (f"Circle(center={self._center}, radius={self.radius:.2f}, "
                f"velocity={self.velocity:+.2f}, color={self.color})")


class SimulationState:
    """
    Owns the circles and drives the per-frame update protocol.

    Each frame runs tick() (self and pairwise flip detection) followed by
    render_frame() (boundary detection, radius integration and emission).
    """
    def __init__(self, rng=None, seed_circle=True):
        self.rng = rng if rng is not None else random.Random()
        self._circles = []
        self.frame_count = 0

        if seed_circle:
            self.add_circle(config.SEED_CIRCLE_POSITION)

    @property
    def circles(self):
        return tuple(self._circles)

    def __len__(self):
        return len(self._circles)

    def random_color(self):
        return self.rng.choice(config.CIRCLE_COLORS)

    def add_circle(self, point):
        """Add a circle centered at point, evicting the oldest one when over capacity."""
        circle = Circle(point, self.random_color())
        self._circles.append(circle)
        if len(self._circles) > config.MAX_CIRCLES:
            self._circles.pop(0)
        return circle

    def clear(self):
        """Remove every circle."""
        self._circles.clear()

    def tick(self):
        """Mark circles that should flip because they shrank to zero or touch another circle."""
        for circle in self._circles:
            circle.flip_if_zero()

        # Check every unordered pair once
        for i in range(len(self._circles) - 1):
            for j in range(i + 1, len(self._circles)):
                self._circles[i].flip_intersecting_circles(self._circles[j])

    def render_frame(self, viewport_size):
        """
        Run the boundary check and radius update for each circle in draw order.
        Returns a list of (center, radius, color) tuples to stroke.
        """
        frame = []
        for circle in self._circles:
            circle.flip_if_intersects_view(viewport_size)
            circle.update_radius()
            frame.append((circle.center, circle.radius, circle.color))

        self.frame_count += 1
        return frame

    def advance(self, viewport_size):
        """Run one full frame: detection pass followed by the render pass."""
        self.tick()
        return self.render_frame(viewport_size)
