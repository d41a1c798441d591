# Video Generation Script for Bouncing Circles
# Records the animation without a window, adding circles from a seeded random tap schedule

import argparse
import datetime
import os
import random
import time
import pygame
import cv2
import numpy as np
import config
from main import draw_circles
from simulation import SimulationState


class VideoGenerator:
    """
    Generates videos of the animation without UI display.
    Taps are scheduled up front so a seed reproduces the same video.
    """
    def __init__(self, width=None, height=None, fps=None, duration=None,
                 taps_per_second=None, seed=None, recordings_dir=None):
        self.width = width if width is not None else config.VIDEO_WIDTH
        self.height = height if height is not None else config.VIDEO_HEIGHT
        self.fps = fps if fps is not None else config.VIDEO_FPS
        self.duration = duration if duration is not None else config.VIDEO_DURATION
        self.taps_per_second = taps_per_second if taps_per_second is not None else config.VIDEO_TAPS_PER_SECOND
        self.seed = seed
        self.rng = random.Random(seed)

        self.recordings_dir = recordings_dir if recordings_dir is not None else config.RECORDINGS_DIR
        if not os.path.exists(self.recordings_dir):
            os.makedirs(self.recordings_dir)
            print(f"Created recordings directory: {self.recordings_dir}")

        # Initialize pygame without display
        os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
        pygame.init()

        # Create a surface for rendering (no window)
        self.screen = pygame.Surface((self.width, self.height))

    @property
    def total_frames(self):
        return int(self.duration * self.fps)

    def build_tap_schedule(self):
        """Return {frame_index: [(x, y), ...]} with taps spread uniformly over the video."""
        schedule = {}
        num_taps = int(self.duration * self.taps_per_second)
        if self.total_frames == 0:
            return schedule

        for _ in range(num_taps):
            frame_index = self.rng.randrange(self.total_frames)
            point = (self.rng.uniform(0, self.width), self.rng.uniform(0, self.height))
            schedule.setdefault(frame_index, []).append(point)
        return schedule

    def surface_to_array(self, surface):
        """Convert pygame surface to numpy array for OpenCV."""
        w, h = surface.get_size()
        raw = pygame.image.tostring(surface, 'RGB')

        array = np.frombuffer(raw, dtype=np.uint8)
        array = array.reshape((h, w, 3))

        # OpenCV uses BGR, pygame uses RGB
        array = cv2.cvtColor(array, cv2.COLOR_RGB2BGR)

        return array

    def render_frame(self, simulation):
        """Advance the simulation by one frame and draw it onto the off-screen surface."""
        self.screen.fill(config.BACKGROUND_COLOR)
        frame = simulation.advance(self.screen.get_size())
        draw_circles(self.screen, frame)
        return frame

    def record(self, simulation, video_writer):
        """
        Run the simulation for the configured duration and write every frame.
        Scheduled taps are applied between frames. Returns the number of frames written.
        """
        schedule = self.build_tap_schedule()
        start_time = time.time()
        progress_every = max(1, int(config.VIDEO_PROGRESS_INTERVAL * self.fps))

        for frame_index in range(self.total_frames):
            for point in schedule.get(frame_index, []):
                simulation.add_circle(point)

            self.render_frame(simulation)
            video_writer.write(self.surface_to_array(self.screen))

            if (frame_index + 1) % progress_every == 0:
                video_time = (frame_index + 1) / self.fps
                elapsed = time.time() - start_time
                print(f"Recording progress: {video_time:.0f}s video time ({elapsed:.1f}s real), Circles: {len(simulation)}")

        return self.total_frames

    def open_writer(self, filepath):
        fourcc = cv2.VideoWriter_fourcc(*config.VIDEO_FOURCC)
        writer = cv2.VideoWriter(filepath, fourcc, float(self.fps), (self.width, self.height))
        if not writer.isOpened():
            raise RuntimeError(f"Could not open video writer for {filepath}. Ensure the codec is available.")
        return writer

    def default_filename(self):
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        seed_part = f"_seed{self.seed}" if self.seed is not None else ""
        return f"circles_{timestamp}_{self.width}x{self.height}_{self.fps}fps{seed_part}.mp4"

    def generate_video(self, filename=None, writer_factory=None):
        """Record one video and return its path. Partial files are removed on failure."""
        filename = filename if filename is not None else self.default_filename()
        filepath = filename if os.path.isabs(filename) else os.path.join(self.recordings_dir, filename)

        open_writer = writer_factory if writer_factory is not None else self.open_writer
        video_writer = open_writer(filepath)

        simulation = SimulationState(rng=self.rng)
        print(f"Recording {self.duration}s at {self.fps} FPS ({self.total_frames} frames) to {filepath}")

        try:
            self.record(simulation, video_writer)
        except Exception:
            video_writer.release()
            try:
                os.remove(filepath)
            except OSError:
                pass
            raise

        video_writer.release()
        print(f"✓ Video recording completed: {filepath}")
        return filepath


def main():
    parser = argparse.ArgumentParser(description="Record a video of the bouncing circles animation without opening a window.")
    parser.add_argument("--width", type=int, default=config.VIDEO_WIDTH, help="Video width in pixels")
    parser.add_argument("--height", type=int, default=config.VIDEO_HEIGHT, help="Video height in pixels")
    parser.add_argument("--fps", type=int, default=config.VIDEO_FPS, help="Video and simulation FPS")
    parser.add_argument("--duration", type=float, default=config.VIDEO_DURATION, help="Video length in seconds")
    parser.add_argument("--taps", type=float, default=config.VIDEO_TAPS_PER_SECOND, help="Average number of taps per second")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for taps and colors")
    parser.add_argument("--out", type=str, default=None, help="Output MP4 path (relative paths go into the recordings directory)")
    args = parser.parse_args()

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.duration <= 0:
        parser.error("--duration must be positive")
    if args.taps < 0:
        parser.error("--taps must not be negative")

    generator = VideoGenerator(
        width=args.width,
        height=args.height,
        fps=args.fps,
        duration=args.duration,
        taps_per_second=args.taps,
        seed=args.seed
    )
    generator.generate_video(args.out)


if __name__ == "__main__":
    main()
