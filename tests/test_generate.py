import os

import numpy as np
import pygame
import pytest

import config
from generate import VideoGenerator
from simulation import SimulationState


class FakeWriter:
    def __init__(self, fail_after=None):
        self.frames = []
        self.released = False
        self.fail_after = fail_after

    def write(self, frame):
        if self.fail_after is not None and len(self.frames) >= self.fail_after:
            raise IOError("disk full")
        self.frames.append(frame)

    def release(self):
        self.released = True


@pytest.fixture
def generator(tmp_path):
    return VideoGenerator(width=160, height=120, fps=10, duration=2,
                          taps_per_second=3, seed=7, recordings_dir=str(tmp_path))


def test_tap_schedule_is_reproducible(tmp_path):
    a = VideoGenerator(width=160, height=120, fps=10, duration=2, taps_per_second=3, seed=7, recordings_dir=str(tmp_path))
    b = VideoGenerator(width=160, height=120, fps=10, duration=2, taps_per_second=3, seed=7, recordings_dir=str(tmp_path))
    assert a.build_tap_schedule() == b.build_tap_schedule()


def test_tap_schedule_stays_inside_video(generator):
    schedule = generator.build_tap_schedule()
    taps = [point for points in schedule.values() for point in points]

    assert len(taps) == 6
    assert all(0 <= frame < generator.total_frames for frame in schedule)
    assert all(0 <= x <= 160 and 0 <= y <= 120 for x, y in taps)


def test_surface_to_array_converts_to_bgr(generator):
    surface = pygame.Surface((4, 3))
    surface.fill((255, 0, 0))

    array = generator.surface_to_array(surface)

    assert array.shape == (3, 4, 3)
    assert array.dtype == np.uint8
    assert list(array[0, 0]) == [0, 0, 255]


def test_render_frame_runs_one_full_frame(generator):
    simulation = SimulationState(seed_circle=True)

    frame = generator.render_frame(simulation)

    assert simulation.frame_count == 1
    assert len(frame) == 1
    (center, radius, color), = frame
    assert center == config.SEED_CIRCLE_POSITION
    assert radius == config.INITIAL_RADIUS + config.INITIAL_VELOCITY
    assert generator.surface_to_array(generator.screen).any()


def test_generate_video_writes_every_frame(generator, tmp_path):
    writer = FakeWriter()
    opened = []

    def factory(path):
        opened.append(path)
        return writer

    path = generator.generate_video("clip.mp4", writer_factory=factory)

    assert path == os.path.join(str(tmp_path), "clip.mp4")
    assert opened == [path]
    assert len(writer.frames) == generator.total_frames == 20
    assert all(frame.shape == (120, 160, 3) for frame in writer.frames)
    assert writer.released


def test_generate_video_removes_partial_file_on_failure(generator, tmp_path):
    writer = FakeWriter(fail_after=3)

    def factory(path):
        with open(path, "wb") as f:
            f.write(b"partial")
        return writer

    with pytest.raises(IOError):
        generator.generate_video("broken.mp4", writer_factory=factory)

    assert writer.released
    assert not os.path.exists(os.path.join(str(tmp_path), "broken.mp4"))


def test_default_filename_mentions_size_and_seed(generator):
    name = generator.default_filename()
    assert name.startswith("circles_")
    assert "160x120" in name
    assert "seed7" in name
    assert name.endswith(".mp4")
