"""Pytest fixtures for tests."""

import random
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from colorpicker.core import ColorPickerController, EyeDropperResult, Picked, SpectrumCanvas
from colorpicker.models import AppConfig


class FakeEyeDropper:
    """Eye-dropper that returns a fixed result and counts calls."""

    def __init__(self, result: EyeDropperResult = Picked("#10b981")):
        self.result = result
        self.calls = 0

    async def acquire(self) -> EyeDropperResult:
        self.calls += 1
        return self.result


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config():
    """Default config with a small spectrum."""
    return AppConfig(spectrum_width=7, spectrum_height=3, eyedropper_delay=0.0)


@pytest.fixture
def make_eyedropper():
    """Factory for fake eye-droppers returning a given result."""
    return FakeEyeDropper


@pytest.fixture
def fake_eyedropper(make_eyedropper):
    return make_eyedropper()


@pytest.fixture
def controller(config, fake_eyedropper):
    """Controller with deterministic randomness and a fake eye-dropper."""
    return ColorPickerController(
        config=config,
        eyedropper=fake_eyedropper,
        spectrum=SpectrumCanvas(config.spectrum_width, config.spectrum_height),
        rng=random.Random(1234),
    )
