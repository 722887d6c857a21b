"""
Pytest configuration and shared fixtures for the lifesim test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'lifesim' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lifesim.core.simulation_engine import SimulationEngine  # noqa: E402


GLIDER = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]

SIMULATION_CFG = {
    "update_interval": 0.05,
    "pattern": "glider",
    "center": True,
    "generations": 100,
}


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_lifesim_config_dict():
    """
    Fixture providing a complete valid lifesim configuration dictionary.
    """
    return {"simulation": dict(SIMULATION_CFG)}


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_lifesim_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.
    """
    with temp_yaml_file.open("w", encoding="utf-8") as fh:
        yaml.dump(valid_lifesim_config_dict, fh)
    return temp_yaml_file


@pytest.fixture
def engine():
    """An engine that has not been seeded yet."""
    return SimulationEngine()


@pytest.fixture
def glider_engine():
    """An engine seeded with a glider and a 0.05s interval."""
    eng = SimulationEngine()
    eng.seed(GLIDER, interval=0.05)
    return eng
