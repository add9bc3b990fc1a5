from __future__ import annotations

import pytest

from citypath.config import AppConfig, MapConfig, RenderingConfig, reset_config
from citypath.container import reset_container

CITIES = "A, 0, 0\nB, 3, 0\nC, 3, 4\nD, 100, 100\n"
CONNECTIONS = "A,B\nB,C\nC,Nowhere\n"


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def map_dir(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "city_coordinates.txt").write_text(CITIES, encoding="utf-8")
    (data_dir / "city_connections.txt").write_text(CONNECTIONS, encoding="utf-8")
    return data_dir


@pytest.fixture
def app_config(map_dir, tmp_path):
    return AppConfig(
        map=MapConfig(data_dir=map_dir),
        rendering=RenderingConfig(enabled=False),
        output_dir=tmp_path,
    )
