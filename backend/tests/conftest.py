from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from solar_export.app import create_app
from solar_export.core import config
from solar_export.schemas.reading import ReadingRecord
from solar_export.services import reset_export_context


@pytest.fixture()
def client(tmp_path: Path) -> Generator[TestClient, None, None]:
    config.settings.data_dir = tmp_path
    tmp_path.mkdir(parents=True, exist_ok=True)
    reset_export_context()
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    reset_export_context()


@pytest.fixture()
def readings() -> list[ReadingRecord]:
    return [
        ReadingRecord(deviceName="Roof Array", timestamp=1700000000000, voltage=12.345, current=2.1, power=25.92, temperature=31.25),
        ReadingRecord(deviceName="Shed, west", timestamp=1700000060000, voltage=12.1, current=1.95, power=23.6),
        ReadingRecord(timestamp=1700000120000, voltage=11.98, current=None, power=None),
    ]
