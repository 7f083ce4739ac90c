"""Environment-driven settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(__file__).parent.parent / "data"


class Settings:
    APP_TITLE: str = os.getenv("SUBWAY_APP_TITLE", "Subway Path")
    VERSION: str = "0.1.0"

    STATIONS_FILE: Path = Path(
        os.getenv("SUBWAY_STATIONS_FILE", str(DATA_DIR / "stations.csv"))
    )
    SECTIONS_FILE: Path = Path(
        os.getenv("SUBWAY_SECTIONS_FILE", str(DATA_DIR / "sections.csv"))
    )

    LOG_LEVEL: str = os.getenv("SUBWAY_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


settings = Settings()
