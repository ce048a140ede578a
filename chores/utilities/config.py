"""Configuration management for the Household Chores application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Storage: "memory" keeps state for the process lifetime only, "json" writes DATA_DIR/household.json
STORAGE_BACKEND: Final[str] = os.getenv('STORAGE_BACKEND', 'memory').strip().lower()
SEED_SAMPLE_DATA: Final[bool] = os.getenv('SEED_SAMPLE_DATA', 'True').lower() == 'true'

# Weekly distribution cadence
DISTRIBUTION_INTERVAL_DAYS: Final[int] = int(os.getenv('DISTRIBUTION_INTERVAL_DAYS', '7'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data'))).resolve()
