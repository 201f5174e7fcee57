"""Configuration management for the meal planner application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from mealplan.utilities.constants import REGENERATE_POLICIES

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Sessions
SESSION_COOKIE_NAME: Final[str] = os.getenv('SESSION_COOKIE_NAME', 'mealplan_session')
SESSION_TTL_HOURS: Final[int] = int(os.getenv('SESSION_TTL_HOURS', '24'))

# What a second generation for the same user/week does with the first one
REGENERATE_POLICY: Final[str] = os.getenv('REGENERATE_POLICY', 'replace').strip().lower()
if REGENERATE_POLICY not in REGENERATE_POLICIES:
    raise ValueError(
        f"REGENERATE_POLICY must be one of {', '.join(REGENERATE_POLICIES)}, got {REGENERATE_POLICY!r}"
    )

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
STORE_FILE: Final[Path] = Path(os.getenv('STORE_FILE', str(DATA_DIR / 'store.json')))
RECIPES_FILE: Final[Path] = Path(os.getenv('RECIPES_FILE', str(DATA_DIR / 'recipes.json')))
