"""Configuration management for the Meal Plan API."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from mealplan.infra.paths import RECIPES_FILE as DEFAULT_RECIPES_FILE

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Recipe catalog
RECIPES_FILE: Final[Path] = Path(os.getenv('MEALPLAN_RECIPES_FILE', str(DEFAULT_RECIPES_FILE)))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
LOG_FORMAT: Final[str] = os.getenv('LOG_FORMAT', '%(asctime)s %(levelname)s [%(name)s] %(message)s')
