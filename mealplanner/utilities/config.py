"""Configuration management for the Meal Planner console application."""
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
BASE_DIR: Final[Path] = Path(__file__).parent.parent
_env_path = BASE_DIR / '.env'
if _env_path.exists():
    load_dotenv(_env_path)
else:
    load_dotenv()

# File Paths
DATA_DIR: Final[Path] = Path(os.getenv('MEALPLANNER_DATA_DIR', str(BASE_DIR / 'data')))
EXPORT_DIR: Final[Path] = Path(os.getenv('MEALPLANNER_EXPORT_DIR', '.'))

# Application Settings
LOG_LEVEL: Final[str] = os.getenv('MEALPLANNER_LOG_LEVEL', 'WARNING').upper()
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
