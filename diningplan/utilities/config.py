"""Configuration management for the dining hall meal planner."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Menu API Configuration (Nutrislice)
MENU_API_BASE_URL: Final[str] = os.getenv(
    'MENU_API_BASE_URL',
    'https://tufts.api.nutrislice.com/menu/api/weeks/school/dewick-dining/menu-type'
)
MENU_API_TIMEOUT: Final[float] = float(os.getenv('MENU_API_TIMEOUT', '10'))
MENU_API_USER_AGENT: Final[str] = os.getenv('MENU_API_USER_AGENT', 'Mozilla/5.0')

# Default user goals
DEFAULT_CALORIE_GOAL: Final[int] = int(os.getenv('DEFAULT_CALORIE_GOAL', '2000'))
DEFAULT_PROTEIN_GOAL: Final[int] = int(os.getenv('DEFAULT_PROTEIN_GOAL', '100'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()
