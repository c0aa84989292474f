from pathlib import Path

# Centralized paths for bundled data files
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
SAMPLE_MENU_FILE = DATA_DIR / 'sample_menu.json'

__all__ = ['DATA_DIR', 'SAMPLE_MENU_FILE']
