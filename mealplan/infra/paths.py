from pathlib import Path

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
RECIPES_FILE = DATA_DIR / 'recipes.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE']
