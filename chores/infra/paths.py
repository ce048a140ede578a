from chores.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
HOUSEHOLD_FILE = DATA_DIR / 'household.json'

__all__ = ['DATA_DIR', 'HOUSEHOLD_FILE']
