from mealplan.utilities.config import DATA_DIR, STORE_FILE, RECIPES_FILE

# Centralized paths for data files (single source of truth)
__all__ = ['DATA_DIR', 'STORE_FILE', 'RECIPES_FILE']
