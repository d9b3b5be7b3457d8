"""
Configuration for the Bellyfed ranking application.

Toggle between PRODUCTION and DEVELOPMENT mode.
"""
import os
from pathlib import Path

# ==================== MODE SELECTION ====================
# Set BELLYFED_RANKING_MODE to switch between production and development data
MODE = os.environ.get("BELLYFED_RANKING_MODE", "DEVELOPMENT").upper()
# ========================================================

# Base paths
PROJECT_ROOT = Path(__file__).parent
PRODUCTION_DATA_PATH = Path.home() / ".bellyfed"
DEVELOPMENT_DATA_PATH = PROJECT_ROOT / "data"

# Select data path based on mode
if MODE == "PRODUCTION":
    DATA_PATH = PRODUCTION_DATA_PATH
elif MODE == "DEVELOPMENT":
    DATA_PATH = DEVELOPMENT_DATA_PATH
else:
    raise ValueError(f"Invalid MODE: {MODE}. Must be 'PRODUCTION' or 'DEVELOPMENT'")

# File paths
RANKINGS_FILE = DATA_PATH / "rankings.csv"
WEIGHTS_FILE = DATA_PATH / "ranking_weights.json"


# Verify files exist
def verify_data_files():
    """Check that all required data files exist."""
    missing = []

    # Rankings are required
    for file_path in [RANKINGS_FILE]:
        if not file_path.exists():
            missing.append(str(file_path))

    # Weights file is optional (defaults used when absent)

    if missing:
        raise FileNotFoundError(
            f"Missing data files in {MODE} mode:\n" +
            "\n".join(f"  - {f}" for f in missing)
        )

    return True


# Application settings
DEFAULT_TOP_LIMIT = 5
LOG_LEVEL = os.environ.get("BELLYFED_RANKING_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

if __name__ == "__main__":
    # Test configuration
    print(f"\nMode: {MODE}")
    print(f"Data Path: {DATA_PATH}")
    print(f"  rankings: {RANKINGS_FILE}")
    print(f"  weights: {WEIGHTS_FILE}")
