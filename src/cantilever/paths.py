from pathlib import Path

# src/cantilever/paths.py -> src/cantilever -> src -> ROOT
REPO_ROOT = Path(__file__).resolve().parent.parent.parent

# Default location for GA run archives
OUTPUT_DIR = REPO_ROOT / "outputs"
