import os
from pathlib import Path
from dotenv import find_dotenv, load_dotenv

# .env values must be in place before any path below reads the environment
load_dotenv(find_dotenv(usecwd=True))

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = PROJECT_ROOT  # or change to PROJECT_ROOT / "logs" in future

# === Static configuration files ===
CONSTANTS_PATH = CONFIG_DIR / "constants.json"
CLASS_CRITERIA_PATH = Path(
    os.getenv("CLASS_CRITERIA_PATH", CONFIG_DIR / "class_criteria.json")
)

# === Default log file path ===
LOG_PATH = Path(os.getenv("CRITERIA_LOG_PATH", LOG_DIR / "criteria_run.log"))
