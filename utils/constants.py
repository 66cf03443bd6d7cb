import json
from pathlib import Path

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

# Build the path to the JSON config file
CONSTANTS_PATH = Path(__file__).parent.parent / "config" / "constants.json"

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
TOTAL_CLASS = _constants["TOTAL_CLASS"]
RAND_CLASS = _constants["RAND_CLASS"]
CRITERIA_SPLITTER = _constants["CRITERIA_SPLITTER"]

CONFLICT_ERROR_CODE = _constants["CONFLICT_ERROR_CODE"]
CONFLICT_ERROR_MESSAGE = _constants["CONFLICT_ERROR_MESSAGE"]
NOT_COMBINED_MESSAGE = _constants["NOT_COMBINED_MESSAGE"]
NOT_NEED_TO_BE_COMBINED_MESSAGE = _constants["NOT_NEED_TO_BE_COMBINED_MESSAGE"]
ATTEMPT_TO_COMBINE_MESSAGE = _constants["ATTEMPT_TO_COMBINE_MESSAGE"]
