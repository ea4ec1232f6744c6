# tests/utils/constants.py

from pathlib import Path


PROJ_ROOT = Path(__file__).resolve().parents[2]

# Most verbose level so trace-level paths run in every test
DEFAULT_TEST_LOG_LEVEL = "trace"
