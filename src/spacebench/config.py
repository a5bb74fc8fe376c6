# src/spacebench/config.py

SPACE = " "

DEFAULT_FOLDER = "TestFiles"
DEFAULT_FILE_COUNT = 50
DEFAULT_LINES_PER_FILE = 100

# Leading spaces per generated line are drawn from [MIN, MAX)
MIN_LEADING_SPACES = 5
MAX_LEADING_SPACES = 50

STRATEGY_PER_FILE = "per-file"
STRATEGY_PER_LINE = "per-line"
