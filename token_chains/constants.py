TOKEN_LENGTH = 6
OVERLAP = 2

# Tokens are plain ASCII digits; "\d" would also accept other Unicode digits
TOKEN_PATTERN = r"[0-9]{{{length}}}"

# Search
STRATEGY_ITERATIVE = "iterative"
STRATEGY_RECURSIVE = "recursive"
SEARCH_STRATEGIES = (STRATEGY_ITERATIVE, STRATEGY_RECURSIVE)
DEFAULT_STRATEGY = STRATEGY_ITERATIVE

# Progress ticker
TICKER_INTERVAL_SECONDS = 15.0
TICKER_MESSAGE = "The program is still searching for the longest sequence..."

# Command line
MAX_FILE_ATTEMPTS = 5
DISPLAY_CONFIRM_THRESHOLD = 10
