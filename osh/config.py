import os

PROMPT = os.getenv("OSH_PROMPT", "osh>")

# Argument vector slots and per-token buffer size
MAX_LINE = 80
MAX_TOKEN = 128

# Commands remembered for recall
MAX_CHRONO = 128
HISTORY_SHOW_LIMIT = 10

# Line-editing history (readline), kept on disk between sessions
HISTORY_FILE = os.path.expanduser(os.getenv("OSH_HISTFILE", "~/.osh_history"))
MAX_HISTORY = 1000

# Seconds to wait for background children to exit before killing them
CLEANUP_TIMEOUT = 3
