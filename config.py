import os
from dotenv import load_dotenv

load_dotenv()

# Raw strings; the CLI parser validates them like command-line values
DEFAULT_BEFORE = os.getenv("IAWK_BEFORE", "0")
DEFAULT_AFTER = os.getenv("IAWK_AFTER", "0")

# Input records are decoded one at a time with this encoding
INPUT_ENCODING = os.getenv("IAWK_ENCODING", "utf-8")

LOG_LEVEL = os.getenv("IAWK_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("IAWK_LOG_FILE") or None
