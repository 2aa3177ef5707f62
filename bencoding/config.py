"""
Settings for the bencoding package.
Loads configuration from a .env file with fallback to defaults.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# ===== Decoder =====
# 0 disables the nesting limit
MAX_DEPTH = int(os.getenv("BENCODING_MAX_DEPTH", "256")) or None

# ===== Command line =====
HTTP_TIMEOUT = float(os.getenv("BENCODING_HTTP_TIMEOUT", "30"))  # seconds

# ===== Logging =====
LOG_LEVEL = os.getenv("BENCODING_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"
