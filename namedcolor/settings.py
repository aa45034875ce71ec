import os

PALETTE_NAME = os.getenv("PALETTE_NAME", "css")
PALETTE_PATH = os.getenv("PALETTE_PATH") or None  # overrides PALETTE_NAME when set
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
