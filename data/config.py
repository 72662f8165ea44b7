import os

# Set SLP_DEBUG=1 to trace every frame and row while decoding
DEBUG = os.environ.get("SLP_DEBUG", "0").lower() in ("1", "true", "yes")

CURRENT_VERSION = "0.1.0"
