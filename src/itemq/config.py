import os

# Logging (stderr only; stdout is reserved for the document)
LOG_LEVEL: str = os.getenv("ITEMQ_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT: str = os.getenv(
    "ITEMQ_LOG_FORMAT",
    "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)
