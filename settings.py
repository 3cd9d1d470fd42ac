import logging
import os

# -----------------------------
# Environment configuration
# -----------------------------
DB_FILE = os.getenv("BUDGET_DB_FILE", "budget.duckdb")
LOG_FILE = os.getenv("BUDGET_LOG_FILE", "budget.log")
LOG_LEVEL = os.getenv("BUDGET_LOG_LEVEL", "INFO")
SCHEMA_DIR = os.getenv("BUDGET_SCHEMA_DIR", "schemas")

# 0 keeps every (account, date) balance for the lifetime of a run
BALANCE_CACHE_SIZE = int(os.getenv("BUDGET_BALANCE_CACHE_SIZE", "0"))

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging(log_file=None, level=None):
    """Route log records to the configured file. Called once by entry points."""
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        filename=log_file or LOG_FILE,
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
