import duckdb
import logging

import settings

DB_FILE = settings.DB_FILE

logger = logging.getLogger(__name__)

# -----------------------------
# Logging
# -----------------------------
def log_info(msg):
    logger.info(msg)
    print(msg)

def log_error(msg):
    logger.error(msg)
    print(msg)

# -----------------------------
# Get a DB connection
# -----------------------------
def get_db():
    """
    Returns a new DuckDB connection.
    """
    return duckdb.connect(DB_FILE)

# -----------------------------
# Initialize database schema
# -----------------------------
def init_db():
    conn = get_db()
    try:
        # Named scenarios: one account document per name
        conn.execute("""
        CREATE TABLE IF NOT EXISTS scenarios (
            name VARCHAR PRIMARY KEY,
            account_json VARCHAR NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """)
        log_info("Scenarios table ensured.")

    except duckdb.Error as e:
        log_error(f"Error initializing DB: {e}")
        raise
    finally:
        conn.close()
        log_info("Database setup complete and connection closed.")
