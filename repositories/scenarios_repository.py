# -----------------------------
# Scenarios Repository
# -----------------------------


def save_scenario(conn, name, account_json):
    """
    Insert or replace the account document stored under ``name``.
    - conn: DuckDB connection (from get_db() or passed in)
    - account_json: str, the account serialized as JSON
    """
    conn.execute(
        """
        INSERT INTO scenarios (name, account_json)
        VALUES (?, ?)
        ON CONFLICT (name) DO UPDATE SET account_json = excluded.account_json
        """,
        (name, account_json)
    )


def get_scenario(conn, name):
    """
    Return the stored account JSON for ``name``, or None if not found.
    """
    row = conn.execute(
        "SELECT account_json FROM scenarios WHERE name = ?",
        (name,)
    ).fetchone()

    if row:
        return row[0]
    return None


def list_scenarios(conn):
    """Return all scenario names, sorted."""
    rows = conn.execute("SELECT name FROM scenarios ORDER BY name").fetchall()
    return [r[0] for r in rows]


def delete_scenario(conn, name):
    """
    Delete a scenario by name. Returns True if a row was removed.
    """
    existed = get_scenario(conn, name) is not None
    conn.execute(
        "DELETE FROM scenarios WHERE name = ?",
        (name,)
    )
    return existed
