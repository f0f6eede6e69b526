from .connection import get_db_cursor


def get_default_location() -> str | None:
    """Get the user's saved default location, or None if it was never set."""
    with get_db_cursor() as cursor:
        cursor.execute("SELECT default_location FROM user_settings LIMIT 1")
        row = cursor.fetchone()
    if row is None or not row[0]:
        return None
    return row[0]
