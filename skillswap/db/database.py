from skillswap.db.store import Database

# Process-wide state; wiped on restart
database = Database()

def get_db() -> Database:
    """Get the application database."""
    return database
