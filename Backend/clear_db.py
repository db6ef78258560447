from sqlalchemy import create_engine, text

from app.core.config import settings  # same DATABASE_URL the app uses

def clear_database():
    """
    Connects to the database and drops the library tables.
    This is useful for clearing out old data during development.
    """
    print(f"Connecting to database...")
    engine = create_engine(settings.DATABASE_URL)

    with engine.connect() as conn:
        print("Clearing library tables (artist_audio_file, audio_file, artist)...")
        # The join table goes first so the foreign keys never dangle.
        conn.execute(text("DROP TABLE IF EXISTS artist_audio_file"))
        conn.execute(text("DROP TABLE IF EXISTS audio_file"))
        conn.execute(text("DROP TABLE IF EXISTS artist"))
        conn.commit()
        print("Tables cleared successfully.")

    engine.dispose()

if __name__ == "__main__":
    print("This script will permanently delete library data from your database.")
    confirm = input("Are you sure you want to continue? (y/n): ")
    if confirm.lower() == 'y':
        clear_database()
    else:
        print("Operation cancelled.")
