import os
import sys
from dotenv import load_dotenv

# Add the 'Backend' directory to the system path so we can import from the 'app' module.
backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'Backend'))
sys.path.append(backend_dir)

# Load the .env file from the project root to get the DATABASE_URL.
project_root = os.path.dirname(backend_dir)
load_dotenv(os.path.join(project_root, ".env"))
print(" Environment loaded.")

# Imported only now that the path and env are set.
from app.services.database import engine, create_tables
print(" Application modules imported successfully.")

def create_all_tables():
    """Connects to the database and creates the artist, audio_file and artist_audio_file tables."""
    print("\nConnecting to the database to create tables...")
    create_tables(engine)
    print(" All tables created successfully!")
    engine.dispose()

if __name__ == "__main__":
    create_all_tables()
