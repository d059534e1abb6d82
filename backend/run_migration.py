"""
Run migration to add visibility column to reflections table.
"""
import sys
import os

# Add the backend directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from reflection_app.db.session import engine
from reflection_app.db.migrations.add_visibility_to_reflections import migrate

if __name__ == "__main__":
    try:
        migrate(engine)
        print("Migration completed successfully!")
    except Exception as e:
        print(f"Migration failed: {e}")
        raise
