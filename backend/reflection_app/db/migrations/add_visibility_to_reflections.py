"""
Migration: add the visibility column to reflections and backfill it from is_private.
"""
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine


def migrate(engine: Engine) -> bool:
    """Add reflections.visibility if missing; returns True when the column was added."""
    columns = {column["name"] for column in inspect(engine).get_columns("reflections")}

    with engine.begin() as conn:
        added = "visibility" not in columns
        if added:
            conn.execute(text("""
                ALTER TABLE reflections
                ADD COLUMN visibility VARCHAR(20) NOT NULL DEFAULT 'private'
                CHECK (visibility IN ('private', 'public'))
            """))
            print("Added visibility column to reflections table")

            # Rows that predate the column follow their legacy is_private flag
            result = conn.execute(text("""
                UPDATE reflections
                SET visibility = CASE WHEN is_private THEN 'private' ELSE 'public' END
            """))
            print(f"Backfilled visibility for {result.rowcount} reflections")
        else:
            print("visibility column already exists, skipping column creation and backfill")
    return added
