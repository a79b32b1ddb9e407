#!/usr/bin/env python3
"""
Seed the Wellness Journal database with a demo account.

Creates demo@example.com (password "demo-pass") with a week of mood logs
and a few diary entries, so the dashboard and summary pages have data to
show. Running it again replaces the demo account.

Usage:
    python scripts/seed_demo_data.py
"""
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR))
sys.path.insert(0, str(BASE_DIR / "src"))

from server.wellness_api.config import get_settings  # noqa: E402
from server.wellness_api.database import DatabaseManager  # noqa: E402
from server.wellness_api.services.auth import AuthService  # noqa: E402
from server.wellness_api.stores import DiaryStore, MoodStore  # noqa: E402

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo-pass"

# (days ago, emoji, note)
WEEK_OF_MOODS = [
    (6, "😔", "Rough start to the week"),
    (5, "😐", None),
    (4, "🤔", "Lots on my mind"),
    (3, "🙂", "Lunch with a friend"),
    (2, "😌", "Yoga in the evening"),
    (1, "😊", None),
    (0, "😄", "Finished the project!"),
]

DIARY_ENTRIES = [
    ("Monday blues", "Work piled up and I skipped my walk. Tomorrow I will go outside at lunch.", "sad"),
    ("Turning a corner", "Met Sam for lunch and talked through the deadline. Felt lighter afterwards.", "calm"),
    ("Good news", "The project shipped today. Celebrated with a long dinner and slept early.", "happy"),
]


def remove_demo_account(db: DatabaseManager) -> bool:
    """Delete the demo profile; its rows go with it through ON DELETE CASCADE."""
    with db.connect() as conn:
        cursor = conn.execute("DELETE FROM profiles WHERE email = ?", (DEMO_EMAIL,))
        return cursor.rowcount > 0


def main():
    settings = get_settings()
    Path(settings.data_path).mkdir(parents=True, exist_ok=True)
    db = DatabaseManager(settings)

    print("=" * 60)
    print("Wellness Journal Demo Data")
    print("=" * 60)
    print(f"\nDatabase: {settings.database_path}\n")

    if remove_demo_account(db):
        print(f"  Removed existing: {DEMO_EMAIL}")

    session = AuthService(db, settings).sign_up(
        email=DEMO_EMAIL, password=DEMO_PASSWORD, name="Demo User", location="Lisbon"
    )
    print(f"  Created account: {DEMO_EMAIL} / {DEMO_PASSWORD}")

    today = datetime.now(timezone.utc).date()
    moods = MoodStore(db)
    for days_ago, emoji, note in WEEK_OF_MOODS:
        moods.create(session.user_id, emoji, today - timedelta(days=days_ago), note=note)
    print(f"  Mood logs inserted: {len(WEEK_OF_MOODS)}")

    diaries = DiaryStore(db)
    for title, content, mood in DIARY_ENTRIES:
        diaries.create(session.user_id, title, content, mood=mood)
    print(f"  Diary entries inserted: {len(DIARY_ENTRIES)}")

    print()
    print("=" * 60)
    print(f"Complete! Sign in as {DEMO_EMAIL} to explore the dashboard.")
    print("=" * 60)


if __name__ == "__main__":
    main()
