#!/usr/bin/env python3
"""Seed demo submissions for screenshots and manual testing.

Inserts a handful of representative form submissions through the same
service the /submit endpoint uses. Emails that are already registered are
skipped, so the script can be re-run safely.

Usage:
    DB_USER=root DB_PASS=secret python scripts/seed_demo_data.py

    # Or against any SQLAlchemy URL:
    DATABASE_URL=sqlite:///./demo.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import get_settings
from src.database import create_db_engine, create_session_factory, init_db
from src.schemas.submission import SubmissionForm
from src.services.users import EmailAlreadyRegisteredError, create_user

DEMO_SUBMISSIONS = [
    {
        "name": "Ann Example",
        "email": "ann@example.com",
        "password": "demopass123",
        "message": "Looking forward to the newsletter.",
    },
    {
        "name": "Bob Example",
        "email": "bob@example.com",
        "password": "demopass123",
    },
    {
        "name": "Carol Example",
        "email": "carol@example.com",
        "password": "demopass123",
        "message": "Please get in touch about the workshop dates.",
    },
]


def seed_demo_data():
    """Seed the database with representative submissions."""
    engine = create_db_engine(get_settings())
    init_db(engine)
    session = create_session_factory(engine)()

    try:
        for submission in DEMO_SUBMISSIONS:
            form = SubmissionForm(**submission)
            try:
                user = create_user(session, form)
            except EmailAlreadyRegisteredError:
                print(f"Skipping {form.email}: already registered")
                continue
            print(f"Created submission {user.id} for {user.email}")
        print("Demo data seeded successfully!")
    finally:
        session.close()
        engine.dispose()


if __name__ == "__main__":
    seed_demo_data()
