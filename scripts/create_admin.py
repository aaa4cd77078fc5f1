"""
Create an admin account for the BoutiqueChat admin panel.

Usage:
    python scripts/create_admin.py --email admin@example.com --password secret123
"""

import os
import sys
import argparse
import getpass
import logging

# Add backend to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), "../backend"))

from fastapi import HTTPException

from app.database import init_db, session_scope
from app.services.auth_service import auth_service

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_admin(email: str, password: str) -> bool:
    init_db()
    try:
        with session_scope() as db:
            user = auth_service.create_user(db, email=email, password=password, is_superuser=True)
            logger.info(f"Admin {user.email} created (id={user.id})")
    except HTTPException as e:
        logger.error(e.detail)
        return False
    return True


def main():
    parser = argparse.ArgumentParser(description="Create an admin user")
    parser.add_argument("--email", required=True, help="Admin login email")
    parser.add_argument("--password", help="Password (prompted when omitted)")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    if len(password) < 8:
        logger.error("Password must have at least 8 characters")
        sys.exit(1)

    if not create_admin(args.email, password):
        sys.exit(1)


if __name__ == "__main__":
    main()
