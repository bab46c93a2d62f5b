"""
Create a journal account from the command line. Run from project root:
  python -m journal.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m journal.scripts.create_user editor s3cret admin
"""
import argparse
import sys

from journal.core.database import SessionLocal
from journal.core.security import USERNAME_MAX_LEN
from journal.models.user import ROLE_USER, ROLES
from journal.services.accounts import register
from journal.services.errors import DuplicateUsername


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a journal user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help="Password (non-empty)")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=ROLES)
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password:
        print("Password must not be empty.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        register(db, username, args.password, args.role)
    except DuplicateUsername:
        print(f"User '{username}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{username}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
