"""
Create a user with a given role (e.g. a second admin). Run from project root:
  python -m roster.scripts.create_user USERNAME PASSWORD [ROLE_NAME]
Example:
  python -m roster.scripts.create_user alice s3cret ROLE_ADMIN
"""
import argparse
import sys

from roster.core.config import get_settings
from roster.core.database import build_engine, build_session_factory
from roster.core.security import hash_password
from roster.models import DEFAULT_ROLE, Role, User


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Roster user with an existing role.")
    parser.add_argument("username", help="Username (must be unique)")
    parser.add_argument("password", help="Password (stored as a bcrypt hash)")
    parser.add_argument(
        "role",
        nargs="?",
        default=DEFAULT_ROLE.value,
        help=f"Name of an existing role (default {DEFAULT_ROLE.value})",
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username:
        print("Username must be non-empty.", file=sys.stderr)
        return 1

    settings = get_settings()
    engine = build_engine(settings)
    db = build_session_factory(engine)()
    try:
        role = db.query(Role).filter(Role.name == args.role).first()
        if role is None:
            print(f"Role '{args.role}' does not exist.", file=sys.stderr)
            return 1
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        user = User(
            username=username,
            password=hash_password(args.password, settings.BCRYPT_ROUNDS),
            role_id=role.id,
        )
        db.add(user)
        db.commit()
        print(f"Created user '{username}' with role '{role.name}'.")
        return 0
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
