"""
Create a user directly in the store (e.g. the first admin). Run from project root:
  python -m paytrack.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m paytrack.scripts.create_user admin your-secure-password admin
"""
import argparse
import sys

from dotenv import load_dotenv

from paytrack.core.config import get_settings
from paytrack.core.database import create_db_engine, create_session_factory
from paytrack.core.errors import ConflictError, ValidationError
from paytrack.core.roles import ADMIN_ROLE
from paytrack.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN
from paytrack.services.users import insert_user


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Create a Paytrack user (bootstrap; no admin token needed).")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=ADMIN_ROLE, choices=settings.USER_ROLES)
    args = parser.parse_args(argv)

    if not args.username or len(args.username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    engine = create_db_engine(settings.DATABASE_URL)
    db = create_session_factory(engine)()
    try:
        user = insert_user(db, args.username, args.password, args.role, settings)
    except (ConflictError, ValidationError) as e:
        print(f"{e.message} ({args.username!r})", file=sys.stderr)
        return 1
    finally:
        db.close()
        engine.dispose()
    print(f"Created user '{user.username}' with role '{user.role}' (id={user.id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
