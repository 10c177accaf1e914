"""
Create a user (e.g. first admin) without going through the HTTP sign-up. Run from project root:
  python -m gatekeeper.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m gatekeeper.scripts.create_user "Site Admin" admin@example.com your-secure-password admin
"""
import argparse
import sys

from gatekeeper.core.config import get_settings
from gatekeeper.core.database import build_engine, build_session_factory
from gatekeeper.core.exceptions import DuplicateUserError, ValidationFailure
from gatekeeper.core.security import hash_password
from gatekeeper.services.user_store import UserStore
from gatekeeper.services.validation import validate_signup


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Gatekeeper user.")
    parser.add_argument("name", help="Display name (2-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    try:
        signup = validate_signup(
            {"name": args.name, "email": args.email, "password": args.password, "role": args.role}
        )
    except ValidationFailure as e:
        print(e.details, file=sys.stderr)
        return 1

    engine = build_engine(get_settings())
    db = build_session_factory(engine)()
    try:
        store = UserStore(db)
        if store.find_by_email(signup.email) is not None:
            print(f"User '{signup.email}' already exists.", file=sys.stderr)
            return 1
        try:
            user = store.insert(
                name=signup.name,
                email=signup.email,
                password_hash=hash_password(signup.password),
                role=signup.role,
            )
        except DuplicateUserError:
            print(f"User '{signup.email}' already exists.", file=sys.stderr)
            return 1
        print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
        return 0
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    sys.exit(main())
