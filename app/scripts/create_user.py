"""
Create an account by hand (e.g. an operator). Run from project root:
  python -m app.scripts.create_user NIK NAME [--email EMAIL --password PASSWORD] [--role ROLE]
Example:
  python -m app.scripts.create_user 3204123456780001 "Budi Santoso" --email op@mediq.com --password s3cret! --role OPERATOR
"""
import argparse
import sys

from sqlalchemy.exc import IntegrityError

from app.core.database import session_scope
from app.core.security import NAME_MAX_LEN, NIK_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_secret
from app.models.user import Role
from app.repositories.user import UserRepository


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a MediQ account (no registration UI).")
    parser.add_argument("nik", help=f"NIK (1-{NIK_MAX_LEN} chars)")
    parser.add_argument("name", help=f"Full name (1-{NAME_MAX_LEN} chars)")
    parser.add_argument("--email", default=None, help="Email, required for password login")
    parser.add_argument("--password", default=None, help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--role", default=Role.PASIEN.value, choices=[r.value for r in Role])
    args = parser.parse_args(argv)

    nik = args.nik.strip()
    name = args.name.strip()
    if not nik or len(nik) > NIK_MAX_LEN:
        print("Invalid NIK length.", file=sys.stderr)
        return 1
    if not name or len(name) > NAME_MAX_LEN:
        print("Invalid name length.", file=sys.stderr)
        return 1
    if args.password is not None and not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1
    if args.password is not None and not args.email:
        print("A password needs an email to log in with.", file=sys.stderr)
        return 1

    with session_scope() as db:
        users = UserRepository(db)
        if users.find_by_email_or_nik(args.email, nik) is not None:
            print(f"An account with NIK '{nik}' or that email already exists.", file=sys.stderr)
            return 1
        try:
            users.create(
                nik=nik,
                name=name,
                email=args.email,
                password_hash=hash_secret(args.password) if args.password else None,
                role=Role(args.role),
            )
        except IntegrityError:
            print("Account conflicts with an existing one.", file=sys.stderr)
            return 1
    print(f"Created account '{name}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
