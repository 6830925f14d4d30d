#!/usr/bin/env python3
"""Issue a bearer token for local development.

Creates the user if no account with the email exists yet.

Usage:
    python scripts/issue_token.py alice@example.com Alice
    python scripts/issue_token.py root@example.com Root --admin
"""

import argparse
import asyncio
import sys

from blog.domain.repository import UnitOfWork
from blog.domain.service import JWTService, UserService
from blog.domain.value import UserRole
from blog.util.di.container import create_container


async def issue(email: str, name: str, role: UserRole) -> str:
    """Get or create the user and return a token for them."""
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            jwt_service = await request_container.get(JWTService)
            unit_of_work = await request_container.get(UnitOfWork)
            user = await user_service.get_or_create(email=email, name=name, role=role)
            await unit_of_work.commit()
            return jwt_service.create_token(str(user.id), user.role)
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email")
    parser.add_argument("name")
    parser.add_argument("--admin", action="store_true", help="create an admin")
    args = parser.parse_args()

    role = UserRole.ADMIN if args.admin else UserRole.USER
    print(asyncio.run(issue(args.email, args.name, role)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
