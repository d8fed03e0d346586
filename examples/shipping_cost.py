"""
Three-stage lookup: user -> zip code -> shipping cost.

Any step may come back empty; the chain stops there and the boundary
picks a default.

Run: python examples/shipping_cost.py
"""
from dataclasses import dataclass
from typing import Optional

from maybepy import (
    Option,
    present,
    absent,
    from_nullable,
    and_then,
    get_or_else,
    traced,
    ConsoleLogger,
)


@dataclass(frozen=True)
class User:
    id: int
    name: str
    zip_code: Optional[str]


USERS = {
    42: User(42, "Ada", "90210"),
    7: User(7, "Grace", None),
}
RATES = {"90210": 7.50}


def find_user(uid: int) -> Option[User]:
    return from_nullable(USERS.get(uid))


def user_zip(user: User) -> Option[str]:
    return from_nullable(user.zip_code)


def shipping_cost(zip_code: str) -> Option[float]:
    return present(RATES[zip_code]) if zip_code in RATES else absent()


def main():
    log = ConsoleLogger(level="DEBUG")
    for uid in (42, 7, 999):
        opt = traced(f"cost for user {uid}", and_then(and_then(find_user(uid), user_zip), shipping_cost), log)
        print(uid, "=>", get_or_else(0, opt))


if __name__ == "__main__":
    main()
