import unittest
from dataclasses import dataclass
from typing import Dict, Optional

from maybepy import Option, present, absent, from_nullable, and_then, get_or_else, chain


@dataclass(frozen=True)
class UserRecord:
    id: int
    zip_code: Optional[str]


@dataclass(frozen=True)
class Cost:
    amount: float


class Shop:
    def __init__(self, users: Dict[int, UserRecord], rates: Dict[str, float]):
        self.users = users
        self.rates = rates

    def lookup_user(self, uid: int) -> Option[UserRecord]:
        return from_nullable(self.users.get(uid))

    def user_zip(self, user: UserRecord) -> Option[str]:
        return from_nullable(user.zip_code)

    def shipping_cost(self, zip_code: str) -> Option[Cost]:
        return present(Cost(self.rates[zip_code])) if zip_code in self.rates else absent()

    def cost_for(self, uid: int) -> Option[Cost]:
        return and_then(and_then(self.lookup_user(uid), self.user_zip), self.shipping_cost)


class TestShippingCost(unittest.TestCase):
    def test_known_user_with_valid_zip(self):
        shop = Shop({42: UserRecord(42, "90210")}, {"90210": 7.50})
        self.assertEqual(shop.cost_for(42), present(Cost(7.50)))

    def test_unknown_user(self):
        shop = Shop({}, {"90210": 7.50})
        self.assertEqual(shop.cost_for(42), absent())

    def test_user_without_zip(self):
        shop = Shop({42: UserRecord(42, None)}, {"90210": 7.50})
        self.assertEqual(shop.cost_for(42), absent())

    def test_zip_without_rate(self):
        shop = Shop({42: UserRecord(42, "10001")}, {"90210": 7.50})
        self.assertEqual(shop.cost_for(42), absent())

    def test_boundary_default_for_unknown_user(self):
        shop = Shop({42: UserRecord(42, "90210")}, {"90210": 7.50})
        self.assertEqual(get_or_else(0, shop.cost_for(999)), 0)

    def test_chain_matches_nested_and_then(self):
        shop = Shop({42: UserRecord(42, "90210")}, {"90210": 7.50})
        for uid in (42, 999):
            self.assertEqual(
                chain(shop.lookup_user(uid), shop.user_zip, shop.shipping_cost),
                shop.cost_for(uid),
            )
