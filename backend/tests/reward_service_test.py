import sys
import unittest
from datetime import date
from decimal import Decimal
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


# Ensure `backend/` is on sys.path so `import rewards_api...` works
REPO_ROOT = Path(__file__).resolve().parents[2]
BACKEND_DIR = REPO_ROOT / "backend"
sys.path.insert(0, str(BACKEND_DIR))

from rewards_api.db.db import Base  # noqa: E402
from rewards_api.models.customer import Customer  # noqa: E402
from rewards_api.models.transaction import CustomerTransaction  # noqa: E402
from rewards_api.services.errors import ServiceError  # noqa: E402
from rewards_api.services.repository import SqlAlchemyRewardsRepository  # noqa: E402
from rewards_api.services.reward_service import RewardService  # noqa: E402


class RewardServiceTests(unittest.TestCase):
    def setUp(self):
        engine = create_engine(
            "sqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(bind=engine)
        self.Session = sessionmaker(bind=engine)

        with self.Session() as db:
            db.add_all(
                [
                    Customer(id=1, cust_name="John Doe", phone_no="1234567890"),
                    Customer(id=2, cust_name="Jane Roe"),
                ]
            )
            db.add_all(
                [
                    CustomerTransaction(
                        id=1,
                        customer_id=1,
                        amount=Decimal("40.00"),
                        transaction_date=date(2025, 8, 1),
                        product="Product A",
                    ),
                    CustomerTransaction(
                        id=2,
                        customer_id=1,
                        amount=Decimal("120.00"),
                        transaction_date=date(2025, 8, 10),
                        product="Product B",
                    ),
                    CustomerTransaction(
                        id=3,
                        customer_id=1,
                        amount=Decimal("75.00"),
                        transaction_date=date(2025, 7, 31),
                        product="Product C",
                    ),
                    CustomerTransaction(
                        id=4,
                        customer_id=1,
                        amount=Decimal("1000.00"),
                        transaction_date=date(2025, 9, 1),
                        product="Product D",
                    ),
                ]
            )
            db.commit()

    def test_list_transactions_returns_points_in_insertion_order(self):
        with self.Session() as db:
            transactions = RewardService(db).get_customer_transactions(1)

        self.assertEqual([t["product"] for t in transactions], ["Product A", "Product B", "Product C", "Product D"])
        self.assertEqual([t["points"] for t in transactions], [0, 90, 25, 1850])
        self.assertEqual(transactions[1]["date"], "2025-08-10")
        self.assertEqual(transactions[1]["amount"], 120.0)

    def test_list_transactions_empty_for_customer_without_transactions(self):
        with self.Session() as db:
            self.assertEqual(RewardService(db).get_customer_transactions(2), [])

    def test_rewards_for_august(self):
        with self.Session() as db:
            rewards = RewardService(db).get_rewards_for_customer(1, date(2025, 8, 1), date(2025, 8, 31))

        self.assertEqual(rewards["customerId"], 1)
        self.assertEqual(rewards["customerName"], "John Doe")
        self.assertEqual([t["points"] for t in rewards["transactions"]], [0, 90])
        self.assertEqual(rewards["totalPoints"], 90)
        self.assertEqual(rewards["monthlyPoints"], {"2025-08": 90})
        self.assertEqual(rewards["timeFrame"], {"startDate": "2025-08-01", "endDate": "2025-08-31"})

    def test_rewards_range_is_inclusive_at_both_ends(self):
        with self.Session() as db:
            rewards = RewardService(db).get_rewards_for_customer(1, date(2025, 7, 31), date(2025, 9, 1))

        self.assertEqual(rewards["monthlyPoints"], {"2025-07": 25, "2025-08": 90, "2025-09": 1850})
        self.assertEqual(rewards["totalPoints"], 1965)
        self.assertEqual(rewards["totalPoints"], sum(rewards["monthlyPoints"].values()))

    def test_missing_customer_maps_to_404(self):
        with self.Session() as db:
            with self.assertRaises(ServiceError) as ctx:
                RewardService(db).get_rewards_for_customer(99, date(2025, 8, 1), date(2025, 8, 31))

        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.code, "CUSTOMER_NOT_FOUND")
        self.assertEqual(ctx.exception.message, "Customer not found 99")
        self.assertEqual(ctx.exception.details, {"customer_id": 99})

    def test_empty_range_maps_to_404(self):
        with self.Session() as db:
            with self.assertRaises(ServiceError) as ctx:
                RewardService(db).get_rewards_for_customer(2, date(2025, 8, 1), date(2025, 8, 31))

        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.code, "NO_TRANSACTIONS_FOUND")
        self.assertEqual(ctx.exception.message, "No transactions found")

    def test_custom_messages(self):
        messages = {"customer_not_found": "No such customer:", "no_transactions_found": "Nothing here"}
        with self.Session() as db:
            service = RewardService(db, messages=messages)
            with self.assertRaises(ServiceError) as missing:
                service.get_rewards_for_customer(99, date(2025, 8, 1), date(2025, 8, 31))
            with self.assertRaises(ServiceError) as empty:
                service.get_rewards_for_customer(2, date(2025, 8, 1), date(2025, 8, 31))

        self.assertEqual(missing.exception.message, "No such customer: 99")
        self.assertEqual(empty.exception.message, "Nothing here")

    def test_reversed_range_is_rejected(self):
        with self.Session() as db:
            with self.assertRaises(ServiceError) as ctx:
                RewardService(db).get_rewards_for_customer(1, date(2025, 8, 31), date(2025, 8, 1))

        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.code, "VALIDATION_ERROR")

    def test_repository_converts_rows_to_engine_models(self):
        with self.Session() as db:
            repository = SqlAlchemyRewardsRepository(db)
            customer = repository.find_customer_by_id(1)
            transactions = repository.find_transactions_by_customer_id(1)

        self.assertIsNotNone(customer)
        self.assertEqual(customer.name, "John Doe")
        self.assertEqual(customer.phone_no, "1234567890")
        self.assertEqual([t.id for t in transactions], [1, 2, 3, 4])
        self.assertEqual(transactions[0].customer_id, 1)
        self.assertEqual(transactions[0].amount, Decimal("40.00"))

    def test_customer_lookup_does_not_load_transactions(self):
        with self.Session() as db:
            customer = SqlAlchemyRewardsRepository(db).find_customer_by_id(1)

        self.assertEqual(customer.transactions, [])


if __name__ == "__main__":
    unittest.main()
