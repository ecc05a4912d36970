"""
Command-line interface for the customer rewards engine.
Transactions are kept in a CSV file; points are computed on every read.
"""

import argparse
import csv
import os
import sys
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional

from rewards_engine import CustomerNotFound, NoTransactionsFound, RewardsAggregator, calculate_points
from rewards_engine.models import Customer, Transaction


# Default CSV file path
CSV_PATH = Path(os.getenv("REWARDS_CSV_PATH", "data/transactions.csv"))
CSV_HEADERS = ["id", "customer_id", "customer_name", "date", "amount", "product"]


class CsvTransactionStore:
    """Customer and transaction lookups over the CLI's CSV file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load_rows(self) -> List[dict]:
        if not self.path.exists():
            return []
        with open(self.path, "r", newline="", encoding="utf-8") as f:
            return list(csv.DictReader(f))

    def load_transactions(self) -> List[Transaction]:
        """
        Load all transactions from the CSV file, in file order.

        Returns:
            List of Transaction objects
        """
        return [
            Transaction(
                id=int(row["id"]),
                amount=Decimal(row["amount"]),
                date=date.fromisoformat(row["date"]),
                product=row["product"],
                customer_id=int(row["customer_id"]),
            )
            for row in self.load_rows()
        ]

    def find_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        # A customer exists in the CSV store once they have at least one row
        rows = [row for row in self.load_rows() if int(row["customer_id"]) == customer_id]
        if not rows:
            return None
        names = [row["customer_name"] for row in rows if row.get("customer_name")]
        return Customer(
            id=customer_id,
            name=names[-1] if names else f"Customer {customer_id}",
            transactions=self.find_transactions_by_customer_id(customer_id),
        )

    def find_transactions_by_customer_id(self, customer_id: int) -> List[Transaction]:
        return [txn for txn in self.load_transactions() if txn.customer_id == customer_id]

    def find_transactions_by_customer_id_and_date_range(
        self, customer_id: int, start_date: date, end_date: date
    ) -> List[Transaction]:
        return [
            txn
            for txn in self.find_transactions_by_customer_id(customer_id)
            if start_date <= txn.date <= end_date
        ]

    def append(self, customer_id: int, customer_name: str, txn_date: str, amount: Decimal, product: str) -> int:
        """Append a transaction row and return its id."""
        ensure_csv_exists(self.path)
        existing_ids = [int(row["id"]) for row in self.load_rows()]
        txn_id = max(existing_ids, default=0) + 1
        with open(self.path, "a", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([txn_id, customer_id, customer_name, txn_date, amount, product])
        return txn_id


def ensure_csv_exists(path: Path):
    """Create the CSV file with headers if it doesn't exist."""
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADERS)


def parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        print(f"Error: Invalid date format '{value}'. Expected YYYY-MM-DD.")
        sys.exit(1)


def parse_amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        print(f"Error: Invalid amount '{value}'.")
        sys.exit(1)
    if not amount.is_finite():
        print(f"Error: Amount must be a finite number. Got: {value}")
        sys.exit(1)
    return amount


def cmd_add(args):
    """
    Add a new transaction to the CSV file.

    Args:
        args: Parsed command-line arguments with fields:
            - customer: customer id
            - name: optional customer name
            - date: YYYY-MM-DD
            - amount: decimal string
            - product: product label
    """
    txn_date = parse_date(args.date)
    amount = parse_amount(args.amount)

    if not args.product.strip():
        print("Error: Product is required.")
        sys.exit(1)

    store = CsvTransactionStore(CSV_PATH)
    txn_id = store.append(args.customer, args.name or "", txn_date.isoformat(), amount, args.product.strip())

    print(f"Transaction added: {txn_id}")
    print(f"  Customer: {args.customer}")
    print(f"  Date: {txn_date.isoformat()}")
    print(f"  Amount: ${amount:.2f}")
    print(f"  Product: {args.product.strip()}")
    print(f"  Points: {calculate_points(amount)}")


def cmd_points(args):
    """Print the points earned by a single amount."""
    amount = parse_amount(args.amount)
    print(calculate_points(amount))


def cmd_list(args):
    """
    List a customer's transactions with their points.

    Args:
        args: Parsed command-line arguments with fields:
            - customer: customer id
    """
    aggregator = build_aggregator()
    results = aggregator.list_transactions(args.customer)

    if not results:
        print(f"No transactions recorded for customer {args.customer}.")
        return

    print(f"\n=== Transactions for customer {args.customer} ===\n")
    for result in results:
        print(f"  {result.date.isoformat()}  ${result.amount:>10.2f}  {result.points:>6} pts  {result.product}")
    print()


def cmd_rewards(args):
    """
    Show a customer's reward summary for a date range.

    Args:
        args: Parsed command-line arguments with fields:
            - customer: customer id
            - start: YYYY-MM-DD
            - end: YYYY-MM-DD
    """
    start_date = parse_date(args.start)
    end_date = parse_date(args.end)
    if start_date > end_date:
        print(f"Error: Start date {start_date} is after end date {end_date}.")
        sys.exit(1)

    aggregator = build_aggregator()
    try:
        summary = aggregator.get_rewards(args.customer, start_date, end_date)
    except (CustomerNotFound, NoTransactionsFound) as exc:
        print(f"Error: {exc.message}")
        sys.exit(1)

    print(f"\n=== Rewards for {summary.customer_name} ({summary.customer_id}) ===\n")
    print(f"Time frame: {summary.time_frame.start_date} to {summary.time_frame.end_date}")

    print("\nTransactions:")
    for result in summary.transactions:
        print(f"  {result.date.isoformat()}  ${result.amount:>10.2f}  {result.points:>6} pts  {result.product}")

    print("\nPoints by Month:")
    for key, points in sorted(summary.monthly_points.items()):
        print(f"  {key}: {points}")

    print(f"\nTotal Points: {summary.total_points}")
    print()


def build_aggregator() -> RewardsAggregator:
    store = CsvTransactionStore(CSV_PATH)
    return RewardsAggregator(customers=store, transactions=store)


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Customer Rewards CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Add command
    parser_add = subparsers.add_parser("add", help="Add a new transaction")
    parser_add.add_argument("--customer", type=int, required=True, help="Customer ID")
    parser_add.add_argument("--name", default=None, help="Customer name (optional)")
    parser_add.add_argument("--date", required=True, help="Transaction date (YYYY-MM-DD)")
    parser_add.add_argument("--amount", required=True, help="Transaction amount")
    parser_add.add_argument("--product", required=True, help="Product label")

    # Points command
    parser_points = subparsers.add_parser("points", help="Points earned by an amount")
    parser_points.add_argument("amount", help="Transaction amount")

    # List command
    parser_list = subparsers.add_parser("list", help="List a customer's transactions with points")
    parser_list.add_argument("--customer", type=int, required=True, help="Customer ID")

    # Rewards command
    parser_rewards = subparsers.add_parser("rewards", help="Reward summary for a date range")
    parser_rewards.add_argument("--customer", type=int, required=True, help="Customer ID")
    parser_rewards.add_argument("--start", required=True, help="Start date (YYYY-MM-DD)")
    parser_rewards.add_argument("--end", required=True, help="End date (YYYY-MM-DD)")

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute command
    if args.command == "add":
        cmd_add(args)
    elif args.command == "points":
        cmd_points(args)
    elif args.command == "list":
        cmd_list(args)
    elif args.command == "rewards":
        cmd_rewards(args)


if __name__ == "__main__":
    main()
