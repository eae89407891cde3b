# sales/tests/test_expenses.py

from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from sales.models import Expense
from sales.services import ExpenseError, delete_expense, record_expense, total_expenses

User = get_user_model()


class ExpenseServiceTests(TestCase):
    """
    GUARANTEES:
    - amount > 0, stored at 2dp half-up
    - category required, trimmed
    - expense_date defaults to today
    """

    def test_record_rounds_and_trims(self):
        expense = record_expense(category="  Supplies ", amount="12.345", description=" clippers oil ")

        self.assertEqual(expense.amount, Decimal("12.35"))
        self.assertEqual(expense.category, "Supplies")
        self.assertEqual(expense.description, "clippers oil")
        self.assertEqual(expense.expense_date, timezone.localdate())

    def test_zero_amount_is_rejected(self):
        with self.assertRaises(ExpenseError):
            record_expense(category="Rent", amount="0")
        self.assertEqual(Expense.objects.count(), 0)

    def test_blank_category_is_rejected(self):
        with self.assertRaises(ExpenseError):
            record_expense(category="   ", amount="5.00")

    def test_expense_date_must_be_a_date(self):
        with self.assertRaises(ExpenseError):
            record_expense(category="Rent", amount="5.00", expense_date="2026-03-10")

    def test_total_is_inclusive_of_both_ends(self):
        record_expense(category="Rent", amount="100.00", expense_date=date(2026, 3, 1))
        record_expense(category="Water", amount="20.00", expense_date=date(2026, 3, 31))
        record_expense(category="Rent", amount="100.00", expense_date=date(2026, 4, 1))

        self.assertEqual(total_expenses(date(2026, 3, 1), date(2026, 3, 31)), Decimal("120.00"))
        self.assertEqual(total_expenses(), Decimal("220.00"))
        self.assertEqual(total_expenses(date(2027, 1, 1)), Decimal("0.00"))

    def test_delete_removes_the_row(self):
        expense = record_expense(category="Rent", amount="100.00")

        delete_expense(expense)

        self.assertFalse(Expense.objects.exists())


class ExpenseAPITests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(username="owner", password="pass12345", is_staff=True)
        self.cashier = User.objects.create_user(username="cashier", password="pass12345")

    def test_cashier_records_an_expense(self):
        self.client.force_authenticate(user=self.cashier)

        res = self.client.post(
            "/api/sales/expenses/",
            {"category": "Supplies", "amount": "18.50", "expense_date": "2026-03-10", "description": "Towels"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED)
        self.assertEqual(res.data["amount"], "18.50")
        self.assertEqual(res.data["expense_date"], "2026-03-10")
        self.assertEqual(Expense.objects.get().description, "Towels")

    def test_negative_amount_is_400(self):
        self.client.force_authenticate(user=self.cashier)

        res = self.client.post("/api/sales/expenses/", {"category": "Rent", "amount": "-1.00"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("amount", res.data)

    def test_list_filters_by_period(self):
        record_expense(category="Rent", amount="100.00", expense_date=date(2026, 3, 1))
        record_expense(category="Water", amount="20.00", expense_date=date(2026, 3, 15))
        self.client.force_authenticate(user=self.cashier)

        res = self.client.get("/api/sales/expenses/", {"start": "2026-03-10", "end": "2026-03-31"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([row["category"] for row in res.data["results"]], ["Water"])

    def test_anonymous_is_401(self):
        res = self.client.get("/api/sales/expenses/")

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_delete_requires_admin(self):
        expense = record_expense(category="Rent", amount="100.00")

        self.client.force_authenticate(user=self.cashier)
        res = self.client.delete(f"/api/sales/expenses/{expense.id}/")
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(user=self.admin)
        res = self.client.delete(f"/api/sales/expenses/{expense.id}/")
        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Expense.objects.exists())

    def test_delete_unknown_is_404(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.delete("/api/sales/expenses/00000000-0000-0000-0000-000000000000/")

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
