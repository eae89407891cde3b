# sales/tests/test_reports.py

from datetime import date, datetime, timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APIClient

from directory.models import Staff, StaffRole
from sales.services import DjangoSaleSink, commission_report, record_expense, sales_summary
from sales.tests.helpers import make_core_sale

User = get_user_model()


def _at(day: date, hour: int = 12) -> datetime:
    return timezone.make_aware(datetime(day.year, day.month, day.day, hour, 0))


class ReportServiceTests(TestCase):
    """
    Sales summary + commission report.

    GUARANTEES:
    - Period bounds are inclusive dates
    - Commission = revenue * rate / 100, employees only
    """

    def setUp(self):
        self.sink = DjangoSaleSink()
        self.day = date(2026, 3, 10)

        self.marcus = Staff.objects.create(name="Marcus", role=StaffRole.EMPLOYEE, commission_rate=Decimal("40"))
        self.dee = Staff.objects.create(name="Dee", role=StaffRole.EMPLOYEE, commission_rate=Decimal("35"))
        self.owner = Staff.objects.create(name="Owner", role=StaffRole.ADMIN, commission_rate=Decimal("50"))

        self.sink.append(make_core_sale(staff_id=self.marcus.id, total="25.00", sold_at=_at(self.day)))
        self.sink.append(
            make_core_sale(staff_id=self.marcus.id, total="40.00", payment_method="card", sold_at=_at(self.day, 18))
        )
        self.sink.append(make_core_sale(staff_id=self.owner.id, total="30.00", sold_at=_at(self.day)))
        self.sink.append(
            make_core_sale(staff_id=self.dee.id, total="15.00", sold_at=_at(self.day - timedelta(days=1)))
        )

    def test_summary_for_one_day(self):
        summary = sales_summary(self.day, self.day)

        self.assertEqual(summary["count"], 3)
        self.assertEqual(summary["revenue"], Decimal("95.00"))
        self.assertEqual(summary["by_payment_method"]["cash"], Decimal("55.00"))
        self.assertEqual(summary["by_payment_method"]["card"], Decimal("40.00"))
        self.assertEqual(summary["by_payment_method"]["wallet"], Decimal("0.00"))

    def test_summary_open_period_counts_everything(self):
        self.assertEqual(sales_summary()["count"], 4)

    def test_summary_nets_expenses_dated_in_the_period(self):
        record_expense(category="Rent", amount="60.00", expense_date=self.day)
        record_expense(category="Supplies", amount="12.50", expense_date=self.day)
        record_expense(category="Rent", amount="999.00", expense_date=self.day - timedelta(days=1))

        summary = sales_summary(self.day, self.day)

        self.assertEqual(summary["expenses"], Decimal("72.50"))
        self.assertEqual(summary["net_profit"], Decimal("22.50"))

    def test_summary_without_expenses_nets_to_revenue(self):
        summary = sales_summary(self.day, self.day)

        self.assertEqual(summary["expenses"], Decimal("0.00"))
        self.assertEqual(summary["net_profit"], summary["revenue"])

    def test_commission_report_lists_employees_only(self):
        rows = commission_report(self.day, self.day)

        self.assertEqual([r["name"] for r in rows], ["Dee", "Marcus"])

        marcus = rows[1]
        self.assertEqual(marcus["revenue"], Decimal("65.00"))
        self.assertEqual(marcus["sales_count"], 2)
        self.assertEqual(marcus["commission"], Decimal("26.00"))

        dee = rows[0]
        self.assertEqual(dee["revenue"], Decimal("0.00"))
        self.assertEqual(dee["commission"], Decimal("0.00"))


class ReportAPITests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.admin = User.objects.create_user(username="owner", password="pass12345", is_staff=True)
        self.cashier = User.objects.create_user(username="cashier", password="pass12345")

        staff = Staff.objects.create(name="Marcus", commission_rate=Decimal("40"))
        DjangoSaleSink().append(make_core_sale(staff_id=staff.id, total="25.00"))

    def test_summary_requires_admin(self):
        self.client.force_authenticate(user=self.cashier)

        res = self.client.get("/api/sales/reports/summary/")

        self.assertEqual(res.status_code, 403)

    def test_summary_for_admin(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.get("/api/sales/reports/summary/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["revenue"], "25.00")

    def test_summary_reports_expenses_and_net_profit(self):
        record_expense(category="Utilities", amount="40.00")
        self.client.force_authenticate(user=self.admin)

        res = self.client.get("/api/sales/reports/summary/")

        self.assertEqual(res.data["expenses"], "40.00")
        self.assertEqual(res.data["net_profit"], "-15.00")

    def test_commissions_for_admin(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.get("/api/sales/reports/commissions/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data[0]["commission"], "10.00")

    def test_bad_period_is_rejected(self):
        self.client.force_authenticate(user=self.admin)

        res = self.client.get("/api/sales/reports/summary/", {"start": "2026-03-10", "end": "2026-03-01"})

        self.assertEqual(res.status_code, 400)


class SaleHistoryAPITests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=User.objects.create_user(username="cashier", password="pass12345"))

        staff = Staff.objects.create(name="Marcus")
        self.core = make_core_sale(staff_id=staff.id, total="25.00", payment_method="card")
        DjangoSaleSink().append(self.core)
        DjangoSaleSink().append(make_core_sale(staff_id=staff.id, total="10.00"))

    def test_list_and_filter_by_payment_method(self):
        res = self.client.get("/api/sales/", {"payment_method": "card"})

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["id"], self.core.id)

    def test_retrieve_includes_items(self):
        res = self.client.get(f"/api/sales/{self.core.id}/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["items"][0]["name"], "Classic Haircut")
        self.assertEqual(res.data["staff_name"], "Marcus")
