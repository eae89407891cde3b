# directory/tests/test_directory.py

import uuid
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework.test import APIClient

from directory.models import Customer, Staff, StaffRole
from directory.services import DjangoDirectorySource

User = get_user_model()


class StaffModelTests(TestCase):
    def test_commission_must_be_a_percentage(self):
        staff = Staff(name="Marcus", commission_rate=Decimal("120"))

        with self.assertRaises(ValidationError):
            staff.full_clean()

    def test_default_role_is_employee(self):
        staff = Staff.objects.create(name="Dee")

        self.assertTrue(staff.is_employee)
        self.assertIn("Employee", str(staff))


class DirectorySourceTests(TestCase):
    """
    Name resolution for sale snapshots.

    GUARANTEES:
    - Known ids resolve to the current name
    - Unknown, blank or malformed ids resolve to None (never raise)
    """

    def setUp(self):
        self.source = DjangoDirectorySource()
        self.staff = Staff.objects.create(name="Marcus", role=StaffRole.EMPLOYEE)
        self.customer = Customer.objects.create(name="Jordan", phone="555-0101")

    def test_resolves_known_ids(self):
        self.assertEqual(self.source.resolve_staff_name(str(self.staff.id)), "Marcus")
        self.assertEqual(self.source.resolve_customer_name(self.customer.id), "Jordan")

    def test_unknown_ids_resolve_to_none(self):
        self.assertIsNone(self.source.resolve_staff_name(str(uuid.uuid4())))
        self.assertIsNone(self.source.resolve_customer_name(str(uuid.uuid4())))

    def test_malformed_and_blank_ids_resolve_to_none(self):
        self.assertIsNone(self.source.resolve_staff_name("staff-7"))
        self.assertIsNone(self.source.resolve_staff_name(""))
        self.assertIsNone(self.source.resolve_customer_name(None))


class DirectoryAPITests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=User.objects.create_user(username="cashier", password="pass12345"))

        Staff.objects.create(name="Owner", role=StaffRole.ADMIN)
        Staff.objects.create(name="Marcus", role=StaffRole.EMPLOYEE)
        Staff.objects.create(name="Gone", is_active=False)
        Customer.objects.create(name="Jordan", phone="555-0101")
        Customer.objects.create(name="Riley", phone="555-0102")

    def test_staff_list_hides_inactive(self):
        res = self.client.get("/api/directory/staff/")

        self.assertEqual(res.status_code, 200)
        names = [s["name"] for s in res.data["results"]]
        self.assertEqual(names, ["Marcus", "Owner"])

    def test_staff_filter_by_role(self):
        res = self.client.get("/api/directory/staff/", {"role": "employee"})

        self.assertEqual([s["name"] for s in res.data["results"]], ["Marcus"])

    def test_customer_search(self):
        res = self.client.get("/api/directory/customers/", {"search": "0102"})

        self.assertEqual([c["name"] for c in res.data["results"]], ["Riley"])
