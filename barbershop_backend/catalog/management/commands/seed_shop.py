from decimal import Decimal

from django.core.management.base import BaseCommand

from catalog.models import Product, Service
from directory.models import Customer, Staff, StaffRole
from shop.models import PromotionCode, ShopSettings


class Command(BaseCommand):
    help = "Seed services, products, staff, customers and promotion codes"

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding barbershop catalog..."))

        # -------------------------------
        # SERVICES
        # -------------------------------
        services_data = [
            ("Classic Haircut", "Haircuts", "25.00", 30),
            ("Skin Fade", "Haircuts", "32.00", 45),
            ("Beard Trim", "Beard", "15.00", 15),
            ("Hot Towel Shave", "Beard", "28.00", 30),
            ("Kids Cut", "Haircuts", "18.00", 20),
        ]
        for name, category, price, minutes in services_data:
            Service.objects.get_or_create(
                name=name,
                defaults={
                    "category": category,
                    "price": Decimal(price),
                    "duration_minutes": minutes,
                },
            )

        # -------------------------------
        # PRODUCTS
        # -------------------------------
        products_data = [
            ("Matte Pomade", "5012345678900", "18.00", "7.50", 40),
            ("Beard Oil", "5012345678917", "22.00", "9.00", 12),
            ("Sea Salt Spray", "5012345678924", "16.00", "6.00", 25),
            ("Aftershave Balm", "5012345678931", "20.00", "8.00", 8),
        ]
        for name, barcode, price, cost, stock in products_data:
            Product.objects.get_or_create(
                barcode=barcode,
                defaults={
                    "name": name,
                    "price": Decimal(price),
                    "cost": Decimal(cost),
                    "stock": stock,
                },
            )

        # -------------------------------
        # STAFF + CUSTOMERS
        # -------------------------------
        Staff.objects.get_or_create(name="Shop Owner", defaults={"role": StaffRole.ADMIN})
        for name, commission in [("Marcus", "40.00"), ("Dee", "35.00")]:
            Staff.objects.get_or_create(
                name=name,
                defaults={"role": StaffRole.EMPLOYEE, "commission_rate": Decimal(commission)},
            )

        Customer.objects.get_or_create(name="Walk-in Regular", defaults={"phone": "555-0100"})

        # -------------------------------
        # SETTINGS + PROMOTIONS
        # -------------------------------
        ShopSettings.load()
        PromotionCode.objects.get_or_create(
            code="WELCOME10",
            defaults={"kind": "percentage", "value": Decimal("10"), "description": "10% off first visit"},
        )
        PromotionCode.objects.get_or_create(
            code="FIVEOFF",
            defaults={"kind": "fixed", "value": Decimal("5.00"), "description": "5 off any sale"},
        )

        self.stdout.write(self.style.SUCCESS("✅ Barbershop catalog seeded successfully."))
