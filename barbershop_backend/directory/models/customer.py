# directory/models/customer.py

import uuid

from django.db import models


class Customer(models.Model):
    """
    A known customer. Sales without a customer are walk-ins.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, db_index=True)
    phone = models.CharField(max_length=50, blank=True)
    email = models.EmailField(blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        phone = (self.phone or "").strip()
        if phone:
            return f"{self.name} ({phone})"
        return self.name
