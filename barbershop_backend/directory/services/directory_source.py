# directory/services/directory_source.py

"""
DIRECTORY SOURCE (DJANGO-BACKED)

Purpose:
- Resolve staff/customer display names for the sale's name snapshots.

Rules:
- Unknown or malformed ids resolve to None; the checkout decides the fallback.
"""

from __future__ import annotations

import uuid
from typing import Optional

from directory.models import Customer, Staff


def _as_uuid(value) -> Optional[uuid.UUID]:
    if value in (None, ""):
        return None
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


class DjangoDirectorySource:
    def resolve_staff_name(self, staff_id) -> Optional[str]:
        pk = _as_uuid(staff_id)
        if pk is None:
            return None
        return Staff.objects.filter(pk=pk).values_list("name", flat=True).first()

    def resolve_customer_name(self, customer_id) -> Optional[str]:
        pk = _as_uuid(customer_id)
        if pk is None:
            return None
        return Customer.objects.filter(pk=pk).values_list("name", flat=True).first()
