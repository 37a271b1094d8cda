# -*- coding: utf-8 -*-
"""
Transaction types offered by the maritime services portal.
"""

from enum import Enum


class TransactionType(Enum):
    """Transaction type with its Arabic display name."""

    TEMPORARY_REGISTRATION_CERTIFICATE = "شهادة تسجيل مؤقتة"
    PERMANENT_REGISTRATION_CERTIFICATE = "شهادة تسجيل دائمة"
    SUSPEND_PERMANENT_REGISTRATION = "تعليق تسجيل دائم"
    CANCEL_PERMANENT_REGISTRATION = "إلغاء تسجيل دائم"
    MORTGAGE_CERTIFICATE = "إصدار شهادة رهن"
    RELEASE_MORTGAGE = "فك الرهن"
    REQUEST_FOR_INSPECTION = "طلب معاينة"
    SHIP_NAME_CHANGE = "تغيير اسم السفينة"
    CAPTAIN_NAME_CHANGE = "تغيير اسم الربان"
    SHIP_ACTIVITY_CHANGE = "تغيير نشاط السفينة"
    SHIP_DIMENSIONS_CHANGE = "تغيير أبعاد السفينة"
    SHIP_ENGINE_CHANGE = "تغيير محرك السفينة"
    SHIP_PORT_CHANGE = "تغيير ميناء السفينة"
    SHIP_OWNERSHIP_CHANGE = "تغيير ملكية السفينة"
    ISSUE_NAVIGATION_PERMIT = "إصدار تصريح ملاحة"
    RENEW_NAVIGATION_PERMIT = "تجديد تصريح ملاحة"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "TransactionType":
        """Look up by member name; raises ValueError for unknown names."""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown transaction type: {name}") from None
