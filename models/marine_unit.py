# -*- coding: utf-8 -*-
"""
Marine unit entity and the lookup records attached to it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ("1", "true", "yes")


@dataclass
class MarineUnit:
    """
    Marine unit (ship) as returned by the backend.

    ``is_temp`` keeps the backend encoding: "1" (or "true") means the unit
    only holds a temporary registration.
    """

    # Identification
    id: str = ""
    ship_name: str = ""
    imo_number: Optional[str] = None
    call_sign: str = ""
    mmsi_number: str = ""
    official_number: str = ""

    # Registration
    port_of_registry: str = ""
    is_temp: str = "0"

    # Tonnage
    gross_tonnage: str = ""
    net_tonnage: str = ""

    # Compliance record
    violations_count: int = 0
    detentions_count: int = 0
    is_mortgaged: bool = False

    # Inspection
    is_inspected: bool = False
    inspection_status: Optional[str] = None
    inspection_remarks: Optional[str] = None

    is_active: bool = True

    @property
    def is_temporary(self) -> bool:
        return str(self.is_temp).strip().lower() in ("1", "true")

    @property
    def registration_type(self) -> str:
        """PERMANENT or TEMPORARY."""
        return "TEMPORARY" if self.is_temporary else "PERMANENT"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "ship_name": self.ship_name,
            "imo_number": self.imo_number,
            "call_sign": self.call_sign,
            "mmsi_number": self.mmsi_number,
            "official_number": self.official_number,
            "port_of_registry": self.port_of_registry,
            "is_temp": self.is_temp,
            "gross_tonnage": self.gross_tonnage,
            "net_tonnage": self.net_tonnage,
            "violations_count": self.violations_count,
            "detentions_count": self.detentions_count,
            "is_mortgaged": self.is_mortgaged,
            "is_inspected": self.is_inspected,
            "inspection_status": self.inspection_status,
            "inspection_remarks": self.inspection_remarks,
            "is_active": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MarineUnit":
        """Create MarineUnit from a ``to_dict`` dictionary."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_api_dict(cls, data: Dict[str, Any]) -> "MarineUnit":
        """
        Create MarineUnit from a backend payload (camelCase keys).

        The port of registry may come as a nested object ``{"id": ...}``.
        """
        port = data.get("portOfRegistry") or ""
        if isinstance(port, dict):
            port = port.get("id") or port.get("name") or ""

        return cls(
            id=str(data.get("id") or ""),
            ship_name=data.get("shipName") or "",
            imo_number=data.get("imoNumber"),
            call_sign=data.get("callSign") or "",
            mmsi_number=str(data.get("mmsiNumber") or ""),
            official_number=str(data.get("officialNumber") or ""),
            port_of_registry=str(port),
            is_temp=str(data.get("isTemp", "0")),
            gross_tonnage=str(data.get("grossTonnage") or ""),
            net_tonnage=str(data.get("netTonnage") or ""),
            violations_count=_to_int(data.get("violationsCount")),
            detentions_count=_to_int(data.get("detentionsCount")),
            is_mortgaged=_to_bool(data.get("isMortgaged")),
            is_inspected=_to_bool(data.get("isInspected")),
            inspection_status=data.get("inspectionStatus"),
            inspection_remarks=data.get("inspectionRemarks"),
            is_active=_to_bool(data.get("isActive", True)),
        )

    def __repr__(self) -> str:
        return f"MarineUnit(id={self.id!r}, ship_name={self.ship_name!r})"


@dataclass(frozen=True)
class MortgageStatus:
    """Mortgage record of a marine unit."""

    is_mortgaged: bool
    mortgage_id: Optional[str] = None
    bank_name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_approved_bank: bool = True
    mortgage_amount: Optional[str] = None

    @classmethod
    def from_api_dict(cls, data: Dict[str, Any]) -> "MortgageStatus":
        return cls(
            is_mortgaged=_to_bool(data.get("isMortgaged")),
            mortgage_id=data.get("mortgageId"),
            bank_name=data.get("bankName"),
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            is_approved_bank=_to_bool(data.get("isApprovedBank", True)),
            mortgage_amount=data.get("mortgageAmount"),
        )


@dataclass(frozen=True)
class InspectionStatus:
    """Inspection record of a marine unit. ``status`` is VALID, EXPIRED or PENDING."""

    is_inspected: bool
    inspection_date: Optional[str] = None
    inspection_type: Optional[str] = None
    inspector_name: Optional[str] = None
    certificate_number: Optional[str] = None
    expiry_date: Optional[str] = None
    status: Optional[str] = None
    remarks: Optional[str] = None

    @classmethod
    def from_api_dict(cls, data: Dict[str, Any]) -> "InspectionStatus":
        return cls(
            is_inspected=_to_bool(data.get("isInspected")),
            inspection_date=data.get("inspectionDate"),
            inspection_type=data.get("inspectionType"),
            inspector_name=data.get("inspectorName"),
            certificate_number=data.get("certificateNumber"),
            expiry_date=data.get("expiryDate"),
            status=data.get("status"),
            remarks=data.get("remarks"),
        )
