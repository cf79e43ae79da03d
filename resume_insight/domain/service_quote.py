"""Cost and turnaround estimates for service requests.

All functions are pure; *today* is injectable so estimates are reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Mapping, Optional

from .validation import require_fields

# category -> service type -> (cost in KSh, turnaround days)
SERVICE_CATALOG: Dict[str, Dict[str, tuple]] = {
    "e-citizen": {
        "birth-certificate": (500, 5),
        "national-id": (300, 7),
        "passport": (1000, 14),
        "business-registration": (2000, 3),
        "police-clearance": (800, 10),
        "marriage-certificate": (600, 5),
    },
    "visa": {
        "tourist": (5000, 21),
        "business": (7000, 21),
        "student": (10000, 30),
        "work-permit": (15000, 45),
        "transit": (3000, 14),
        "family": (8000, 30),
    },
    "design": {
        "logo": (3000, 5),
        "business-cards": (1500, 3),
        "flyers": (2000, 4),
        "social-media": (1000, 2),
        "brochures": (5000, 7),
        "website-graphics": (2500, 5),
    },
    "branding": {
        "brand-strategy": (15000, 14),
        "brand-identity": (10000, 10),
        "market-research": (8000, 7),
        "consultation": (5000, 2),
        "brand-guidelines": (7000, 5),
        "marketing-strategy": (12000, 10),
    },
}

DEFAULT_TURNAROUND_DAYS = 7

REQUIRED_REQUEST_FIELDS = (
    "client_name",
    "client_email",
    "client_phone",
    "service_category",
    "service_type",
    "description",
)


@dataclass
class ServiceQuote:
    service_category: str
    service_type: str
    estimated_cost: Optional[int]
    estimated_days: int
    estimated_completion_date: date
    priority: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "service_category": self.service_category,
            "service_type": self.service_type,
            "estimated_cost": self.estimated_cost,
            "estimated_days": self.estimated_days,
            "estimated_completion_date": self.estimated_completion_date.isoformat(),
            "priority": self.priority,
        }


def estimate_quote(
    category: str,
    service_type: str,
    urgency: str = "normal",
    today: Optional[date] = None,
) -> ServiceQuote:
    """Estimate cost and completion date for one catalog service.

    Unknown services get no cost and the default turnaround.
    """
    entry = SERVICE_CATALOG.get(category, {}).get(service_type)
    cost, days = entry if entry else (None, DEFAULT_TURNAROUND_DAYS)
    start = today or date.today()

    return ServiceQuote(
        service_category=category,
        service_type=service_type,
        estimated_cost=cost,
        estimated_days=days,
        estimated_completion_date=start + timedelta(days=days),
        priority="high" if urgency == "urgent" else "normal",
    )


def quote_service_request(payload: Mapping[str, Any], today: Optional[date] = None) -> ServiceQuote:
    """Validate a service-request payload and return its quote."""
    require_fields(payload, REQUIRED_REQUEST_FIELDS)
    return estimate_quote(
        payload["service_category"],
        payload["service_type"],
        urgency=payload.get("urgency") or "normal",
        today=today,
    )
