"""
Booking sinks — where verified bookings are handed off.

This service keeps no database; a sink decides what "saving a booking" means.
Sinks must tolerate the same order arriving twice, since verification of one
order may run concurrently.
"""
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Union

logger = logging.getLogger(__name__)


class BookingStatus(str, Enum):
    CONFIRMED = "confirmed"
    APPLICATION_RECEIVED = "application_received"


@dataclass(frozen=True)
class BookingRecord:
    order_id: str
    payment_id: str
    package_id: Optional[Union[int, str]]
    customer_info: Optional[Dict[str, Any]]
    status: BookingStatus
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["created_at"] = self.created_at.isoformat()
        return data


class BookingSink(Protocol):
    async def record(self, booking: BookingRecord) -> None:
        """Store a booking. Raises PersistError on failure."""
        ...


class LoggingBookingSink:
    """Logs each booking and keeps nothing."""

    async def record(self, booking: BookingRecord) -> None:
        logger.info("Booking data: %s", booking.to_dict())


class InMemoryBookingSink:
    """Keeps bookings in a list for the life of the process."""

    def __init__(self):
        self.records: list[BookingRecord] = []

    async def record(self, booking: BookingRecord) -> None:
        self.records.append(booking)
