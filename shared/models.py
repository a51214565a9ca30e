"""
Domain models for the dependency inversion demo.

The order-processing scenario only needs one value: the Order that is being
confirmed. It is deliberately tiny - the interesting part of the demo is how
the order gets to the customer, not the order itself.

Design decisions:
- Using Pydantic for validation, like the rest of the demo
- Order is frozen: it is created once by the caller and never mutated
- ChannelType names the concrete channels so results can be labelled
"""

from enum import Enum
from pydantic import BaseModel, Field, ConfigDict


# =============================================================================
# Enums
# =============================================================================

class ChannelType(str, Enum):
    """Concrete notification channels available in the demo."""
    EMAIL = "email"
    SMS = "sms"
    SLACK = "slack"


# =============================================================================
# Core Domain Models
# =============================================================================

class Order(BaseModel):
    """
    An order that needs a confirmation sent to its customer.

    Holds just enough contact info for any channel: email for EmailNotifier,
    phone for SMSNotifier. Which one gets used is decided by whoever
    wires the notifier, never by the order itself.

    Fields are keyword-only, as with any pydantic model:
        Order(customer_email="a@x.com", customer_phone="+1", order_id="ORD-1")
    Positional arguments raise TypeError.
    """
    customer_email: str = Field(..., min_length=1, description="Customer email address")
    customer_phone: str = Field(..., min_length=1, description="Customer phone number for SMS")
    order_id: str = Field(..., min_length=1, description="Unique order identifier")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Order {self.order_id} ({self.customer_email})"
