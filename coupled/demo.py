"""
Demonstration scripts for the coupled approach.

These functions show the hard-wired designs in action. Compare to the
inverted demos to see what the same high-level code can do once its
dependency is injected.
"""

import logging
from coupled.order_service import CoupledOrderService
from coupled.switch import BadSwitch
from shared.models import Order
from shared.sinks import ConsoleSink, MemorySink, TeeSink

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)


def run_switch_demo() -> list[str]:
    """
    Demonstrate the BadSwitch.

    Notice: there is no way to make this switch control a Fan!
    """
    print("\n" + "=" * 70)
    print("COUPLED DEMO: BadSwitch")
    print("=" * 70 + "\n")

    output = MemorySink()
    switch = BadSwitch(sink=TeeSink(ConsoleSink(), output))

    print("ACTION: Pressing the switch")
    switch.press()

    print("\n" + "-" * 70)
    print("RESULT: The light turned on. To control a fan we would need a new")
    print("        switch class, because BadSwitch builds its own Light.")
    print("-" * 70 + "\n")

    return output.lines


def run_order_demo() -> list[str]:
    """
    Demonstrate the CoupledOrderService.

    The customer is confirmed by email, and only by email.
    """
    print("\n" + "=" * 70)
    print("COUPLED DEMO: Order Confirmation")
    print("=" * 70 + "\n")

    output = MemorySink()
    service = CoupledOrderService(sink=TeeSink(ConsoleSink(), output))
    order = Order(
        customer_email="alice@example.com",
        customer_phone="+1-555-0001",
        order_id="ORD-1",
    )

    print(f"ACTION: Processing {order}")
    service.process_order(order)

    print("\n" + "-" * 70)
    print("RESULT: Confirmed by email. Sending SMS or Slack instead, or")
    print("        testing without sending anything, means editing")
    print("        CoupledOrderService itself.")
    print("-" * 70 + "\n")

    return output.lines


if __name__ == "__main__":
    run_switch_demo()
    run_order_demo()
