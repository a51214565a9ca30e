"""
Demonstration scripts for the inverted approach.

These functions show the injected designs in action. Each one reuses the
same high-level object (Switch, OrderService) with different low-level
implementations.
"""

import logging
from inverted.devices import Fan, Light, Switch
from inverted.notifiers import (
    CompositeNotifier,
    EmailNotifier,
    RecordingNotifier,
    SlackNotifier,
    SMSNotifier,
)
from inverted.order_service import OrderService
from shared.errors import CompositeDeliveryError, DeliveryError
from shared.models import Order
from shared.sinks import ConsoleSink, MemorySink, TeeSink

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)


def _demo_order() -> Order:
    return Order(
        customer_email="alice@example.com",
        customer_phone="+1-555-0001",
        order_id="ORD-1",
    )


def run_switch_demo() -> list[str]:
    """
    Demonstrate the Switch with two different devices.

    The key insight: the Switch class is the same for both!
    """
    print("\n" + "=" * 70)
    print("INVERTED DEMO: Switch")
    print("=" * 70 + "\n")

    output = MemorySink()
    sink = TeeSink(ConsoleSink(), output)

    for device in (Light(sink=sink), Fan(sink=sink)):
        print(f"ACTION: Pressing a Switch wired to a {type(device).__name__}")
        Switch(device).press()

    print("\n" + "-" * 70)
    print("RESULT: One Switch class controlled both devices.")
    print("-" * 70 + "\n")

    return output.lines


def run_order_demo() -> list[str]:
    """
    Demonstrate the OrderService with every channel.

    This shows:
    1. Email, SMS and Slack notifiers injected one at a time
    2. A CompositeNotifier sending through all three at once

    OrderService is never modified between runs.
    """
    print("\n" + "=" * 70)
    print("INVERTED DEMO: Order Confirmation")
    print("=" * 70 + "\n")

    output = MemorySink()
    sink = TeeSink(ConsoleSink(), output)
    order = _demo_order()

    email = EmailNotifier(sink=sink)
    sms = SMSNotifier(sink=sink)
    slack = SlackNotifier(sink=sink)

    for notifier in (email, sms, slack):
        print(f"ACTION: Processing {order} with {type(notifier).__name__}")
        OrderService(notifier, sink=sink).process_order(order)
        print()

    print("ACTION: Processing with a CompositeNotifier (email + sms + slack)")
    OrderService(CompositeNotifier([email, sms, slack]), sink=sink).process_order(order)

    print("\n" + "-" * 70)
    print("RESULT: Four different delivery strategies, one OrderService.")
    print("-" * 70 + "\n")

    return output.lines


def run_mock_demo() -> list[str]:
    """
    Demonstrate testing OrderService with a RecordingNotifier.

    Nothing is delivered; the double just remembers what it was asked to do.
    """
    print("\n" + "=" * 70)
    print("INVERTED DEMO: Testing With a Mock")
    print("=" * 70 + "\n")

    output = MemorySink()
    mock = RecordingNotifier()
    order = _demo_order()

    print(f"Before: invoked={mock.invoked}")
    print(f"ACTION: Processing {order} with a RecordingNotifier")
    OrderService(mock, sink=TeeSink(ConsoleSink(), output)).process_order(order)

    print(f"After:  invoked={mock.invoked}")
    print(f"        last_recipient={mock.last_recipient!r}")
    print(f"        last_message={mock.last_message!r}")

    print("\n" + "-" * 70)
    print("RESULT: OrderService verified without sending anything.")
    print("-" * 70 + "\n")

    return output.lines


def run_failure_demo() -> list[str]:
    """
    Demonstrate both CompositeNotifier failure policies.

    The SMS gateway is "down" (fail_rate=1.0):
    - fail-fast stops at SMS, so Slack never runs
    - collect-all still reaches Slack, then reports the SMS failure
    """
    print("\n" + "=" * 70)
    print("INVERTED DEMO: Delivery Failures")
    print("=" * 70 + "\n")

    output = MemorySink()
    sink = TeeSink(ConsoleSink(), output)
    order = _demo_order()

    channels = [
        EmailNotifier(sink=sink),
        SMSNotifier(sink=sink, fail_rate=1.0),
        SlackNotifier(sink=sink),
    ]

    for fail_fast in (True, False):
        policy = "fail-fast" if fail_fast else "collect-all"
        print(f"ACTION: Processing {order} ({policy})")
        service = OrderService(CompositeNotifier(channels, fail_fast=fail_fast), sink=sink)
        try:
            service.process_order(order)
        except CompositeDeliveryError as e:
            print(f"  FAILED: {e}")
            for error in e.errors:
                print(f"    - {error.channel}: {error}")
        except DeliveryError as e:
            print(f"  FAILED: {e.channel}: {e}")
        print()

    print("-" * 70)
    print("RESULT: The failure policy lives in the composite; OrderService")
    print("        just sees a DeliveryError either way.")
    print("-" * 70 + "\n")

    return output.lines


if __name__ == "__main__":
    run_switch_demo()
    run_order_demo()
    run_mock_demo()
    run_failure_demo()
