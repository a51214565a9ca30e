"""
Run scenarios side-by-side in both approaches for comparison.

This script executes the same scenarios using both the coupled and the
inverted designs, showing what each one could do with the same
high-level class.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)

# Suppress some verbose loggers
logging.getLogger("notifications").setLevel(logging.WARNING)
logging.getLogger("order_service").setLevel(logging.WARNING)


@dataclass
class ComparisonResult:
    """Lines each approach produced for one scenario."""
    scenario: str
    coupled_lines: list[str] = field(default_factory=list)
    inverted_lines: list[str] = field(default_factory=list)

    @property
    def coupled_effects(self) -> set[str]:
        """Distinct simulated side effects (trace lines excluded)."""
        return _effects(self.coupled_lines)

    @property
    def inverted_effects(self) -> set[str]:
        return _effects(self.inverted_lines)


def _effects(lines: list[str]) -> set[str]:
    effects = set()
    for line in lines:
        if line.startswith("Processing order"):
            continue
        if line.startswith("["):
            # "[EMAIL] ..." -> "EMAIL"
            effects.add(line[1:line.index("]")])
        else:
            effects.add(line)
    return effects


def run_comparison(
    scenario_name: str,
    coupled_fn: Callable[[], list[str]],
    inverted_fn: Callable[[], list[str]],
) -> ComparisonResult:
    """Run a scenario in both approaches and compare."""
    print("\n" + "=" * 80)
    print(f"SCENARIO: {scenario_name}")
    print("=" * 80)

    # Run coupled
    print("\n" + "-" * 40)
    print("COUPLED APPROACH")
    print("-" * 40)
    result = ComparisonResult(scenario=scenario_name, coupled_lines=coupled_fn())

    # Run inverted
    print("\n" + "-" * 40)
    print("INVERTED APPROACH")
    print("-" * 40)
    result.inverted_lines = inverted_fn()

    # Compare
    print("\n" + "-" * 40)
    print("COMPARISON")
    print("-" * 40)
    print(f"  Coupled effects:  {sorted(result.coupled_effects)}")
    print(f"  Inverted effects: {sorted(result.inverted_effects)}")

    extra = result.inverted_effects - result.coupled_effects
    if extra:
        print(f"  ✓ Only reachable with injection: {sorted(extra)}")
    else:
        print("  ✗ No difference in reachable effects")

    return result


def run_switch_comparison() -> ComparisonResult:
    """Compare the switch scenario."""
    from coupled.demo import run_switch_demo as coupled_demo
    from inverted.demo import run_switch_demo as inverted_demo

    return run_comparison("Switch", coupled_demo, inverted_demo)


def run_order_comparison() -> ComparisonResult:
    """Compare the order confirmation scenario."""
    from coupled.demo import run_order_demo as coupled_demo
    from inverted.demo import run_order_demo as inverted_demo

    return run_comparison("Order Confirmation", coupled_demo, inverted_demo)


def main():
    """Run all scenario comparisons."""
    print("\n" + "#" * 80)
    print("# DEPENDENCY INVERSION COMPARISON")
    print("# Coupled vs Inverted")
    print("#" * 80)

    run_switch_comparison()
    run_order_comparison()

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    print("""
Both approaches run the same high-level logic. The difference is WHO
chooses the low-level implementation:

┌──────────────────────────┬──────────────────────┬──────────────────────┐
│ Concern                  │ Coupled              │ Inverted             │
├──────────────────────────┼──────────────────────┼──────────────────────┤
│ Who picks the channel    │ The service itself   │ The caller           │
│ Adding a new channel     │ Edit the service     │ New Notifier class   │
│ Several channels at once │ Edit the service     │ CompositeNotifier    │
│ Testing without sending  │ Not possible         │ RecordingNotifier    │
│ Handling failures        │ Edit the service     │ Composite policy     │
└──────────────────────────┴──────────────────────┴──────────────────────┘
""")


if __name__ == "__main__":
    main()
