"""
Coupled (hard-wired) approach.

This package implements the "bad" side of the demo:
- High-level components construct their concrete collaborators themselves
- There is no abstraction between them
- Changing the collaborator means changing the high-level class
"""

from coupled.switch import BadSwitch, Light
from coupled.order_service import CoupledOrderService, EmailSender

__all__ = [
    "BadSwitch",
    "Light",
    "CoupledOrderService",
    "EmailSender",
]
