"""
Bond calculator client.

Collects bond parameters, validates them, submits them to the bond
calculation service and presents the returned metrics and cashflows.
"""

__version__ = "1.0.0"
