"""Endpoints exposed by the bond calculation service."""

BOND_CALCULATE = "/bond/calculate"
