from .bond_service import BondService

__all__ = ["BondService"]
