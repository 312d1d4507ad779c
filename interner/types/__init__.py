from interner.types.symbol import Symbol
from interner.types.efficiency import EfficiencyMode

__all__ = ["Symbol", "EfficiencyMode"]
