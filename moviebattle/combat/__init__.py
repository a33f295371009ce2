from .damage import apply_attack, calculate_damage
from .opponent import Opponent

__all__ = ["Opponent", "apply_attack", "calculate_damage"]
