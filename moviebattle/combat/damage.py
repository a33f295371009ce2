"""
Damage module for the movie battle.

Handles damage calculation and application for a single attack exchange
between a movie's combat stats and an opponent.
"""

from moviebattle.core.constants import DEFENDER_ATTACK_DIVISOR, MIN_DAMAGE
from moviebattle.core.logging import log_debug
from moviebattle.core.utils import truncating_div
from moviebattle.media.stat_calculator import CombatStats

from .opponent import Opponent


def calculate_damage(attacker_attack: int, defender_attack: int) -> int:
    """
    Computes the damage of one attack.

    The defender's attack, halved, is subtracted from the attacker's attack.
    The result never drops below MIN_DAMAGE, so every exchange makes progress.

    Args:
        attacker_attack (int):
            The attack value of the attacker.
        defender_attack (int):
            The attack value of the defender.

    Returns:
        int:
            The damage dealt, at least MIN_DAMAGE.

    """
    raw_damage = attacker_attack - truncating_div(
        defender_attack, DEFENDER_ATTACK_DIVISOR
    )
    return max(MIN_DAMAGE, raw_damage)


def apply_attack(attacker: CombatStats, defender: Opponent) -> int:
    """
    Resolves one attack and subtracts the damage from the defender's health.

    Health is not clamped and may become negative. No other field of either
    side is touched.

    Args:
        attacker (CombatStats):
            The stats of the attacking movie.
        defender (Opponent):
            The opponent receiving the attack.

    Returns:
        int:
            The damage applied.

    """
    damage = calculate_damage(attacker.attack, defender.attack)
    defender.health -= damage

    log_debug(
        f"{defender.name} takes {damage} damage",
        {
            "attacker_attack": attacker.attack,
            "defender_attack": defender.attack,
            "remaining_health": defender.health,
        },
    )

    return damage
