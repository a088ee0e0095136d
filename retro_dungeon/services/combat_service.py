"""Melee exchange resolution.

One call = one bump: the player strikes first for its full ``attack_power`` (enemy defense is
not applied). A surviving enemy answers for ``max(1, enemy.attack_power - player.defense)``, so
every exchange with a survivor costs the player at least one point. Rewards are granted on the
killing blow. The enemy stays in the world until ``Game.update`` reaps it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..models.entities import Enemy, Player

MIN_ENEMY_DAMAGE = 1


@dataclass
class CombatResult:
    player_damage: int = 0
    enemy_damage: int = 0
    enemy_killed: bool = False
    player_killed: bool = False
    messages: List[str] = field(default_factory=list)


def enemy_damage_against(enemy: Enemy, player: Player) -> int:
    return max(MIN_ENEMY_DAMAGE, enemy.attack_power - player.defense)


def resolve_melee(player: Player, enemy: Enemy) -> CombatResult:
    result = CombatResult()
    damage = player.attack_power
    enemy.take_damage(damage)
    result.player_damage = damage
    result.messages.append(f"You hit {enemy.name} for {damage} damage!")

    if enemy.is_alive():
        enemy_dmg = enemy_damage_against(enemy, player)
        player.take_damage(enemy_dmg)
        result.enemy_damage = enemy_dmg
        result.messages.append(f"{enemy.name} hits you for {enemy_dmg} damage!")
        if not player.is_alive():
            result.player_killed = True
            result.messages.append("You have been slain!")
    else:
        player.experience += enemy.exp_reward
        player.gold += enemy.gold_reward
        result.enemy_killed = True
        result.messages.append(f"You defeated {enemy.name}! +{enemy.exp_reward} XP")
    return result


__all__ = ["CombatResult", "enemy_damage_against", "resolve_melee"]
