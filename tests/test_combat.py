from retro_dungeon.game import GameState
from retro_dungeon.models.entities import Enemy, EnemyType, Player, Position
from retro_dungeon.services.combat_service import enemy_damage_against, resolve_melee


def _player(**overrides):
    p = Player(1, "Ada", Position(0, 0))
    for k, v in overrides.items():
        setattr(p, k, v)
    return p


def test_goblin_exchange():
    player = _player()
    goblin = Enemy.spawn(2, EnemyType.GOBLIN, (0, 0))
    result = resolve_melee(player, goblin)
    # Player damage ignores goblin defense; goblin damage subtracts player defense
    assert goblin.health == 15
    assert player.health == 97
    assert (result.player_damage, result.enemy_damage) == (5, 3)
    assert result.messages == ["You hit Goblin for 5 damage!", "Goblin hits you for 3 damage!"]
    assert not result.enemy_killed and not result.player_killed


def test_kill_grants_rewards_without_counterattack():
    player = _player(attack_power=50)
    orc = Enemy.spawn(2, EnemyType.ORC, (0, 0))
    result = resolve_melee(player, orc)
    assert result.enemy_killed
    assert player.health == 100
    assert (player.experience, player.gold) == (10, 5)
    assert result.messages[-1] == "You defeated Orc! +10 XP"


def test_enemy_damage_has_floor_of_one():
    player = _player(defense=50)
    rat = Enemy.spawn(2, EnemyType.RAT, (0, 0))
    assert enemy_damage_against(rat, player) == 1
    resolve_melee(player, rat)
    assert player.health == 99


def test_player_death_reported():
    player = _player(health=3)
    orc = Enemy.spawn(2, EnemyType.ORC, (0, 0))
    result = resolve_melee(player, orc)
    assert result.player_killed
    assert player.health == 0
    assert result.messages[-1] == "You have been slain!"


def test_goblin_dies_after_four_hits():
    player = _player()
    goblin = Enemy.spawn(2, EnemyType.GOBLIN, (0, 0))
    for _ in range(4):
        resolve_melee(player, goblin)
    assert not goblin.is_alive()
    # Three counterattacks of 3 each; the killing blow is not answered
    assert player.health == 91


def test_game_combat_transitions_to_game_over(game):
    game.player.health = 1
    zombie = Enemy.spawn(game.next_entity_id(), EnemyType.ZOMBIE, game.player.pos)
    game.handle_combat(zombie)
    assert game.state is GameState.GAME_OVER
    assert game.messages.last == "You have been slain!"
