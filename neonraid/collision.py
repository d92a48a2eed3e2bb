"""Hit tests between projectiles, enemies and the player."""

from typing import Iterable, Iterator, Optional, Tuple

from neonraid.config.config import PLAYER_HITBOX_INSET
from neonraid.enemy import Enemy
from neonraid.player import Player
from neonraid.projectile import Projectile


def projectile_hits_enemy(projectile: Projectile, enemy: Enemy) -> bool:
    """Return True if the projectile's centre lies strictly inside the enemy box."""
    return (
        enemy.x < projectile.x < enemy.x + enemy.width
        and enemy.y < projectile.y < enemy.y + enemy.height
    )


def player_hits_enemy(player: Player, enemy: Enemy, inset: float = PLAYER_HITBOX_INSET) -> bool:
    """Return True if the enemy box overlaps the player's inset hitbox.

    The player's box is shrunk by `inset` on every side, which makes the
    hitbox smaller than the drawn ship.
    """
    return (
        player.x + inset < enemy.x + enemy.width
        and player.x + player.width - inset > enemy.x
        and player.y + inset < enemy.y + enemy.height
        and player.y + player.height - inset > enemy.y
    )


def find_projectile_hits(
    projectiles: Iterable[Projectile], enemies: Iterable[Enemy]
) -> Iterator[Tuple[Projectile, Enemy]]:
    """Yield every (projectile, enemy) pair that collides.

    Pairs are visited in list order, projectile-major. Entities already
    flagged by an earlier hit are still tested, so one projectile can hit
    several overlapping enemies in the same tick, but each pair matches at
    most once. Both sequences are copied first, so the caller may clear the
    pools while consuming the iterator.
    """
    enemy_list = list(enemies)
    for projectile in list(projectiles):
        for enemy in enemy_list:
            if projectile_hits_enemy(projectile, enemy):
                yield projectile, enemy


def find_player_collision(player: Player, enemies: Iterable[Enemy]) -> Optional[Enemy]:
    """Return the first enemy touching the player's hitbox, if any."""
    for enemy in enemies:
        if player_hits_enemy(player, enemy):
            return enemy
    return None
