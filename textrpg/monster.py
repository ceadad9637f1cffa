"""Monsters the player fights."""

from textrpg import dice
from textrpg.constants import (
    BOSS_STATUS_RATE,
    NM_MAX_HP_RATE,
    NM_MIN_ATK_RATE,
    NM_MIN_HP_RATE,
)
from textrpg.items import AttackBoost, CriticalBoost, HpPotion, LeatherArmor, TreeBranch

# (upper bound of a 1..100 roll, item class, message)
_DROP_TABLE = (
    (10, TreeBranch, "나뭇가지를 획득했습니다"),
    (20, LeatherArmor, "가죽갑옷을 획득했습니다"),
    (40, AttackBoost, "힘의 영약을 획득했습니다"),
    (60, CriticalBoost, "치명타 확률 영약을 획득했습니다"),
    (100, HpPotion, "HP 포션을 획득했습니다"),
)


class Monster:
    """An enemy whose stats scale with the player's level."""

    def __init__(self, name, level, is_boss=False):
        self.name = name
        self.level = level
        self.is_boss = is_boss
        self.max_hp = level * dice.get_int(NM_MIN_HP_RATE, NM_MAX_HP_RATE)
        self.attack = level * dice.get_int(NM_MIN_ATK_RATE, NM_MIN_ATK_RATE)
        if is_boss:
            self.max_hp = int(self.max_hp * BOSS_STATUS_RATE)
            self.attack = int(self.attack * BOSS_STATUS_RATE)
            kind = "보스 몬스터 생성"
        else:
            kind = "일반 몬스터 생성"
        self.current_hp = self.max_hp
        print(
            f'[{kind}] : "{name}" 등장!'
            f"(체력: {self.current_hp}, 공격력 : {self.attack})"
        )

    @property
    def is_alive(self):
        return self.current_hp > 0

    def take_damage(self, damage):
        self.current_hp = max(self.current_hp - damage, 0)

    def attack_player(self, player):
        before = player.current_hp
        player.take_damage(self.attack)
        print(
            f'[피격] : "{self.name}"이(가) "{player.name}"을(를) 공격합니다!'
            f'(데미지: {self.attack}) → "{player.name}" 체력({before}'
            f" → {player.current_hp}) / {player.max_hp}"
        )

    def drop_item(self):
        """Roll for and return the item this monster leaves behind."""
        print(f"[아이템 드랍] : {self.name}(으)로부터 ", end="")
        roll = dice.get_int(1, 100)
        for bound, item_class, message in _DROP_TABLE:
            if roll <= bound:
                print(message)
                return item_class()
        raise AssertionError(f"roll out of range: {roll}")

    def __repr__(self):
        return (
            f"{type(self).__name__}(name={self.name!r}, level={self.level}, "
            f"hp={self.current_hp}/{self.max_hp}, attack={self.attack})"
        )


class Goblin(Monster):
    def __init__(self, player_level):
        super().__init__("고블린", player_level, False)


class Orc(Monster):
    def __init__(self, player_level):
        super().__init__("오크", player_level, False)


class Troll(Monster):
    def __init__(self, player_level):
        super().__init__("트롤", player_level, False)


class BossMonster(Monster):
    def __init__(self, player_level):
        super().__init__("드래곤", player_level, True)