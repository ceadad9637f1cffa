"""Consumable items and equipment."""

from abc import ABC, abstractmethod
from typing import ClassVar

from textrpg.constants import (
    AB_ATTACK_BOOST,
    AB_CRITICAL_BOOST,
    AB_HP_POTION,
    AB_LEATHER_ARMOR,
    AB_TREE_BRANCH_ATK,
    AB_TREE_BRANCH_CRI,
    PRICE_ATTACK_BOOST,
    PRICE_CRITICAL_BOOST,
    PRICE_HP_POTION,
    PRICE_TREE_BRANCH,
    ItemType,
)


class Item(ABC):
    """Something a player can carry, buy, sell and use."""

    item_type: ClassVar[ItemType]
    name: ClassVar[str]
    description: ClassVar[str]
    price: ClassVar[int]
    is_consumable: ClassVar[bool]

    @abstractmethod
    def use(self, player):
        """Apply the item to the player; return whether it was used up."""

    def clone(self):
        """Return a fresh item of the same kind."""
        return type(self)()

    def __repr__(self):
        return f"{type(self).__name__}()"


class Weapon(ABC):
    """Equipment worn in the weapon slot."""

    @abstractmethod
    def equipped(self, player):
        """Apply the weapon's bonuses to the player."""

    @abstractmethod
    def unequipped(self, player):
        """Remove the weapon's bonuses from the player."""


class Armor(ABC):
    """Equipment worn in the armor slot."""

    @abstractmethod
    def equipped(self, player):
        """Apply the armor's bonuses to the player."""

    @abstractmethod
    def unequipped(self, player):
        """Remove the armor's bonuses from the player."""


class HpPotion(Item):
    item_type = ItemType.HP_POTION
    name = "HP포션"
    description = f"체력을 +{AB_HP_POTION} 회복합니다"
    price = PRICE_HP_POTION
    is_consumable = True

    def use(self, player):
        if player.current_hp == player.max_hp:
            print(
                f"[아이템 사용 실패] : 더 이상 회복할 수 없습니다. "
                f"({player.current_hp}/{player.max_hp})"
            )
            return False
        print(f"[아이템 사용] : {self.name}을(를) 사용했습니다.")
        print(" - ", end="")
        player.heal_hp(AB_HP_POTION)
        return True


class AttackBoost(Item):
    item_type = ItemType.ATTACK_BOOST
    name = "힘의 영약"
    description = f"이번 전투동안 공격력이 +{AB_ATTACK_BOOST} 증가합니다"
    price = PRICE_ATTACK_BOOST
    is_consumable = True

    def use(self, player):
        print(f"[아이템 사용] : {self.name}을(를) 사용했습니다.")
        print(" - 이번 전투동안 ", end="")
        player.add_temp_attack(AB_ATTACK_BOOST)
        return True


class CriticalBoost(Item):
    item_type = ItemType.CRITICAL_BOOST
    name = "치명타 확률 영약"
    description = f"이번 전투동안 치명타확률이 +{AB_CRITICAL_BOOST} 증가합니다"
    price = PRICE_CRITICAL_BOOST
    is_consumable = True

    def use(self, player):
        print(f"[아이템 사용] : {self.name}을(를) 사용했습니다.")
        print(" - 이번 전투동안 ", end="")
        player.add_temp_critical_probability(AB_CRITICAL_BOOST)
        return True


class TreeBranch(Item, Weapon):
    item_type = ItemType.TREE_BRANCH
    name = "나뭇가지"
    description = (
        f"영구히 공격력이 +{AB_TREE_BRANCH_ATK}, "
        f"치명타 확률이 +{AB_TREE_BRANCH_CRI} 증가합니다"
    )
    price = PRICE_TREE_BRANCH
    is_consumable = False

    def use(self, player):
        player.equip_weapon(self.clone())
        return True

    def equipped(self, player):
        print(f"[무기 장착] : {self.name}을(를) 장착했습니다.")
        print(
            f" - 공격력이 +{AB_TREE_BRANCH_ATK} "
            f"치명타 확률이 +{AB_TREE_BRANCH_CRI} 증가했습니다."
        )
        player.increase_attack(AB_TREE_BRANCH_ATK)
        player.increase_critical_probability(AB_TREE_BRANCH_CRI)

    def unequipped(self, player):
        print(f"[무기 탈착] : {self.name}을(를) 탈착했습니다.")
        print(
            f" - 공격력이 {AB_TREE_BRANCH_ATK} "
            f"치명타 확률이 {AB_TREE_BRANCH_CRI} 감소했습니다."
        )
        player.decrease_attack(AB_TREE_BRANCH_ATK)
        player.decrease_critical_probability(AB_TREE_BRANCH_CRI)


class LeatherArmor(Item, Armor):
    item_type = ItemType.LEATHER_ARMOR
    name = "가죽갑옷"
    description = f"영구히 최대 체력이 +{AB_LEATHER_ARMOR} 증가합니다"
    price = PRICE_TREE_BRANCH
    is_consumable = False

    def use(self, player):
        player.equip_armor(self.clone())
        return True

    def equipped(self, player):
        print(f"[방어구 장착] : {self.name}을(를) 장착했습니다.")
        print(f" - 최대 체력이 +{AB_LEATHER_ARMOR} 증가했습니다.")
        player.increase_max_hp(AB_LEATHER_ARMOR)
        player.increase_current_hp(AB_LEATHER_ARMOR)

    def unequipped(self, player):
        print(f"[방어구 탈착] : {self.name}을(를) 탈착했습니다.")
        print(f" - 최대 체력이 {AB_LEATHER_ARMOR} 감소했습니다.")
        player.decrease_max_hp(AB_LEATHER_ARMOR)


_ITEM_CLASSES = {
    ItemType.HP_POTION: HpPotion,
    ItemType.ATTACK_BOOST: AttackBoost,
    ItemType.CRITICAL_BOOST: CriticalBoost,
    ItemType.TREE_BRANCH: TreeBranch,
    ItemType.LEATHER_ARMOR: LeatherArmor,
}


def create_item(item_type):
    """Build a new item of the given type; unknown types raise ValueError."""
    return _ITEM_CLASSES[ItemType(item_type)]()