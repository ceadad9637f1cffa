"""The player character: stats, inventory, equipment and combat."""

from dataclasses import dataclass, field

from textrpg import dice
from textrpg.constants import (
    DEFAULT_ATK,
    DEFAULT_CRITICAL_DAMAGE,
    DEFAULT_EXP,
    DEFAULT_GOLD,
    DEFAULT_HP,
    DEFAULT_LEVEL,
    LEVEL_ATK_RATE,
    LEVEL_HP_RATE,
    MAX_EXP,
    MAX_LEVEL,
)
from textrpg.items import Armor, Weapon


@dataclass(eq=False)
class Player:
    """The hero controlled by the user."""

    name: str = "Hero"
    level: int = DEFAULT_LEVEL
    max_hp: int = DEFAULT_HP
    current_hp: int = DEFAULT_HP
    attack: int = DEFAULT_ATK
    exp: int = DEFAULT_EXP
    gold: int = DEFAULT_GOLD
    critical_probability: int = 0
    temp_attack_buff: int = 0
    temp_critical_probability: int = 0
    inventory: list = field(default_factory=list)
    weapon: object = None
    armor: object = None

    @property
    def is_alive(self):
        return self.current_hp > 0

    def show_status(self):
        """Print a summary of the player's stats and inventory."""
        if self.inventory:
            items = "".join(f"[{item.name}] " for item in self.inventory)
        else:
            items = "없음"
        print(
            "\n-----------[플레이어 상태]------------\n"
            f'| 이름: "{self.name}"  |  골드: {self.gold}\n'
            f"| 레벨: {self.level} (Exp: {self.exp}/100)  |  "
            f"HP: {self.current_hp}/{self.max_hp}\n"
            f"| 공격력: {self.attack}(+{self.temp_attack_buff})  |  "
            f"치명타 확률: {self.critical_probability}"
            f"(+{self.temp_critical_probability})\n"
            f"| 인벤토리: {items}"
            "\n--------------------------------------\n"
        )

    def reset_temp_ability(self):
        """Drop the buffs that last for one battle."""
        self.temp_attack_buff = 0
        self.temp_critical_probability = 0

    def use_item(self):
        """Use and discard the first consumable in the inventory."""
        for index, item in enumerate(self.inventory):
            if item.is_consumable:
                item.use(self)
                del self.inventory[index]
                return
        print("인벤토리에 사용 가능한 아이템이 없습니다.")

    def use_item_at(self, index):
        """Use the item at index; it leaves the inventory only if it was used."""
        if self.inventory[index].use(self):
            del self.inventory[index]

    def attack_monster(self, monster):
        damage = self.attack_damage()
        before = monster.current_hp
        monster.take_damage(damage)
        print(
            f'[공격] : "{self.name}"이(가) "{monster.name}"을(를) 공격합니다!'
            f'(데미지: {damage}) → "{monster.name}" 체력({before}'
            f" → {monster.current_hp}) / {monster.max_hp}"
        )

    def take_damage(self, damage):
        self.current_hp = max(self.current_hp - damage, 0)

    def add_exp(self, amount):
        self.exp += amount
        self._level_up()

    def add_gold(self, amount):
        self.gold += amount

    def subtract_gold(self, amount):
        """Take gold away; the balance is allowed to go negative."""
        self.gold -= amount

    def increase_attack(self, amount):
        if amount >= 0:
            self.attack += amount

    def increase_critical_probability(self, amount):
        if amount >= 0:
            self.critical_probability += amount

    def increase_current_hp(self, amount):
        if amount >= 0:
            self.current_hp = min(self.current_hp + amount, self.max_hp)

    def increase_max_hp(self, amount):
        if amount >= 0:
            self.max_hp += amount

    def decrease_attack(self, amount):
        if amount >= 0:
            self.attack -= amount

    def decrease_critical_probability(self, amount):
        if amount >= 0:
            self.critical_probability -= amount

    def decrease_max_hp(self, amount):
        if amount >= 0:
            self.max_hp -= amount
            self.current_hp = min(self.current_hp, self.max_hp)

    def add_item(self, item):
        self.inventory.append(item)

    def remove_item_at(self, index):
        """Take the item at index out of the inventory and return it."""
        return self.inventory.pop(index)

    def heal_hp(self, amount):
        before = self.current_hp
        self.current_hp = min(self.current_hp + amount, self.max_hp)
        print(
            f"HP가 +{amount} 회복되었습니다(체력: {before}"
            f" → {self.current_hp} / {self.max_hp})"
        )

    def add_temp_attack(self, amount):
        before = self.attack + self.temp_attack_buff
        self.temp_attack_buff += amount
        print(
            f"공격력이 +{amount} 증가했습니다!(공격력: {before}"
            f" → {self.attack + self.temp_attack_buff})"
        )

    def add_temp_critical_probability(self, amount):
        before = self.critical_probability + self.temp_critical_probability
        self.temp_critical_probability += amount
        print(
            f"치명타 확률이 +{amount} 증가했습니다!(치명타 확률: {before}"
            f" → {self.critical_probability + self.temp_critical_probability})"
        )

    def display_inventory(self):
        print("\n---------------[ 보유 아이템 목록 ]-----------------\n|")
        for number, item in enumerate(self.inventory, start=1):
            print(f"| {number}. {item.name} : {item.description}")
        print("|\n----------------------------------------------------")

    def has_consumable(self):
        return any(item.is_consumable for item in self.inventory)

    def equip_weapon(self, weapon):
        """Wear a weapon, returning any current one to the inventory."""
        self.unequip_weapon()
        self.weapon = weapon
        if isinstance(weapon, Weapon):
            weapon.equipped(self)

    def equip_armor(self, armor):
        """Wear armor, returning any current one to the inventory."""
        self.unequip_armor()
        self.armor = armor
        if isinstance(armor, Armor):
            armor.equipped(self)

    def unequip_weapon(self):
        if self.weapon is None:
            return
        weapon, self.weapon = self.weapon, None
        if isinstance(weapon, Weapon):
            weapon.unequipped(self)
        self.add_item(weapon)

    def unequip_armor(self):
        if self.armor is None:
            return
        armor, self.armor = self.armor, None
        if isinstance(armor, Armor):
            armor.unequipped(self)
        self.add_item(armor)

    def attack_damage(self):
        """Roll the damage of one attack, doubled on a critical hit."""
        damage = self.attack + self.temp_attack_buff
        chance = self.critical_probability + self.temp_critical_probability
        if dice.get_int(1, 100) <= chance:
            return damage * DEFAULT_CRITICAL_DAMAGE
        return damage

    def _level_up(self):
        while self.exp >= MAX_EXP and self.level < MAX_LEVEL:
            self.exp -= MAX_EXP
            self.level += 1
            self.max_hp += LEVEL_HP_RATE
            self.attack += LEVEL_ATK_RATE
            self.current_hp = self.max_hp
            print(
                f"[레벨업] : {self.level}레벨(체력: {self.max_hp}, "
                f"공격력: {self.attack})"
            )