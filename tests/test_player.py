import pytest

from textrpg import dice
from textrpg.constants import (
    AB_HP_POTION,
    AB_LEATHER_ARMOR,
    AB_TREE_BRANCH_ATK,
    AB_TREE_BRANCH_CRI,
    DEFAULT_ATK,
    DEFAULT_CRITICAL_DAMAGE,
    DEFAULT_GOLD,
    DEFAULT_HP,
    DEFAULT_LEVEL,
    LEVEL_ATK_RATE,
    LEVEL_HP_RATE,
    MAX_EXP,
    MAX_LEVEL,
)
from textrpg.items import AttackBoost, HpPotion, LeatherArmor, TreeBranch
from textrpg.monster import Goblin
from textrpg.player import Player


@pytest.fixture
def player():
    return Player("Tester")


def test_defaults(player):
    assert player.name == "Tester"
    assert player.level == DEFAULT_LEVEL
    assert player.max_hp == DEFAULT_HP
    assert player.current_hp == DEFAULT_HP
    assert player.attack == DEFAULT_ATK
    assert player.gold == DEFAULT_GOLD
    assert player.inventory == []


def test_default_name():
    assert Player().name == "Hero"


def test_take_damage_clamps_to_zero(player):
    player.take_damage(DEFAULT_HP + 50)
    assert player.current_hp == 0
    assert not player.is_alive


def test_level_up_once(player):
    player.take_damage(10)
    player.add_exp(MAX_EXP)
    assert player.level == DEFAULT_LEVEL + 1
    assert player.exp == 0
    assert player.max_hp == DEFAULT_HP + LEVEL_HP_RATE
    assert player.attack == DEFAULT_ATK + LEVEL_ATK_RATE
    assert player.current_hp == player.max_hp


def test_level_capped(player):
    player.add_exp(MAX_EXP * 20)
    assert player.level == MAX_LEVEL
    assert player.exp == MAX_EXP * 20 - MAX_EXP * (MAX_LEVEL - DEFAULT_LEVEL)


def test_gold_may_go_negative(player):
    player.add_gold(5)
    player.subtract_gold(8)
    assert player.gold == -3


def test_negative_amounts_are_ignored(player):
    player.increase_attack(-5)
    player.decrease_attack(-5)
    player.increase_max_hp(-5)
    player.decrease_max_hp(-5)
    player.increase_critical_probability(-5)
    assert player.attack == DEFAULT_ATK
    assert player.max_hp == DEFAULT_HP
    assert player.critical_probability == 0


def test_increase_current_hp_is_capped(player):
    player.take_damage(5)
    player.increase_current_hp(50)
    assert player.current_hp == player.max_hp


def test_decrease_max_hp_caps_current(player):
    player.decrease_max_hp(40)
    assert player.max_hp == DEFAULT_HP - 40
    assert player.current_hp == player.max_hp


def test_heal_is_capped(player):
    player.take_damage(20)
    player.heal_hp(AB_HP_POTION)
    assert player.current_hp == DEFAULT_HP


def test_temp_buffs_and_reset(player):
    player.add_temp_attack(7)
    player.add_temp_critical_probability(4)
    assert player.temp_attack_buff == 7
    assert player.temp_critical_probability == 4
    player.reset_temp_ability()
    assert player.temp_attack_buff == 0
    assert player.temp_critical_probability == 0


def test_attack_damage_without_critical(player):
    player.add_temp_attack(7)
    for _ in range(50):
        assert player.attack_damage() == DEFAULT_ATK + 7


def test_attack_damage_always_critical(player):
    player.increase_critical_probability(100)
    for _ in range(50):
        assert player.attack_damage() == DEFAULT_ATK * DEFAULT_CRITICAL_DAMAGE


def test_use_item_uses_first_consumable(player):
    branch = TreeBranch()
    player.add_item(branch)
    player.add_item(AttackBoost())
    player.add_item(HpPotion())
    player.use_item()
    assert player.temp_attack_buff > 0
    assert [type(item) for item in player.inventory] == [TreeBranch, HpPotion]


def test_use_item_removes_even_failed_potion(player):
    player.add_item(HpPotion())
    player.use_item()
    assert player.inventory == []
    assert player.current_hp == DEFAULT_HP


def test_use_item_without_consumable(player, capsys):
    branch = TreeBranch()
    player.add_item(branch)
    assert not player.has_consumable()
    player.use_item()
    assert player.inventory == [branch]
    assert "사용 가능한 아이템이 없습니다" in capsys.readouterr().out


def test_use_item_at_keeps_failed_potion(player):
    potion = HpPotion()
    player.add_item(potion)
    player.use_item_at(0)
    assert player.inventory == [potion]


def test_use_item_at_heals_and_removes(player):
    player.take_damage(60)
    player.add_item(HpPotion())
    player.use_item_at(0)
    assert player.current_hp == DEFAULT_HP - 60 + AB_HP_POTION
    assert player.inventory == []


def test_use_item_at_bad_index(player):
    with pytest.raises(IndexError):
        player.use_item_at(0)


def test_equip_weapon_and_swap(player):
    player.add_item(TreeBranch())
    player.use_item_at(0)
    assert isinstance(player.weapon, TreeBranch)
    assert player.inventory == []
    assert player.attack == DEFAULT_ATK + AB_TREE_BRANCH_ATK
    assert player.critical_probability == AB_TREE_BRANCH_CRI

    player.add_item(TreeBranch())
    player.use_item_at(0)
    assert player.attack == DEFAULT_ATK + AB_TREE_BRANCH_ATK
    assert player.critical_probability == AB_TREE_BRANCH_CRI
    assert len(player.inventory) == 1
    assert isinstance(player.inventory[0], TreeBranch)


def test_unequip_weapon_restores_stats(player):
    player.equip_weapon(TreeBranch())
    player.unequip_weapon()
    assert player.weapon is None
    assert player.attack == DEFAULT_ATK
    assert player.critical_probability == 0
    assert isinstance(player.inventory[0], TreeBranch)


def test_unequip_without_equipment(player):
    player.unequip_weapon()
    player.unequip_armor()
    assert player.inventory == []


def test_equip_and_unequip_armor(player):
    player.equip_armor(LeatherArmor())
    assert player.max_hp == DEFAULT_HP + AB_LEATHER_ARMOR
    assert player.current_hp == DEFAULT_HP + AB_LEATHER_ARMOR
    player.unequip_armor()
    assert player.armor is None
    assert player.max_hp == DEFAULT_HP
    assert player.current_hp == DEFAULT_HP
    assert isinstance(player.inventory[0], LeatherArmor)


def test_remove_item_at(player):
    potion = HpPotion()
    boost = AttackBoost()
    player.add_item(potion)
    player.add_item(boost)
    player.remove_item_at(0)
    assert player.inventory == [boost]


def test_show_status_empty_inventory(player, capsys):
    player.show_status()
    out = capsys.readouterr().out
    assert '"Tester"' in out
    assert "없음" in out


def test_show_status_lists_items(player, capsys):
    player.add_item(HpPotion())
    player.show_status()
    assert f"[{HpPotion.name}]" in capsys.readouterr().out


def test_display_inventory_numbers_items(player, capsys):
    player.add_item(HpPotion())
    player.add_item(TreeBranch())
    player.display_inventory()
    out = capsys.readouterr().out
    assert f"| 1. {HpPotion.name} : {HpPotion.description}" in out
    assert f"| 2. {TreeBranch.name} : {TreeBranch.description}" in out


def test_attack_monster_reduces_hp(player):
    dice.seed(1)
    goblin = Goblin(1)
    goblin.current_hp = goblin.max_hp = DEFAULT_ATK * 3
    player.attack_monster(goblin)
    assert goblin.current_hp == goblin.max_hp - DEFAULT_ATK