import pytest

from textrpg.constants import ItemType, MonsterKind, ShopMenu


def test_shop_menu_values_from_input_numbers():
    assert ShopMenu(0) is ShopMenu.EXIT
    assert ShopMenu(1) is ShopMenu.BUY
    assert ShopMenu(2) is ShopMenu.SELL
    assert ShopMenu(3) is ShopMenu.STATUS


def test_shop_menu_rejects_unknown_number():
    with pytest.raises(ValueError):
        ShopMenu(4)


def test_monster_kinds_are_numbered_from_one():
    kinds = [MonsterKind(number) for number in range(1, 4)]
    assert kinds == list(MonsterKind)
    with pytest.raises(ValueError):
        MonsterKind(0)
    with pytest.raises(ValueError):
        MonsterKind(4)


def test_item_type_lookup():
    assert ItemType(4) is ItemType.TREE_BRANCH
    assert ItemType(5) is ItemType.LEATHER_ARMOR
    with pytest.raises(ValueError):
        ItemType(0)


def test_item_types_cover_one_to_five():
    assert [ItemType(number) for number in range(1, 6)] == list(ItemType)
    with pytest.raises(ValueError):
        ItemType(6)