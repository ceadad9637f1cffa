"""The shop where the player buys and sells items."""

from textrpg import console
from textrpg.constants import SELL_RATE, ItemType
from textrpg.items import create_item


def _sell_price(item):
    """Gold paid for an item sold back to the shop."""
    return int(round(item.price * SELL_RATE, 9))


class Shop:
    """A fixed catalogue of every item in the game."""

    def __init__(self):
        self.items = [create_item(item_type) for item_type in ItemType]

    def show_items(self):
        print("----------------[ 상점 아이템 목록 ]----------------\n|")
        for number, item in enumerate(self.items, start=1):
            print(f"| {number}. {item.name}({item.price}골드): {item.description}")
        print("|\n----------------------------------------------------")

    def buy(self, player):
        """Let the player pick an item to buy; return the bought item or None."""
        self.show_items()
        print(f"(소지금: {player.gold}골드)")

        choice = console.get_int("▶ 구매할 아이템 번호(0: 취소): ")
        if choice == 0:
            return None
        if not 1 <= choice <= len(self.items):
            print("올바른 번호를 입력해주세요.")
            console.pause()
            return None

        listed = self.items[choice - 1]
        if player.gold < listed.price:
            print(f"보유 골드가 부족합니다.(소지금: {player.gold}골드)")
            console.pause()
            return None

        player.subtract_gold(listed.price)
        bought = create_item(listed.item_type)
        player.add_item(bought)
        print(f'[아이템 구매] : "{listed.name}" 구매 완료(소지금: {player.gold})')
        console.pause()
        return bought

    def sell(self, player):
        """Let the player pick an item to sell; return the sold item or None."""
        inventory = player.inventory
        if not inventory:
            print("[ 판매할 아이템이 없습니다.] ")
            console.pause()
            return None

        print("---------------[ 보유 아이템 목록 ]-----------------\n|")
        for number, item in enumerate(inventory, start=1):
            print(
                f"| {number}. {item.name}({item.price * SELL_RATE:g}골드): "
                f"{item.description}"
            )
        print("|\n----------------------------------------------------")
        print(f"(소지금: {player.gold}골드)")

        choice = console.get_int("▶ 판매할 아이템 번호(0: 취소): ")
        if choice == 0:
            return None
        if not 1 <= choice <= len(inventory):
            print("올바른 번호를 입력해주세요.")
            console.pause()
            return None

        sold = inventory[choice - 1]
        player.add_gold(_sell_price(sold))
        print(f'[아이템 판매] "{sold.name}" 판매 완료(소지금: {player.gold})')
        player.remove_item_at(choice - 1)
        console.pause()
        return sold