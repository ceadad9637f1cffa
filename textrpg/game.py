"""The game loop: battles, the shop and the inventory screen."""

from textrpg import console, dice
from textrpg.constants import (
    DROP_EXP,
    MAX_DROP_GOLD,
    MAX_LEVEL,
    MIN_DROP_GOLD,
    NORMAL_MONSTER_TYPE,
    P_DROP_ITEM,
    P_USE_ITEM,
    MonsterKind,
    ShopMenu,
)
from textrpg.monster import BossMonster, Goblin, Orc, Troll
from textrpg.player import Player
from textrpg.shop import Shop

_MONSTERS = {
    MonsterKind.GOBLIN: Goblin,
    MonsterKind.ORC: Orc,
    MonsterKind.TROLL: Troll,
}

_BATTLE_START = (
    "\n▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼[전투를 시작합니다]▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼▼\n"
)
_BATTLE_END = (
    "\n▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲[전투를 종료합니다]▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲▲\n"
)


class GameManager:
    """Runs one playthrough for a single player."""

    def __init__(self, player=None):
        self.shop = Shop()
        self.is_clear = False
        self.player = player

    def run(self):
        """Play battles until the boss falls or the player dies."""
        if self.player is None:
            name = console.get_str("▶ 플레이어를 생성합니다. 이름을 입력하세요: ")
            self.player = Player(name)
        player = self.player

        while player.is_alive:
            player.show_status()
            console.pause()

            self.battle()
            player.reset_temp_ability()

            if self.is_clear or not player.is_alive:
                break

            player.show_status()
            if console.get_yes_no("▶ 상점에 방문하시겠습니까? (Y/N): "):
                self.visit_shop()
            console.clear_screen()

        if not player.is_alive:
            print(f'[전투패배] : "{player.name}"이(가) 사망했습니다. 게임오버!')
        print("[게임종료] : ... 게임을 종료합니다 ...")

    def battle(self):
        """Fight one monster to the end; return whether the player won."""
        console.clear_screen()
        print(_BATTLE_START)
        player = self.player
        monster = self.generate_monster(player.level)

        while monster.is_alive and player.is_alive:
            if player.has_consumable() and dice.get_int(1, 100) <= P_USE_ITEM:
                player.use_item()
            player.attack_monster(monster)
            if not monster.is_alive:
                break
            monster.attack_player(player)

        if not player.is_alive:
            return False

        if monster.is_boss:
            print(_BATTLE_END)
            print(
                "\n[ ★ 게임 클리어 ★ ] : 축하합니다. 보스 몬스터 "
                f'"{monster.name}"을(를) 처치하고 게임을 클리어했습니다!'
            )
            self.is_clear = True
            return True

        gold = dice.get_int(MIN_DROP_GOLD, MAX_DROP_GOLD)
        player.add_exp(DROP_EXP)
        player.add_gold(gold)
        print(f"[전투 승리] : {monster.name} 처치!")
        print(
            f' ☞ "{player.name}"이(가) EXP(+{DROP_EXP}), 골드(+{gold})를 획득했습니다.'
            f"(레벨: {player.level}, EXP({player.exp}/100), 골드: {player.gold})"
        )

        if dice.get_int(1, 100) <= P_DROP_ITEM:
            player.add_item(monster.drop_item())
        print(_BATTLE_END)
        return True

    def visit_shop(self):
        while True:
            console.clear_screen()
            console.print_shop_menu()
            choice = console.get_int("▶ 상점 메뉴를 선택해주세요: ")
            if choice == ShopMenu.EXIT:
                break
            if choice == ShopMenu.BUY:
                console.clear_screen()
                self.shop.buy(self.player)
            elif choice == ShopMenu.SELL:
                console.clear_screen()
                self.shop.sell(self.player)
            elif choice == ShopMenu.STATUS:
                console.clear_screen()
                self.open_inventory()
            else:
                print("잘못된 입력입니다. 메뉴의 숫자를 입력해주세요.\n")
                console.pause()

    def open_inventory(self):
        player = self.player
        player.show_status()
        if not player.inventory:
            print("[ 인벤토리가 비어있습니다. ]")
            console.pause()
            return
        player.display_inventory()

        choice = console.get_int("▶ 사용할 아이템 숫자를 입력해주세요(0: 취소): ")
        if choice == 0:
            return
        if 1 <= choice <= len(player.inventory):
            player.use_item_at(choice - 1)
            player.show_status()
        else:
            print("잘못된 입력입니다. 아이템의 숫자를 입력해주세요.")
        console.pause()

    def generate_monster(self, player_level):
        """Return the boss at the maximum level, otherwise a random normal monster."""
        if player_level >= MAX_LEVEL:
            return BossMonster(player_level)
        kind = MonsterKind(dice.get_int(1, NORMAL_MONSTER_TYPE))
        return _MONSTERS[kind](player_level)


def main(argv=None):
    """Start the game from the console."""
    console.print_title()
    try:
        GameManager().run()
    except (EOFError, KeyboardInterrupt):
        print()
        return 1
    console.print_game_over()
    console.pause()
    return 0