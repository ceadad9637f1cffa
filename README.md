# textrpg

A small turn-based role-playing game that runs in the terminal. The game text is in Korean.

You create a hero and fight one randomly chosen monster after another: a goblin, an orc or a troll. Each win gives you experience and gold. Sometimes the monster also drops an item. Between battles you can visit the shop to buy or sell items, or open your inventory to use an item. When your hero reaches level 10, the maximum level, the dragon boss appears instead. It has one and a half times the usual stats. Beat it to win the game. If your HP drops to zero, the game is over.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Playing

```
textrpg
```

When the game starts, enter your hero's name. After that the game asks for input at each step:

- **Y/N prompts**: answer with `Y`, `YES`, `N` or `NO`. Case and spaces do not matter.
- **Numbered menus**: enter the number of an entry. `0` cancels or goes back. Spaces inside a number are ignored.
- **Pauses**: press Enter to continue.

If input ends (end of file) or you press Ctrl-C, the game stops and the command exits with status 1.

### Combat

Combat runs on its own, one round after another, until one side falls. In each round:

- If the inventory holds a consumable, there is a 20% chance that your hero uses the first one.
- Your hero attacks. If a roll of 1 to 100 is at or below the critical chance, the hit does double damage. The hero starts with a critical chance of 0, so only items raise it.
- If the monster is still alive, it strikes back.

Buffs from potions last until the end of the battle.

### Rewards

Every win against a normal monster gives:

- 50 EXP. Each 100 EXP makes one level, up to level 10. A level adds 20 max HP and 5 attack, and it fully restores HP.
- 10 to 20 gold.
- A 30% chance of an item drop.

### Items

| Item | Price | Effect |
|------|-------|--------|
| HP포션 | 10 | Restores 50 HP, up to the maximum. It cannot be used at full HP, and then it stays in the inventory. |
| 힘의 영약 | 15 | +10 attack for the current battle |
| 치명타 확률 영약 | 15 | +10 critical chance for the current battle |
| 나뭇가지 | 15 | Weapon: +10 attack and +5 critical chance while equipped |
| 가죽갑옷 | 15 | Armor: +15 max HP while equipped. Also heals 15 HP when put on. |

Using a weapon or armor from the inventory equips it. The piece you had on goes back into the inventory, and its bonuses are removed.

The shop buys items back at 60% of their price, rounded down: 6 gold for an HP포션 and 9 gold for the others.

## Using the pieces in code

The game is built from small modules that can also be used on their own:

- `textrpg.game`: `GameManager` runs the main loop, and `main()` is the `textrpg` command. `GameManager(player)` can take a ready-made `Player`. Without one, `run()` asks for a name.
- `textrpg.player`: `Player`, the hero, with its stats, inventory, equipment and attacks.
- `textrpg.monster`: `Monster` and the kinds `Goblin`, `Orc`, `Troll` and `BossMonster`.
- `textrpg.shop`: `Shop`. `buy` and `sell` return the item that changed hands, or `None`.
- `textrpg.items`: the items, and `create_item(item_type)` to build one from an `ItemType`.
- `textrpg.constants`: the balance values and the `ShopMenu`, `MonsterKind` and `ItemType` enumerations.
- `textrpg.console`: input prompts, banners, screen clearing and pauses.
- `textrpg.dice`: the random numbers. `seed(value)` makes a run repeatable.

```python
from textrpg import dice
from textrpg.items import HpPotion
from textrpg.monster import Goblin
from textrpg.player import Player

dice.seed(1)
hero = Player("Hero")
hero.add_item(HpPotion())
goblin = Goblin(hero.level)
hero.attack_monster(goblin)
print(goblin.current_hp, goblin.is_alive)
```

## What it does not do

A game lasts one session. It cannot be saved or loaded, and there are no settings or command-line options.