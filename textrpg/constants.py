"""Game balance values and the enumerations shared across the game."""

from enum import IntEnum

# Rewards
MIN_DROP_GOLD = 10
MAX_DROP_GOLD = 20
DROP_EXP = 50
SELL_RATE = 0.6
BOSS_STATUS_RATE = 1.5

# Probabilities, in percent
P_USE_ITEM = 20
P_DROP_ITEM = 30


class ShopMenu(IntEnum):
    """Entries of the shop menu."""

    EXIT = 0
    BUY = 1
    SELL = 2
    STATUS = 3


class MonsterKind(IntEnum):
    """Kinds of normal monster that can be generated."""

    GOBLIN = 1
    ORC = 2
    TROLL = 3


NORMAL_MONSTER_TYPE = len(MonsterKind)

# Normal monster stats, multiplied by the level
NM_MIN_HP_RATE = 20
NM_MAX_HP_RATE = 30
NM_MIN_ATK_RATE = 5
NM_MAX_ATK_RATE = 10

# Player stats
DEFAULT_LEVEL = 1
DEFAULT_HP = 200
DEFAULT_ATK = 30
DEFAULT_EXP = 0
DEFAULT_GOLD = 0
DEFAULT_CRITICAL_DAMAGE = 2
MAX_EXP = 100
MAX_LEVEL = 10
LEVEL_HP_RATE = 20
LEVEL_ATK_RATE = 5


class ItemType(IntEnum):
    """Identifiers of every item in the game."""

    HP_POTION = 1
    ATTACK_BOOST = 2
    CRITICAL_BOOST = 3
    TREE_BRANCH = 4
    LEATHER_ARMOR = 5


# Item prices
PRICE_HP_POTION = 10
PRICE_ATTACK_BOOST = 15
PRICE_CRITICAL_BOOST = 15
PRICE_TREE_BRANCH = 15
PRICE_LEATHER_ARMOR = 15

# Item effects
AB_HP_POTION = 50
AB_ATTACK_BOOST = 10
AB_CRITICAL_BOOST = 10
AB_TREE_BRANCH_ATK = 10
AB_TREE_BRANCH_CRI = 5
AB_LEATHER_ARMOR = 15