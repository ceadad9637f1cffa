"""Reading player input and printing fixed screens."""

import os
import re
import subprocess

from textrpg.constants import ShopMenu

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_TITLE_WIDTH = 57
_SHOP_LABELS = (
    (ShopMenu.BUY, "구매하기                    |"),
    (ShopMenu.SELL, "판매하기                    | "),
    (ShopMenu.STATUS, "인벤토리                    |"),
    (ShopMenu.EXIT, "뒤로가기                    |"),
)


def _strip_spaces(text):
    return "".join(text.split())


def _emit(lines):
    """Print the lines as one block and return the printed text."""
    text = "\n".join(lines)
    print(text)
    return text


def get_str(prompt="문자열을 입력해주세요: "):
    """Ask until a non-empty line is entered and return it."""
    while True:
        answer = input(prompt)
        if answer:
            return answer
        print("입력이 비었습니다. 다시 입력하세요.")


def get_int(prompt="숫자를 입력해주세요: "):
    """Ask until a whole number is entered; whitespace inside it is ignored."""
    while True:
        answer = input(prompt)
        if not answer:
            print("입력이 비었습니다. 다시 입력하세요")
            continue
        answer = _strip_spaces(answer)
        if _INT_PATTERN.fullmatch(answer):
            value = int(answer)
            if _INT_MIN <= value <= _INT_MAX:
                return value
        print("잘못된 입력입니다. 숫자만 입력하세요")


def get_yes_no(prompt="Y 또는 N을 입력해주세요: "):
    """Ask until Y/YES or N/NO is entered; return True for yes."""
    while True:
        answer = _strip_spaces(input(prompt)).upper()
        if answer in ("Y", "YES"):
            return True
        if answer in ("N", "NO"):
            return False
        print("잘못된 입력입니다. Y 또는 N만 입력해주세요.")


def print_title():
    """Print the title banner and return its text."""
    border = "|" + " " * (_TITLE_WIDTH - 2) + "|"
    lines = [
        "====================[ Text R.P.G ]=======================",
        border,
        "|                      모험의 시작                      |",
        border,
        "=" * _TITLE_WIDTH,
    ]
    return _emit(lines)


def print_game_over():
    """Print the game-over banner and return its text."""
    return _emit(["", "====================[  Game Over  ]======================="])


def print_shop_menu():
    """Print the shop menu and return its text."""
    blank = "|                                |"
    lines = ["", "===========[ 상점 메뉴] ==========", blank]
    lines.extend(f"| {int(choice)}. {label}" for choice, label in _SHOP_LABELS)
    lines.extend([blank, "==================================="])
    return _emit(lines)


def clear_screen():
    """Clear the terminal using the system's own command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def pause():
    """Wait for the player to press Enter."""
    try:
        input("계속하려면 엔터 키를 누르십시오 . . .")
    except EOFError:
        pass