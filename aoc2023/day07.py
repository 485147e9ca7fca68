"""Camel cards: rank poker-like hands and total the winnings."""

import argparse
from collections import Counter
from enum import IntEnum
from pathlib import Path

_ORDER = "23456789TJQKA"
_JOKER_ORDER = "J23456789TQKA"


class HandType(IntEnum):
    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7


def hand_type(cards, joker):
    """Classify a hand; with joker set, 'J' cards join the largest group."""
    jokers = cards.count("J") if joker else 0
    counts = Counter(c for c in cards if not (joker and c == "J"))
    sizes = sorted(counts.values(), reverse=True)
    highest = (sizes[0] if sizes else 0) + jokers
    second = sizes[1] if len(sizes) > 1 else 0

    if highest == 5:
        return HandType.FIVE_OF_A_KIND
    if highest == 4:
        return HandType.FOUR_OF_A_KIND
    if highest == 3:
        return HandType.FULL_HOUSE if second == 2 else HandType.THREE_OF_A_KIND
    if highest == 2:
        return HandType.TWO_PAIR if second == 2 else HandType.ONE_PAIR
    return HandType.HIGH_CARD


def _strength(cards, joker):
    order = _JOKER_ORDER if joker else _ORDER
    ranks = {card: rank for rank, card in enumerate(order)}
    return hand_type(cards, joker), tuple(ranks.get(c, 0) for c in cards)


def total_winnings(text, joker):
    """Sum of each bid times the rank of its hand."""
    hands = []
    for line in text.strip().splitlines():
        fields = line.split()
        hands.append((fields[0], int(fields[1])))
    hands.sort(key=lambda hand: _strength(hand[0], joker))
    return sum(rank * bid for rank, (_, bid) in enumerate(hands, 1))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rank camel card hands.")
    parser.add_argument("input", nargs="?", default="day07/input.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as exc:
        print("Error opening file:", exc)
        return 1
    print("Part 1:", total_winnings(text, False))
    print("Part 2:", total_winnings(text, True))
    return 0