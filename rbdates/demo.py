"""Demonstration: fill trees with integers and dates, print them and look values up."""

from __future__ import annotations

import argparse
from typing import Sequence

from rbdates.mydatetime import MyDateTime
from rbdates.redblacktree import RedBlackTree

_ANSWERS = {True: "Да", False: "Нет"}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        description="Show red-black trees of integers and dates."
    )
    parser.parse_args(argv)

    int_tree: RedBlackTree[int] = RedBlackTree()
    for value in (5, 15, 7, 13):
        int_tree.add(value)

    date1 = MyDateTime(19, 12, 2006, 4, 13, 23)
    date6 = MyDateTime(10, 10, 2000, 10, 10, 10)
    date_tree: RedBlackTree[MyDateTime] = RedBlackTree()
    for date in (
        date1,
        MyDateTime(31, 24, 2006, 15, 44, 23),
        MyDateTime(19, 12, 1984, 15, 44, 23),
        MyDateTime(10, 10, 1000, 10, 10, 10),
        MyDateTime(1, 53, 5000, 10, 10, 10),
    ):
        date_tree.add(date)

    print(date_tree.render())
    print(f"Содержит date6: {_ANSWERS[bool(date_tree.find(date6))]}")
    print(f"Содержит date1: {_ANSWERS[bool(date_tree.find(date1))]}")

    print(int_tree.render())
    print(f"Содержит date6: {_ANSWERS[bool(int_tree.find(7))]}")
    print(f"Содержит date1: {_ANSWERS[bool(int_tree.find(8))]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())