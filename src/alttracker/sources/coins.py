from __future__ import annotations

from collections.abc import Iterable

from ..models.observation import CoinItem


COINS_ITEM_ID = 995


def count_coins(container: Iterable[CoinItem | None]) -> int:
    coins = 0
    for item in container:
        if item is None:
            continue
        if item.item_id == COINS_ITEM_ID:
            coins += item.quantity
    return coins


def total_coins(
    inventory: Iterable[CoinItem | None] | None,
    bank: Iterable[CoinItem | None] | None,
) -> int:
    """Coins held in inventory plus bank.

    The bank container is only populated once the bank has been opened this
    session, so the total can jump when it first becomes visible.
    """
    total = 0
    if inventory is not None:
        total += count_coins(inventory)
    if bank is not None:
        total += count_coins(bank)
    return total
