"""Observation sources feeding host samples into the tracker."""

from .base import ObservationSource
from .coins import COINS_ITEM_ID, count_coins, total_coins
from .jsonl_feed import JsonlFeedSource

__all__ = ["COINS_ITEM_ID", "JsonlFeedSource", "ObservationSource", "count_coins", "total_coins"]
