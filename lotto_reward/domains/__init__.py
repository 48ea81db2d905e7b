"""Lotto domain value objects."""

from lotto_reward.domains.lotto import Lotto, WinningLotto

__all__ = ["Lotto", "WinningLotto"]
