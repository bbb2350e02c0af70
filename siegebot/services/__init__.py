"""
Services package for the Siege stats bot.
"""

from .r6stats import R6StatsClient
from .stats_command import StatsCommandHandler

__all__ = ['R6StatsClient', 'StatsCommandHandler']
