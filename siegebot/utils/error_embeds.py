"""
Centralized error embeds for the stats command.

Provides the replies shown in place of the loading message when a lookup
cannot be completed.
"""

import discord
from typing import Optional
from siegebot.constants import UIConstants


class ErrorEmbeds:
    """Error embed factory for failed stats lookups."""
    
    @staticmethod
    def player_not_found(handle: Optional[str] = None) -> discord.Embed:
        """Create embed for when the stats provider can't return the player."""
        if handle:
            description = f"Unable to find player **{handle}**"
        else:
            description = "Unable to find player"
        
        return discord.Embed(
            title="Failed to load player",
            description=description,
            color=UIConstants.ERROR_COLOR
        )
    
    @staticmethod
    def invalid_operator(operator_name: str, username: str) -> discord.Embed:
        """Create embed for an operator name the player has no stats for."""
        return discord.Embed(
            title="Invalid operator name",
            description=f"No operator named **{operator_name}** for {username}",
            color=UIConstants.ERROR_COLOR
        )
