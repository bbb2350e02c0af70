"""
Shared embed utilities for the Siege stats bot.

Every reply the bot posts or edits is built here so titles, colors and field
layout stay consistent between the loading, summary and usage messages.
"""

import discord
from siegebot.constants import UIConstants
from siegebot.data_models.player import OperatorStats, PlayerRecord
from siegebot.utils.stats import StatCalculator


def clip(text: str, limit: int) -> str:
    """Shorten text to fit a Discord length limit, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit - 1] + "\u2026"


def build_usage_embed(message: str) -> discord.Embed:
    """Build the reply for a malformed command, e.g. one with no player."""
    return discord.Embed(
        title="Siege Stats",
        description=message,
        color=UIConstants.NEUTRAL_COLOR
    )


def build_loading_embed(handle: str) -> discord.Embed:
    """Build the placeholder posted while a player's stats are fetched."""
    return discord.Embed(
        title=clip(f"Loading stats for {handle}", UIConstants.MAX_TITLE_LENGTH),
        color=UIConstants.NEUTRAL_COLOR
    )


def build_player_embed(player: PlayerRecord, favorite_attacker: OperatorStats,
                       favorite_defender: OperatorStats) -> discord.Embed:
    """
    Build the full summary embed for a player.
    
    Fields are always emitted in the same order: ranked stats, casual stats,
    then the favorite attacker and defender with their ratios.
    
    Args:
        player: Player record fetched from the stats provider
        favorite_attacker: Attack operator with the most playtime
        favorite_defender: Defense operator with the most playtime
        
    Returns:
        Formatted Discord embed with twelve inline fields
    """
    embed = discord.Embed(
        title=clip(f"Siege Stats for {player.username}", UIConstants.MAX_TITLE_LENGTH),
        color=UIConstants.ACCENT_COLOR
    )
    
    for mode_name, mode in (("Ranked", player.ranked), ("Casual", player.casual)):
        embed.add_field(name=f"{mode_name} Playtime", value=StatCalculator.format_hours(mode.playtime), inline=True)
        embed.add_field(name=f"{mode_name} K/D", value=StatCalculator.format_ratio(mode.kill_death_ratio), inline=True)
        embed.add_field(name=f"{mode_name} W/L", value=StatCalculator.format_ratio(mode.win_loss_ratio), inline=True)
    
    for label, operator in (("Attacker", favorite_attacker), ("Defender", favorite_defender)):
        embed.add_field(name=f"Favorite {label}", value=operator.name, inline=True)
        embed.add_field(
            name=f"{label} K/D",
            value=StatCalculator.format_ratio(StatCalculator.kill_death_ratio(operator)),
            inline=True
        )
        embed.add_field(
            name=f"{label} W/L",
            value=StatCalculator.format_ratio(StatCalculator.win_loss_ratio(operator)),
            inline=True
        )
    
    return embed


def build_operator_embed(player: PlayerRecord, operator: OperatorStats) -> discord.Embed:
    """
    Build the summary embed for one of a player's operators.
    
    Handles Discord's 25-field limit: specials beyond what fits after the three
    base fields are dropped and noted in the footer. Specials are listed in key
    order; blank keys are skipped and blank values shown as N/A.
    
    Args:
        player: Player record fetched from the stats provider
        operator: The operator to summarize
        
    Returns:
        Formatted Discord embed with base stats and operator specials
    """
    embed = discord.Embed(
        title=clip(f"Siege Stats for {player.username}: {operator.name}", UIConstants.MAX_TITLE_LENGTH),
        color=UIConstants.ACCENT_COLOR
    )
    
    embed.add_field(name="Playtime", value=StatCalculator.format_hours(operator.playtime), inline=True)
    embed.add_field(
        name="K/D",
        value=StatCalculator.format_ratio(StatCalculator.kill_death_ratio(operator)),
        inline=True
    )
    embed.add_field(
        name="W/L",
        value=StatCalculator.format_ratio(StatCalculator.win_loss_ratio(operator)),
        inline=True
    )
    
    max_specials = UIConstants.MAX_EMBED_FIELDS - len(embed.fields)
    # Discord rejects fields with a blank name or value
    special_keys = sorted(key for key in operator.specials if key.strip())
    for key in special_keys[:max_specials]:
        value = operator.specials[key].strip() or UIConstants.NOT_AVAILABLE
        embed.add_field(
            name=clip(key, UIConstants.MAX_FIELD_NAME_LENGTH),
            value=clip(value, UIConstants.MAX_FIELD_VALUE_LENGTH),
            inline=True
        )
    
    if len(special_keys) > max_specials:
        embed.set_footer(
            text=f"Showing {max_specials} of {len(special_keys)} operator stats."
        )
    
    return embed
