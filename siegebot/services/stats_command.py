"""
Stats command handling.

Turns a chat message into a stats lookup: posts a loading placeholder, fetches
the player, then edits the placeholder with the summary or an error. Each call
to ``handle`` is independent and keeps no state between messages.
"""

from typing import Optional

import discord

from siegebot.config import Config
from siegebot.data_models.player import CommandInvocation, OperatorStats, PlayerRecord
from siegebot.utils.embeds import (
    build_loading_embed,
    build_operator_embed,
    build_player_embed,
    build_usage_embed,
)
from siegebot.utils.error_embeds import ErrorEmbeds
from siegebot.utils.exceptions import InvalidOperatorError, PlayerLookupError, UsageError
from siegebot.utils.logger import setup_logger
from siegebot.utils.stats import StatCalculator

logger = setup_logger(__name__)


def parse_invocation(content: str, trigger: str) -> Optional[CommandInvocation]:
    """
    Split a message into command parts.
    
    The trigger must appear as its own space-delimited token; parsing starts
    there, so the trigger is always ``parts[0]``. Empty tokens left by repeated
    spaces are dropped.
    
    Args:
        content: Raw message text
        trigger: Command token, e.g. "!stats"
        
    Returns:
        CommandInvocation, or None if the message is not a stats command
    """
    if not content or trigger not in content:
        return None
    
    tokens = [token.strip() for token in content.split(" ")]
    tokens = [token for token in tokens if token]
    if trigger not in tokens:
        return None
    
    return CommandInvocation(triggered=True, parts=tokens[tokens.index(trigger):])


class StatsCommandHandler:
    """Handles stats commands found in incoming messages."""
    
    def __init__(self, stats_client, trigger: str = None, platform: str = None):
        """
        Initialize the handler.
        
        Args:
            stats_client: Object with an async ``get_player(handle, platform, include_operators)``
            trigger: Command token, defaults to Config.trigger()
            platform: Provider platform identifier, defaults to Config.R6STATS_PLATFORM
        """
        self.stats_client = stats_client
        self.trigger = trigger or Config.trigger()
        self.platform = platform or Config.R6STATS_PLATFORM
    
    async def handle(self, message: discord.Message) -> bool:
        """
        Respond to a message if it is a stats command.
        
        Args:
            message: Incoming message
            
        Returns:
            True if the message was a stats command, False if it was ignored
        """
        if message.author.bot:
            return False
        
        invocation = parse_invocation(message.content, self.trigger)
        if invocation is None:
            return False
        
        try:
            handle = self._require_handle(invocation)
        except UsageError as e:
            await self._send_usage(message, e.user_message)
            return True
        
        placeholder = await self._post_placeholder(message, handle)
        if placeholder is None:
            return True
        
        try:
            player = await self.stats_client.get_player(handle, self.platform, include_operators=True)
        except PlayerLookupError as e:
            logger.warning(f"Stats lookup failed for {handle}: {e}")
            await self._edit(placeholder, ErrorEmbeds.player_not_found(handle))
            return True
        except Exception as e:
            logger.error(f"Unexpected error fetching stats for {handle}: {e}", exc_info=True)
            await self._edit(placeholder, ErrorEmbeds.player_not_found(handle))
            return True
        
        if invocation.operator_name is None:
            favorite_attacker, favorite_defender = StatCalculator.favorite_operators(player)
            embed = build_player_embed(player, favorite_attacker, favorite_defender)
        else:
            try:
                operator = self._resolve_operator(player, invocation.operator_name)
            except InvalidOperatorError as e:
                logger.info(e)
                await self._edit(placeholder, ErrorEmbeds.invalid_operator(e.operator_name, e.username))
                return True
            embed = build_operator_embed(player, operator)
        
        await self._edit(placeholder, embed)
        return True
    
    def _require_handle(self, invocation: CommandInvocation) -> str:
        if invocation.handle is None:
            raise UsageError("No player specified")
        return invocation.handle
    
    def _resolve_operator(self, player: PlayerRecord, operator_name: str) -> OperatorStats:
        operator = player.get_operator(operator_name)
        if operator is None:
            raise InvalidOperatorError(operator_name.title(), player.username)
        return operator
    
    async def _send_usage(self, message: discord.Message, reason: str):
        try:
            await message.channel.send(embed=build_usage_embed(reason))
        except discord.HTTPException as e:
            logger.error(f"Failed to send usage reply in channel {message.channel.id}: {e}")
    
    async def _post_placeholder(self, message: discord.Message, handle: str) -> Optional[discord.Message]:
        try:
            return await message.channel.send(embed=build_loading_embed(handle))
        except discord.HTTPException as e:
            logger.error(f"Failed to post loading message for {handle} in channel {message.channel.id}: {e}")
            return None
    
    async def _edit(self, placeholder: discord.Message, embed: discord.Embed):
        try:
            await placeholder.edit(embed=embed)
        except discord.HTTPException as e:
            logger.error(f"Failed to edit message {placeholder.id}: {e}")
