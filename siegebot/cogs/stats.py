import discord
from discord.ext import commands

from siegebot.services.stats_command import StatsCommandHandler

class StatsCog(commands.Cog):
    """Listens for stats commands in any channel the bot can read"""
    
    def __init__(self, bot):
        self.bot = bot
        self.handler = StatsCommandHandler(bot.stats_client)
    
    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        """Hand every message to the stats command handler"""
        await self.handler.handle(message)

async def setup(bot):
    await bot.add_cog(StatsCog(bot))
