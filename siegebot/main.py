import argparse
import asyncio
import sys
from typing import Optional

import discord
from discord.ext import commands

from siegebot.config import Config
from siegebot.services.r6stats import R6StatsClient
from siegebot.utils.logger import setup_logger

class SiegeStatsBot(commands.Bot):
    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.guilds = True
        
        super().__init__(
            command_prefix=Config.COMMAND_PREFIX,
            intents=intents,
            help_command=None
        )
        
        self.stats_client: Optional[R6StatsClient] = None
        self.logger = setup_logger(__name__)
        
    async def setup_hook(self):
        """Called when the bot is starting up"""
        self.logger.info("Setting up Siege Stats Bot...")
        
        self.stats_client = R6StatsClient()
        
        await self.load_cogs()
        
        self.logger.info("Siege Stats Bot setup complete!")
        
    async def load_cogs(self):
        """Load all cogs"""
        cogs_to_load = [
            'siegebot.cogs.stats',
        ]
        
        for cog in cogs_to_load:
            try:
                await self.load_extension(cog)
                self.logger.info(f"Loaded cog: {cog}")
            except Exception as e:
                self.logger.error(f"Failed to load cog {cog}: {e}", exc_info=True)
                
    async def on_ready(self):
        """Called when the bot is ready"""
        self.logger.info(f'{self.user} has connected to Discord!')
        self.logger.info(f'Bot is in {len(self.guilds)} guilds')
        
        await self.change_presence(
            activity=discord.Game(name=f"Rainbow Six Siege | {Config.trigger()}")
        )
        
    async def on_command_error(self, ctx: commands.Context, error: Exception):
        """Stats lookups don't go through the command framework, so unknown commands are expected"""
        if isinstance(error, commands.CommandNotFound):
            return
        self.logger.error(f"Unexpected error in command {ctx.command}: {error}")
        
    async def close(self):
        """Cleanup when bot is shutting down"""
        self.logger.info("Shutting down Siege Stats Bot...")
        
        if self.stats_client:
            await self.stats_client.close()
            
        await super().close()

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Discord bot that posts Rainbow Six Siege player stats")
    parser.add_argument('-t', '--token', help="Bot token (overrides DISCORD_TOKEN)")
    return parser.parse_args(argv)

async def main(argv=None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    token = args.token or Config.DISCORD_TOKEN
    
    try:
        Config.validate(token)
    except ValueError as e:
        setup_logger(__name__).error(f"Invalid configuration: {e}")
        return 1
    
    bot = SiegeStatsBot()
    
    try:
        await bot.start(token)
    except KeyboardInterrupt:
        pass
    except discord.LoginFailure as e:
        bot.logger.error(f"Failed to log in: {e}")
        return 1
    except Exception as e:
        bot.logger.error(f"Fatal error: {e}", exc_info=True)
        return 1
    finally:
        await bot.close()
    return 0

def run():
    sys.exit(asyncio.run(main()))

if __name__ == "__main__":
    run()
