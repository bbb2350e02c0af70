import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Bot configuration settings"""
    
    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')
    
    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    STATS_COMMAND = os.getenv('STATS_COMMAND', 'stats')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_DIR = os.getenv('LOG_DIR', 'logs')
    
    # Stats provider settings
    R6STATS_API_URL = os.getenv('R6STATS_API_URL', 'https://api.r6stats.com/api/v1')
    R6STATS_PLATFORM = os.getenv('R6STATS_PLATFORM', 'uplay')
    R6STATS_TIMEOUT = float(os.getenv('R6STATS_TIMEOUT', 15))
    
    @classmethod
    def trigger(cls) -> str:
        """Get the token that marks a message as a stats command"""
        return f"{cls.COMMAND_PREFIX}{cls.STATS_COMMAND}"
    
    @classmethod
    def validate(cls, token: Optional[str] = None):
        """Validate that required configuration is present, using ``token`` in place of DISCORD_TOKEN if given"""
        if not (token or cls.DISCORD_TOKEN):
            raise ValueError("DISCORD_TOKEN is required (set it in the environment or pass -t)")
        if cls.R6STATS_TIMEOUT <= 0:
            raise ValueError("R6STATS_TIMEOUT must be a positive number of seconds")
