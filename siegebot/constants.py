"""
Bot-wide constants for the Siege stats Discord bot.

Keeps display colors, operator roles and other magic values in one place.
"""

class UIConstants:
    """Constants for Discord UI elements."""
    
    # Embed colors
    NEUTRAL_COLOR = 0x95a5a6  # Grey for usage and loading messages
    ACCENT_COLOR = 0x3498db   # Blue for stat summaries
    ERROR_COLOR = 0xe74c3c    # Red for errors
    
    # Shown in place of ratios that cannot be computed
    NOT_AVAILABLE = "N/A"
    
    # Discord embed limits
    MAX_EMBED_FIELDS = 25
    MAX_TITLE_LENGTH = 256
    MAX_FIELD_NAME_LENGTH = 256
    MAX_FIELD_VALUE_LENGTH = 1024

class OperatorConstants:
    """Constants describing operators and favorite selection."""
    
    ATTACK_ROLE = "atk"
    DEFENSE_ROLE = "def"
    
    # Baseline candidates before scanning a player's operators
    DEFAULT_ATTACKER = "Ash"
    DEFAULT_DEFENDER = "Frost"

class StatsConstants:
    """Constants for stat formatting."""
    
    SECONDS_PER_HOUR = 3600
    PLAYTIME_PRECISION = 1
    RATIO_PRECISION = 3
