import math
from typing import Optional, Tuple

from siegebot.constants import OperatorConstants, StatsConstants, UIConstants
from siegebot.data_models.player import OperatorStats, PlayerRecord

class StatCalculator:
    """Derives ratios and favorite operators from a player's stats"""
    
    @staticmethod
    def ratio(numerator: float, denominator: float) -> Optional[float]:
        """
        Divide two counters, e.g. kills by deaths
        
        Args:
            numerator: Top of the ratio (kills, wins)
            denominator: Bottom of the ratio (deaths, losses)
            
        Returns:
            The ratio as a float, or None when the denominator is zero
        """
        if denominator == 0:
            return None
        return numerator / denominator
    
    @staticmethod
    def kill_death_ratio(operator: OperatorStats) -> Optional[float]:
        return StatCalculator.ratio(operator.kills, operator.deaths)
    
    @staticmethod
    def win_loss_ratio(operator: OperatorStats) -> Optional[float]:
        return StatCalculator.ratio(operator.wins, operator.losses)
    
    @staticmethod
    def _baseline(player: PlayerRecord, name: str, role: str) -> OperatorStats:
        """Get a default candidate, or a zero-playtime stand-in if the player lacks it"""
        operator = player.get_operator(name)
        if operator is None:
            return OperatorStats(name=name, role=role, playtime=0.0)
        return operator
    
    @staticmethod
    def favorite_operators(player: PlayerRecord) -> Tuple[OperatorStats, OperatorStats]:
        """
        Pick the attacker and defender with the most playtime
        
        Starts from the default candidates and only replaces a candidate when
        another operator of the same role has strictly more playtime, so ties
        keep the earlier pick. Operators are scanned in name order.
        
        Args:
            player: Player record with operator stats
            
        Returns:
            Tuple of (favorite_attacker, favorite_defender)
        """
        favorite_attacker = StatCalculator._baseline(
            player, OperatorConstants.DEFAULT_ATTACKER, OperatorConstants.ATTACK_ROLE
        )
        favorite_defender = StatCalculator._baseline(
            player, OperatorConstants.DEFAULT_DEFENDER, OperatorConstants.DEFENSE_ROLE
        )
        
        for name in sorted(player.operators):
            operator = player.operators[name]
            if operator.role == OperatorConstants.ATTACK_ROLE:
                if operator.playtime > favorite_attacker.playtime:
                    favorite_attacker = operator
            elif operator.role == OperatorConstants.DEFENSE_ROLE:
                if operator.playtime > favorite_defender.playtime:
                    favorite_defender = operator
        
        return favorite_attacker, favorite_defender
    
    @staticmethod
    def format_hours(seconds: float) -> str:
        """
        Format a playtime in seconds as hours for display
        
        Args:
            seconds: Playtime in seconds
            
        Returns:
            Hours with one decimal place, e.g. "2.0"
        """
        hours = seconds / StatsConstants.SECONDS_PER_HOUR
        return f"{hours:.{StatsConstants.PLAYTIME_PRECISION}f}"
    
    @staticmethod
    def format_ratio(value: Optional[float]) -> str:
        """
        Format a ratio for display
        
        Args:
            value: Ratio to format, None if it could not be computed
            
        Returns:
            Ratio with three decimal places, or "N/A" for missing or non-finite values
        """
        if value is None or not math.isfinite(value):
            return UIConstants.NOT_AVAILABLE
        return f"{value:.{StatsConstants.RATIO_PRECISION}f}"
