"""
Player data models for the stats command.

Immutable data transfer objects built from stats provider responses. A
PlayerRecord lives for a single command invocation and is never stored.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


def _as_float(value: Any) -> float:
    """Coerce a provider number (possibly missing or a string) to float."""
    if value is None:
        return 0.0
    return float(value)


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    return int(value)


@dataclass(frozen=True)
class ModeStats:
    """Aggregate stats for one game mode (ranked, casual)."""
    kill_death_ratio: float
    win_loss_ratio: float
    playtime: float  # seconds
    
    @classmethod
    def from_api(cls, data: Optional[Mapping[str, Any]]) -> "ModeStats":
        data = data or {}
        return cls(
            kill_death_ratio=_as_float(data.get('kd')),
            win_loss_ratio=_as_float(data.get('wlr')),
            playtime=_as_float(data.get('playtime')),
        )


@dataclass(frozen=True)
class OperatorStats:
    """Stats for a single operator."""
    name: str
    role: str  # 'atk', 'def' or anything else the provider reports
    playtime: float  # seconds
    kills: int = 0
    deaths: int = 0
    wins: int = 0
    losses: int = 0
    specials: Dict[str, str] = field(default_factory=dict)
    
    @classmethod
    def from_api(cls, record: Mapping[str, Any]) -> "OperatorStats":
        """Build from one entry of the provider's ``operator_records`` list."""
        operator = record.get('operator') or {}
        stats = record.get('stats') or {}
        specials = stats.get('specials') or {}
        return cls(
            name=str(operator.get('name', '')),
            role=str(operator.get('role', '')),
            playtime=_as_float(stats.get('playtime')),
            kills=_as_int(stats.get('kills')),
            deaths=_as_int(stats.get('deaths')),
            wins=_as_int(stats.get('wins')),
            losses=_as_int(stats.get('losses')),
            specials={str(key): str(value) for key, value in specials.items()},
        )


@dataclass(frozen=True)
class PlayerRecord:
    """Complete stats for a provider account."""
    username: str
    platform: str
    ranked: ModeStats
    casual: ModeStats
    # Keyed by title-cased operator name
    operators: Dict[str, OperatorStats] = field(default_factory=dict)
    
    def get_operator(self, name: str) -> Optional[OperatorStats]:
        """Look up an operator by name, ignoring case."""
        return self.operators.get(normalize_operator_name(name))
    
    @classmethod
    def from_api(cls, player_data: Mapping[str, Any],
                 operator_records: Optional[List[Mapping[str, Any]]] = None) -> "PlayerRecord":
        """
        Build a record from provider JSON.
        
        Args:
            player_data: The ``player`` object of the player endpoint
            operator_records: The ``operator_records`` list of the operators endpoint
            
        Returns:
            Populated PlayerRecord
        """
        stats = player_data.get('stats') or {}
        operators = {}
        for record in operator_records or []:
            operator = OperatorStats.from_api(record)
            if operator.name:
                operators[normalize_operator_name(operator.name)] = operator
        
        return cls(
            username=str(player_data.get('username', '')),
            platform=str(player_data.get('platform', '')),
            ranked=ModeStats.from_api(stats.get('ranked')),
            casual=ModeStats.from_api(stats.get('casual')),
            operators=operators,
        )


@dataclass(frozen=True)
class CommandInvocation:
    """A stats command parsed out of a chat message."""
    triggered: bool
    parts: List[str]
    
    @property
    def handle(self) -> Optional[str]:
        return self.parts[1] if len(self.parts) > 1 else None
    
    @property
    def operator_name(self) -> Optional[str]:
        return self.parts[2] if len(self.parts) > 2 else None


def normalize_operator_name(name: str) -> str:
    """Title-case an operator name the way operator mappings are keyed."""
    return name.strip().title()
