"""entities package – Character base, Player (+ weak PlayerRef), and Enemy."""

from .character import Character
from .player import Player, PlayerRef
from .enemy import Enemy
