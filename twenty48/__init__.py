from twenty48.engine import Direction, Game2048, GameState, Tile
from twenty48.session import GameSession, Renderer

__version__ = "1.0.0"

__all__ = ["Direction", "Game2048", "GameSession", "GameState", "Renderer", "Tile"]
