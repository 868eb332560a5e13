from numberslider.engine.gamestate.state import GameState

__all__ = ["GameState"]
