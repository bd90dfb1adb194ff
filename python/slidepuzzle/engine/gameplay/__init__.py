from slidepuzzle.engine.gameplay.session import PuzzleSession, Strategy

__all__ = ["PuzzleSession", "Strategy"]
