from funfacts.session.game import GameSession

__all__ = ["GameSession"]
