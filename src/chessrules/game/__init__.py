"""Game management layer — owns a board for the lifetime of one game.

Quick start::

    from chessrules.core import parse_square
    from chessrules.game import GameSession

    session = GameSession()
    outcome = session.request_move(parse_square("e2"), parse_square("e4"))
"""

from chessrules.game.session import GameSession

__all__ = ["GameSession"]
