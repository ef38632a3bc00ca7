"""
Displays for turnsnake.

Each display has initialize(game), update(game, change) and game_over(game).
"""
