from .calculator import PlacementCalculator, calculate_leaderboard_places

__all__ = ['PlacementCalculator', 'calculate_leaderboard_places']
