"""Calendar domain - availability queries and month/week/day grids"""
