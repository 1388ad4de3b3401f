"""
Team assignment: three name lists → teams of 3 primary + 1 secondary + 1 tertiary,
sampled uniformly without replacement.
"""

from .teams import AssignmentResult, Team, assign_teams

__all__ = ["assign_teams", "AssignmentResult", "Team"]
