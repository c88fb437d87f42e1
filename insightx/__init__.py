"""
InsightX - psychometric assessment scoring for career guidance.

Turns raw personality, interest and cognitive answers into normalized
profiles, a PIC Index composite and an immutable report.
"""

__version__ = "1.0.0"
