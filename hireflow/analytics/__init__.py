"""
Hiring analytics.

Aggregates pipeline records into funnel, conversion and trend figures.
See :func:`compute_analytics`.
"""

from .pipeline import compute_analytics, cumulative_funnel, stage_funnel, time_to_hire  # noqa: F401
