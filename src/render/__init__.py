"""Render module for tax comparison and Social Security output display."""

from render.renderers import (
    BaseRenderer,
    StateComparisonRenderer,
    ContributionsRenderer,
    BenefitRenderer,
    ProjectionRenderer,
    RENDERER_REGISTRY,
    format_usd,
    comparison_headline,
)

__all__ = [
    'BaseRenderer',
    'StateComparisonRenderer',
    'ContributionsRenderer',
    'BenefitRenderer',
    'ProjectionRenderer',
    'RENDERER_REGISTRY',
    'format_usd',
    'comparison_headline',
]
