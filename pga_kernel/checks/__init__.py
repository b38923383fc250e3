"""
Verification harness for the PGA kernel.

Cross-checks closed-form formulas against compositions of join, meet and
dual, and reports pass/fail counts.
"""

from .scenarios import (
    CHECKS,
    SCENARIOS,
    perpendicular_line_closed_form,
    perpendicular_plane_closed_form,
    orthogonal_plane_closed_form,
    project_point_plane_closed_form,
    project_point_line_closed_form,
)

from .runner import (
    CheckReport,
    select_checks,
    run_checks,
    format_report,
    main,
)

__all__ = [
    # Scenarios
    "CHECKS",
    "SCENARIOS",
    "perpendicular_line_closed_form",
    "perpendicular_plane_closed_form",
    "orthogonal_plane_closed_form",
    "project_point_plane_closed_form",
    "project_point_line_closed_form",
    # Runner
    "CheckReport",
    "select_checks",
    "run_checks",
    "format_report",
    "main",
]
