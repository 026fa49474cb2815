"""Text views for scan results."""

from smurfscan.core.views.report import render_report

__all__ = ["render_report"]
