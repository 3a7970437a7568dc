from .summary import DashboardSummary, build_summary

__all__ = ["DashboardSummary", "build_summary"]
