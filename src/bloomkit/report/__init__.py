from bloomkit.report.render import build_table, render_stats
from bloomkit.report.stats import FilterStats

__all__ = ["FilterStats", "build_table", "render_stats"]
