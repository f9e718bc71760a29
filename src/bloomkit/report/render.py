from typing import TYPE_CHECKING, Optional, Union

from rich.console import Console
from rich.table import Table

from bloomkit.report.stats import FilterStats

if TYPE_CHECKING:
    from bloomkit.filter.bloom_filter import BloomFilter


def build_table(stats: FilterStats, title: str = "Bloom Filter") -> Table:
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Bits (m)", f"{stats.bit_count:,}")
    table.add_row("Hashes (k)", str(stats.hash_count))
    table.add_row("Memory", f"{stats.size_bytes / 1024:.1f} KB")
    table.add_row("Inserted", f"{stats.inserted:,}")
    if stats.capacity is not None:
        table.add_row(
            "Capacity", f"{stats.capacity:,} ({stats.load_factor:.0%} used)"
        )
    table.add_row("Fill ratio", f"{stats.fill_ratio:.2%}")
    fp = f"{stats.estimated_false_positive_rate:.4%}"
    if stats.target_false_positive_rate is not None:
        fp += f" (target {stats.target_false_positive_rate:.4%})"
    if stats.over_capacity:
        fp = f"[bold red]{fp}[/bold red]"
    table.add_row("Est. false positives", fp)
    return table


def render_stats(
    source: Union[FilterStats, "BloomFilter"], console: Optional[Console] = None
) -> Table:
    """Print a stats table for a filter or a :class:`FilterStats` snapshot."""
    stats = source if isinstance(source, FilterStats) else source.stats()
    table = build_table(stats)
    (console or Console()).print(table)
    return table
