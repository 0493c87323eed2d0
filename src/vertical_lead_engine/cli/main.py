"""Main CLI entry point for the leadscore command."""

import json
import logging
import click
from pathlib import Path
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from typing import Optional
from datetime import datetime

from ..analytics import summarize
from ..bulk import LeadFileError, LeadFileLoader
from ..config import ConfigurationError, IndustryConfigStore
from ..core.batch import score_batch
from ..core.engine import LeadScoringEngine
from ..core.settings import ScoringSettingsManager
from ..core.strategies import get_strategy

console = Console()

STATUS_COLORS = {"Hot": "red", "Warm": "yellow", "New": "blue", "Cold": "dim"}
FLAG_COLORS = {"missing": "yellow", "disqualifier": "red", "warning": "magenta"}


def get_store(config_path: Optional[str] = None) -> IndustryConfigStore:
    """Get the industry config store, from a file when one is given."""
    try:
        return IndustryConfigStore.from_file(config_path) if config_path else IndustryConfigStore.default()
    except ConfigurationError as e:
        raise click.ClickException(str(e))


def get_settings_manager(ctx: click.Context) -> ScoringSettingsManager:
    path = ctx.obj.get("settings_path") if ctx.obj else None
    try:
        return ScoringSettingsManager(Path(path) if path else None)
    except ConfigurationError as e:
        raise click.ClickException(str(e))


def load_leads(store: IndustryConfigStore, path: str, industry: str, sub_vertical: str) -> list:
    try:
        return LeadFileLoader(store).load(path, industry, sub_vertical)
    except LeadFileError as e:
        raise click.ClickException(str(e))


def check_pair(store: IndustryConfigStore, industry: str, sub_vertical: str):
    """Warn when a pair has no strategy; leads will get the fallback score."""
    if get_strategy(industry, sub_vertical) is None:
        known = store.get_sub_vertical(industry, sub_vertical) is not None
        reason = "has no scoring strategy" if known else "is not configured"
        console.print(
            f"[yellow]{industry}/{sub_vertical} {reason}; "
            f"leads keep their existing score or get the fallback score.[/yellow]"
        )


@click.group()
@click.version_option(version="1.0.0", prog_name="leadscore")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--settings-path", type=click.Path(dir_okay=False), envvar="LEADSCORE_SETTINGS",
              help="Custom scoring settings file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings_path: Optional[str]):
    """Vertical Lead Engine - multi-industry lead scoring.

    \b
    Quick Start:
      leadscore industries                                   # Browse sub-verticals
      leadscore columns healthcare medicare                  # Field schema
      leadscore score healthcare medicare -p leads.csv       # Rank leads
      leadscore explain healthcare medicare -p leads.csv -i 0
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["settings_path"] = settings_path


# ============================================================================
# CONFIGURATION
# ============================================================================

@cli.command()
@click.option("--config", "config_path", type=click.Path(exists=True), help="Custom industry config (JSON)")
def industries(config_path: Optional[str]):
    """List industries and their sub-verticals."""
    store = get_store(config_path)

    table = Table(title="Industries")
    table.add_column("Industry", style="bold")
    table.add_column("Sub-vertical", style="cyan")
    table.add_column("Name")
    table.add_column("Fields", justify="right")
    table.add_column("Dimensions", justify="right")
    table.add_column("Strategy", justify="center")

    for entry in store.all_sub_verticals():
        sv = entry["sub_vertical"]
        strategy = get_strategy(entry["industry_id"], sv.id)
        table.add_row(
            entry["industry_id"],
            sv.id,
            sv.name,
            str(len(sv.columns)),
            str(len(strategy.dimensions)) if strategy else "-",
            "[green]yes[/green]" if strategy else "[dim]fallback[/dim]",
        )

    console.print(table)


@cli.command()
@click.argument("industry")
@click.argument("sub_vertical")
@click.option("--config", "config_path", type=click.Path(exists=True), help="Custom industry config (JSON)")
def columns(industry: str, sub_vertical: str, config_path: Optional[str]):
    """Show the lead fields for a sub-vertical."""
    store = get_store(config_path)
    sv = store.get_sub_vertical(industry, sub_vertical)
    if sv is None:
        raise click.ClickException(f"Unknown sub-vertical {industry}/{sub_vertical}")

    table = Table(title=f"{sv.name} fields")
    table.add_column("Key", style="cyan")
    table.add_column("Label")
    table.add_column("Type")
    table.add_column("Criteria", justify="center")
    table.add_column("Options", max_width=50)

    required = set(sv.qualification.required_fields)
    preferred = set(sv.qualification.preferred_fields)
    for col in store.columns_for(industry, sub_vertical):
        table.add_row(
            col.key,
            col.label,
            col.type + (" [dim](system)[/dim]" if col.system else ""),
            "[green]required[/green]" if col.key in required else
            "[yellow]preferred[/yellow]" if col.key in preferred else "",
            ", ".join(col.options),
        )

    console.print(table)
    if sv.qualification.disqualifiers:
        console.print(Panel.fit(
            "\n".join(f"• {d}" for d in sv.qualification.disqualifiers),
            title="Disqualifiers"
        ))


# ============================================================================
# SCORING
# ============================================================================

@cli.command()
@click.argument("industry")
@click.argument("sub_vertical")
@click.option("--path", "-p", type=click.Path(exists=True, dir_okay=False), required=True,
              help="Lead file (.json or .csv)")
@click.option("--date", "reference_date", type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Score as of this date (default: today)")
@click.option("--limit", "-n", default=20, help="Number of leads to show")
@click.option("--workers", "-w", type=click.IntRange(min=1), help="Scoring threads")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write scored leads to a JSON file")
@click.option("--config", "config_path", type=click.Path(exists=True), help="Custom industry config (JSON)")
@click.pass_context
def score(ctx: click.Context, industry: str, sub_vertical: str, path: str, reference_date: Optional[datetime],
          limit: int, workers: Optional[int], output: Optional[str], config_path: Optional[str]):
    """Score and rank the leads in a file.

    \b
    Examples:
      leadscore score healthcare medicare -p ./medicare.csv
      leadscore score energy end_customer_business -p leads.json --date 2024-12-01 -o ranked.json
    """
    store = get_store(config_path)
    settings = get_settings_manager(ctx).settings
    leads = load_leads(store, path, industry, sub_vertical)
    check_pair(store, industry, sub_vertical)

    if not leads:
        console.print("[yellow]No leads found in file.[/yellow]")
        return

    engine = LeadScoringEngine(config_store=store, settings=settings)
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console
    ) as progress:
        progress.add_task(f"Scoring {len(leads)} leads...", total=None)
        scored = score_batch(leads, industry, sub_vertical, reference_date=reference_date,
                             engine=engine, max_workers=workers)

    table = Table(title=f"Ranked leads ({len(scored)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID")
    table.add_column("Score", justify="right", style="bold")
    table.add_column("Grade", justify="center")
    table.add_column("Status", justify="center")
    table.add_column("Conv.", justify="right")
    table.add_column("Next action", max_width=30)
    table.add_column("Flags", max_width=30)

    for rank, lead in enumerate(scored[:limit], start=1):
        status = lead["recommendedStatus"]
        color = STATUS_COLORS.get(status, "")
        flags = lead["qualificationFlags"]
        table.add_row(
            str(rank),
            str(lead.get("id", rank)),
            str(lead["score"]),
            lead["grade"]["letter"],
            f"[{color}]{status}[/{color}]" if color else status,
            f"{lead['conversionProbability']}%",
            lead["nextBestAction"]["action"],
            ", ".join(f["field"] for f in flags),
        )

    console.print(table)

    summary = summarize(scored)
    boost = scored[0]["boost"]
    lines = [
        f"Total: [cyan]{summary.total}[/cyan]   Avg score: [cyan]{summary.avg_score}[/cyan]   "
        f"Avg conversion: [cyan]{summary.avg_conversion}%[/cyan]",
        "",
        f"  Excellent (80+):  [green]{summary.distribution['excellent']}[/green]",
        f"  Good (60-79):     [blue]{summary.distribution['good']}[/blue]",
        f"  Average (40-59):  [yellow]{summary.distribution['average']}[/yellow]",
        f"  Poor (<40):       [dim]{summary.distribution['poor']}[/dim]",
    ]
    if summary.top_dimensions:
        lines.append("")
        lines.append(f"Strongest dimensions: {', '.join(summary.top_dimensions)}")
    if boost["reasons"]:
        lines.append(f"Boost: +{boost['multiplier']:.0%} ({', '.join(boost['reasons'])})")
    console.print(Panel.fit("\n".join(lines), title=f"{industry}/{sub_vertical}"))

    if output:
        out_path = Path(output)
        with open(out_path, 'w', encoding='utf-8') as f:
            json.dump({"leads": scored, "analytics": summary.to_dict()}, f, indent=2, default=str)
        console.print(f"[green]✓ Wrote {len(scored)} scored leads to {out_path}[/green]")


@cli.command()
@click.argument("industry")
@click.argument("sub_vertical")
@click.option("--path", "-p", type=click.Path(exists=True, dir_okay=False), required=True,
              help="Lead file (.json or .csv)")
@click.option("--index", "-i", default=0, help="Position of the lead in the file")
@click.option("--date", "reference_date", type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Score as of this date (default: today)")
@click.option("--config", "config_path", type=click.Path(exists=True), help="Custom industry config (JSON)")
@click.pass_context
def explain(ctx: click.Context, industry: str, sub_vertical: str, path: str, index: int,
            reference_date: Optional[datetime], config_path: Optional[str]):
    """Explain the score of a single lead dimension by dimension."""
    store = get_store(config_path)
    settings = get_settings_manager(ctx).settings
    leads = load_leads(store, path, industry, sub_vertical)
    if not 0 <= index < len(leads):
        raise click.ClickException(f"Index {index} out of range (file has {len(leads)} leads)")
    check_pair(store, industry, sub_vertical)

    engine = LeadScoringEngine(config_store=store, settings=settings)
    lead = leads[index]
    result = engine.score(lead, industry, sub_vertical, reference_date)

    if result.dimensions:
        table = Table(title=f"Lead {lead.get('id', index)}")
        table.add_column("Dimension", style="cyan")
        table.add_column("Score", justify="right", style="bold")
        table.add_column("Weight", justify="right")
        table.add_column("Default", justify="right", style="dim")
        table.add_column("Contribution", justify="right")

        for dim in result.dimensions.values():
            table.add_row(
                dim.label,
                str(dim.score),
                f"{dim.weight:g}",
                f"{dim.default_weight:g}",
                f"{dim.score * dim.weight:.1f}",
            )
        console.print(table)

    color = STATUS_COLORS.get(result.recommended_status.value, "")
    info_lines = [
        f"[bold]Score:[/bold] {result.score} ({result.grade.letter} - {result.grade.label})",
        f"[bold]Raw composite:[/bold] {result.raw_score:.1f}",
        f"[bold]Status:[/bold] [{color}]{result.recommended_status.value}[/{color}]",
        f"[bold]Conversion:[/bold] {result.conversion_probability}%",
        f"[bold]Next action:[/bold] {result.next_best_action.action} ({result.next_best_action.priority})",
    ]
    if result.boost.reasons:
        info_lines.append(
            f"[bold]Boost:[/bold] +{result.boost.multiplier:.0%} ({', '.join(result.boost.reasons)})"
        )
    for flag in result.qualification_flags:
        flag_color = FLAG_COLORS.get(flag.type, "")
        info_lines.append(f"[{flag_color}]{flag.type}[/{flag_color}]: {flag.message}")

    console.print(Panel.fit("\n".join(info_lines), title=f"{industry}/{sub_vertical}"))


# ============================================================================
# SETTINGS
# ============================================================================

@cli.command()
@click.option("--fallback-score", type=click.IntRange(0, 100), help="Score for leads without a strategy")
@click.option("--conversion-cap", type=float, help="Upper bound on conversion probability (0-1]")
@click.option("--default-weight", type=float, help="Weight for dimensions without a default")
@click.option("--workers", type=int, help="Default batch scoring threads")
@click.option("--reset", is_flag=True, help="Restore default settings")
@click.pass_context
def settings(ctx: click.Context, fallback_score: Optional[int], conversion_cap: Optional[float],
             default_weight: Optional[float], workers: Optional[int], reset: bool):
    """Show or update scoring settings."""
    manager = get_settings_manager(ctx)

    try:
        if reset:
            manager.reset()
            console.print("[green]✓ Settings reset to defaults[/green]")
        elif any(v is not None for v in (fallback_score, conversion_cap, default_weight, workers)):
            manager.update(
                fallback_score=fallback_score,
                conversion_cap=conversion_cap,
                default_weight=default_weight,
                max_workers=workers,
            )
            console.print("[green]✓ Settings saved[/green]")
    except ConfigurationError as e:
        raise click.ClickException(str(e))

    current = manager.settings
    console.print(Panel.fit(
        f"[bold]Fallback score:[/bold] {current.fallback_score}\n"
        f"[bold]Conversion cap:[/bold] {current.conversion_cap}\n"
        f"[bold]Default weight:[/bold] {current.default_weight}\n"
        f"[bold]Batch workers:[/bold] {current.max_workers}\n"
        f"[bold]Updated:[/bold] {current.updated_at.strftime('%Y-%m-%d %H:%M')}\n\n"
        f"[dim]{manager.settings_path}[/dim]",
        title="Scoring Settings"
    ))


if __name__ == "__main__":
    cli()
