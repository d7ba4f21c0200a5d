# ABOUTME: Provides a CLI that reports knowledge gaps from quiz history and suggests stories.
# ABOUTME: Wraps the gap analyzer and story recommender with rich tables for operators.

from pathlib import Path
from typing import List, Optional

import pandas as pd
import typer
from rich.console import Console
from rich.table import Table

from src.common.config import load_config
from src.common.features import subject_performance_from_frame
from src.common.schemas import StoryPreferences
from src.knowledge_gaps.analyzer import KnowledgeGapAnalyzer, gap_priority, gaps_to_frame
from src.story.recommendation import StoryRecommendationService

console = Console()
app = typer.Typer(help="Diagnose knowledge gaps from quiz history and recommend reading sessions.")

PRIORITY_COLORS = {"low": "yellow", "medium": "orange3", "high": "red", "critical": "bold red"}


def _read_table(path: Path) -> pd.DataFrame:
    if path.suffix == ".parquet":
        return pd.read_parquet(path)
    return pd.read_csv(path)


def _write_table(df: pd.DataFrame, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".parquet":
        df.to_parquet(path, index=False)
    else:
        df.to_csv(path, index=False)


def _load_config_or_exit(config: Optional[Path]):
    if config is not None and not config.exists():
        console.print(f"[red]Missing config at {config}[/red]")
        raise typer.Exit(code=1)
    try:
        return load_config(config)
    except ValueError as exc:
        console.print(f"[red]Invalid config: {exc}[/red]")
        raise typer.Exit(code=1)


@app.command()
def gaps(
    history: Path = typer.Option(..., "--history", help="Quiz history (.csv or .parquet) with subject and accuracy columns."),
    config: Optional[Path] = typer.Option(None, "--config", help="Insights config YAML; defaults apply when omitted."),
    output: Optional[Path] = typer.Option(None, "--output", help="Optional .csv or .parquet path for the gap report."),
) -> None:
    """
    Aggregate quiz history per subject and list the subjects that need practice.
    """
    cfg = _load_config_or_exit(config)
    if not history.exists():
        console.print(f"[red]Missing quiz history at {history}[/red]")
        raise typer.Exit(code=1)

    try:
        performance = subject_performance_from_frame(_read_table(history))
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    found = KnowledgeGapAnalyzer(cfg.knowledge_gaps).analyze(performance)
    console.rule("[bold blue]Knowledge Gaps[/bold blue]")
    console.print(f"[bold]Subjects analyzed:[/] {len(performance)}")

    if not found:
        console.print("[green]No knowledge gaps detected.[/green]")
    else:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Subject")
        table.add_column("Severity")
        table.add_column("Priority")
        table.add_column("Recommendation")
        for gap in found:
            priority = gap_priority(gap.severity)
            color = PRIORITY_COLORS[priority]
            table.add_row(gap.subject, f"{gap.severity:.2f}", f"[{color}]{priority}[/{color}]", gap.recommendation)
        console.print(table)

    if output is not None:
        _write_table(gaps_to_frame(found), output)
        console.print(f"[bold]Gap report saved to {output}[/bold]")


@app.command()
def story(
    topic: Optional[List[str]] = typer.Option(None, "--topic", help="Preferred topic; repeat in order of preference."),
    reading_level: int = typer.Option(0, "--reading-level", help="Reader's level; each level adds reading time."),
    session_minutes: int = typer.Option(..., "--session-minutes", help="Minutes available for the reading session."),
    config: Optional[Path] = typer.Option(None, "--config", help="Insights config YAML; defaults apply when omitted."),
) -> None:
    """
    Suggest a story theme and length for one reading session.
    """
    cfg = _load_config_or_exit(config)
    prefs = StoryPreferences(topics=topic or [], reading_level=reading_level, session_minutes=session_minutes)
    rec = StoryRecommendationService(cfg.story).recommend(prefs)

    console.print(f"[bold]Theme:[/] {rec.theme}")
    console.print(f"[bold]Suggested length:[/] {rec.suggested_length}s ({rec.suggested_length / 60:.1f} min)")


if __name__ == "__main__":
    app()
