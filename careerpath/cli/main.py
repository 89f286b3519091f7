"""CLI interface for careerpath using Typer."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.config.loader import load_config
from ..core.engine.catalog import CatalogError, RuleCatalog, load_catalog
from ..core.engine.evaluator import RecommendationEngine
from ..core.models.enums import EducationLevel, InterestArea, Location, Skill, Timeline, WizardStage
from ..core.models.recommendation import Recommendation
from ..core.wizard.collector import ProfileCollector
from ..core.wizard.guards import MISSING_FIELD
from ..observability.logger import get_logger, setup_logging

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="careerpath",
    help="Guided career profiling wizard with rule-based recommendations",
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Extra YAML config merged over the defaults"),
    ] = None,
    log_level: Annotated[str | None, typer.Option("--log-level", help="Override logging level")] = None,
    log_format: Annotated[
        str | None, typer.Option("--log-format", help="Log output format (json or console)")
    ] = None,
):
    """Load configuration and set up logging for every command."""
    try:
        config = load_config(config_file=config_file)
    except (OSError, yaml.YAMLError) as e:
        console.print(f"[red]! Error loading config:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    log_cfg = config.get("logging") or {}
    setup_logging(
        log_level=log_level or log_cfg.get("level", "WARNING"),
        log_format=log_format or log_cfg.get("format", "json"),
        log_file=log_cfg.get("file"),
    )
    ctx.obj = {"config": config}


def _get_catalog(ctx: typer.Context, catalog_file: Path | None) -> RuleCatalog:
    """Resolve the rule catalog from the option or config, exiting on a bad file."""
    config = (ctx.obj or {}).get("config", {})
    path = catalog_file or config.get("engine", {}).get("catalog_path")
    try:
        return load_catalog(path)
    except CatalogError as e:
        console.print(f"[red]! Error loading catalog:[/red] {e}")
        raise typer.Exit(code=1)


def _render_recommendations(recommendations: list[Recommendation]) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Rank", style="dim", width=6)
    table.add_column("Career")
    table.add_column("Match", justify="right")
    table.add_column("Salary Range")
    table.add_column("Job Growth")

    for rank, rec in enumerate(recommendations, start=1):
        table.add_row(
            str(rank),
            rec.label,
            f"{rec.match_score}%",
            rec.compensation_band,
            rec.growth_outlook,
        )
    console.print(table)

    for rec in recommendations:
        console.print(f"\n[bold]{escape(rec.label)}[/bold] [green]({rec.match_score}% match)[/green]")
        console.print(f"[dim]{escape(rec.rationale)}[/dim]")
        console.print("[bold]Next Steps:[/bold]")
        for step in rec.action_steps:
            console.print(f"  • {escape(step)}")
        console.print(f"[bold]Recommended Training:[/bold] {escape(', '.join(rec.training_paths))}")


def _result_payload(collector: ProfileCollector) -> dict[str, Any]:
    state = collector.state
    return {
        "profile": state.profile.model_dump(mode="json"),
        "recommendations": [rec.model_dump(mode="json") for rec in state.recommendations],
    }


def _save_output(output_file: Path, payload: dict[str, Any]) -> None:
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        console.print(f"\n[green]Output saved to:[/green] {output_file}")
    except (IOError, TypeError) as e:
        console.print(f"\n[red]! Error saving output:[/red] {e}")


def _exit_blocked(collector: ProfileCollector) -> None:
    stage = collector.stage
    console.print(
        f"[red]! Error:[/red] cannot continue past {stage.title}: "
        f"missing {MISSING_FIELD[stage]}"
    )
    raise typer.Exit(code=1)


# ----------------------------------------------------------------------
# Interactive wizard
# ----------------------------------------------------------------------


def _render_header(collector: ProfileCollector) -> None:
    steps = " > ".join(
        f"[bold]{stage.value}[/bold]" if stage is collector.stage else f"[dim]{stage.value}[/dim]"
        for stage in WizardStage
    )
    console.print(f"\n{steps}  [dim]({collector.progress:.0f}%)[/dim]")
    console.print(f"[bold blue]{collector.stage_title}[/bold blue]")
    console.print(f"[dim]{collector.stage_description}[/dim]")


def _choose(prompt: str, options: list[tuple[Any, str]], optional: bool = False) -> Any:
    """Print a numbered menu and return the chosen value (None when skipped)."""
    for idx, (_, label) in enumerate(options, start=1):
        console.print(f"  {idx:>2}. {label}")
    hint = " (blank to skip)" if optional else ""
    while True:
        raw = typer.prompt(f"{prompt}{hint}", default="" if optional else None, show_default=False)
        raw = raw.strip()
        if optional and not raw:
            return None
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1][0]
        console.print(f"[yellow]Enter a number between 1 and {len(options)}[/yellow]")


def _education_stage(collector: ProfileCollector) -> None:
    level = _choose(
        "Highest educational qualification",
        [(level, level.value) for level in EducationLevel],
    )
    collector.set_education(level)
    collector.advance()


def _skills_stage(collector: ProfileCollector) -> None:
    skills = list(Skill)
    while True:
        for idx, skill in enumerate(skills, start=1):
            mark = "x" if collector.profile.has_skill(skill) else " "
            console.print(f"  {idx:>2}. \\[{mark}] {skill.value}")

        actions = "numbers to toggle, 'b' back"
        if collector.can_advance:
            actions += ", 'c' continue"
        raw = typer.prompt(f"Select your skills ({actions})").strip().lower()

        if raw == "b":
            collector.back()
            return
        if raw == "c":
            if collector.can_advance:
                collector.advance()
                return
            console.print("[yellow]Select at least one skill to continue[/yellow]")
            continue

        for token in raw.replace(",", " ").split():
            if token.isdigit() and 1 <= int(token) <= len(skills):
                collector.toggle_skill(skills[int(token) - 1])
            else:
                console.print(f"[yellow]Ignoring '{token}'[/yellow]")


def _preferences_stage(collector: ProfileCollector) -> None:
    collector.set_interest(
        _choose("Career interest area", [(area, area.value) for area in InterestArea])
    )
    collector.set_timeline(
        _choose("Job search timeline", [(t, t.label) for t in Timeline])
    )
    location = _choose(
        "Preferred work location", [(loc, loc.label) for loc in Location], optional=True
    )
    if location is not None:
        collector.set_location(location)

    if typer.confirm("Get recommendations?", default=True):
        collector.submit()
    else:
        collector.back()


@app.command()
def wizard(
    ctx: typer.Context,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Path to save recommendations JSON"),
    ] = None,
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="YAML rule catalog to use instead of the built-in one"),
    ] = None,
):
    """Walk through the career guidance wizard interactively."""
    collector = ProfileCollector(RecommendationEngine(_get_catalog(ctx, catalog_file)))
    console.print("\n[bold blue]Career Guidance Assistant[/bold blue]")

    stage_handlers = {
        WizardStage.EDUCATION: _education_stage,
        WizardStage.SKILLS: _skills_stage,
        WizardStage.PREFERENCES: _preferences_stage,
    }

    while True:
        while collector.stage is not WizardStage.RESULTS:
            _render_header(collector)
            stage_handlers[collector.stage](collector)

        _render_header(collector)
        _render_recommendations(collector.recommendations)

        if output_file:
            _save_output(output_file, _result_payload(collector))

        if not typer.confirm("\nStart over?", default=False):
            break
        collector.reset()


# ----------------------------------------------------------------------
# Non-interactive commands
# ----------------------------------------------------------------------


@app.command()
def recommend(
    ctx: typer.Context,
    education: Annotated[
        EducationLevel | None, typer.Option("--education", "-e", help="Highest qualification")
    ] = None,
    skills: Annotated[
        list[Skill] | None, typer.Option("--skill", "-s", help="Skill (repeat for several)")
    ] = None,
    interest: Annotated[
        InterestArea | None, typer.Option("--interest", "-i", help="Career interest area")
    ] = None,
    timeline: Annotated[
        Timeline | None, typer.Option("--timeline", "-t", help="Job search timeline")
    ] = None,
    location: Annotated[
        Location | None, typer.Option("--location", "-l", help="Preferred work location")
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Path to save recommendations JSON"),
    ] = None,
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="YAML rule catalog to use instead of the built-in one"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of tables")] = False,
):
    """Run the wizard non-interactively from command-line answers."""
    collector = ProfileCollector(RecommendationEngine(_get_catalog(ctx, catalog_file)))

    if education is not None:
        collector.set_education(education)
    collector.advance()
    if collector.stage is WizardStage.EDUCATION:
        _exit_blocked(collector)

    for skill in dict.fromkeys(skills or []):
        collector.toggle_skill(skill)
    collector.advance()
    if collector.stage is WizardStage.SKILLS:
        _exit_blocked(collector)

    if interest is not None:
        collector.set_interest(interest)
    if timeline is not None:
        collector.set_timeline(timeline)
    if location is not None:
        collector.set_location(location)
    collector.submit()
    if collector.stage is WizardStage.PREFERENCES:
        _exit_blocked(collector)

    payload = _result_payload(collector)
    if as_json:
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        _render_recommendations(collector.recommendations)

    if output_file:
        _save_output(output_file, payload)


@app.command()
def catalog(
    ctx: typer.Context,
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="YAML rule catalog to show instead of the built-in one"),
    ] = None,
):
    """Show the recommendation rules in evaluation order."""
    rules = _get_catalog(ctx, catalog_file)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Key")
    table.add_column("Career")
    table.add_column("Score", justify="right")
    table.add_column("Skills trigger")
    table.add_column("Interest trigger")

    for idx, rule in enumerate(rules, start=1):
        triggers = rule.describe_triggers()
        table.add_row(
            str(idx),
            rule.key,
            rule.label,
            str(rule.match_score),
            ", ".join(triggers["skills"]) or "-",
            ", ".join(triggers["interests"]) or "-",
        )
    table.add_row("", rules.fallback.key, rules.fallback.label, str(rules.fallback.match_score), "-", "-")

    console.print(table)


@app.command()
def options():
    """List the accepted values for each profile field."""
    sections = {
        "Education (--education)": [(e.value, e.value) for e in EducationLevel],
        "Skills (--skill)": [(s.value, s.value) for s in Skill],
        "Interest areas (--interest)": [(i.value, i.value) for i in InterestArea],
        "Timeline (--timeline)": [(t.value, t.label) for t in Timeline],
        "Location (--location)": [(loc.value, loc.label) for loc in Location],
    }
    for title, values in sections.items():
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Value")
        table.add_column("Label")
        for value, label in values:
            table.add_row(value, label)
        console.print(table)


if __name__ == "__main__":
    app()
