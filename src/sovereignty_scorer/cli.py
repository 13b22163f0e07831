"""CLI for the EU Cloud Sovereignty assessment.

Provides command-line access to the catalogs, the composite scoring engine,
the report exporters and the AI advisory gateway.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .app_logging import setup_logging
from .assessment_file import AssessmentFileError, load_assessment_file, save_assessment_file
from .catalog import catalog_for, compare_catalogs, supported_languages, ui_strings, validate_catalog
from .config import get_config, save_default_config
from .report import ReportLabels, format_report, report_data
from .schema import Language, Objective, SealDefinition
from .scorer import average_maturity, score_breakdown, seal_for
from .state import AssessmentState

console = Console()

LANGUAGE_CHOICE = click.Choice([lang.value for lang in Language], case_sensitive=False)


def _resolve_language(lang: Optional[str], fallback: Optional[Language] = None) -> Language:
    if lang:
        return Language.from_string(lang)
    if fallback is not None:
        return fallback
    return get_config().ui.default_language


@click.group()
@click.version_option(version=__version__, prog_name="sovereignty-scorer")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """EU Cloud Sovereignty Assessment.

    Scores cloud solutions against the eight objectives of the European
    Commission's Cloud Sovereignty Framework and reports SEAL levels.
    """
    setup_logging(level="DEBUG" if verbose else "WARNING", dev_mode=True)


@main.command("catalog")
@click.option("--lang", "-l", type=LANGUAGE_CHOICE, help="Catalog language (es, en)")
def catalog_cmd(lang: Optional[str]):
    """Show the objectives and SEAL levels of a catalog."""
    language = _resolve_language(lang)
    objectives, seal_definitions = catalog_for(language)
    ui = ui_strings(language)

    console.print(f"\n[bold blue]{ui.title}[/bold blue]")
    console.print(f"{ui.subtitle}\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", width=6)
    table.add_column(ui.objective)
    table.add_column("%", justify="right", width=5)
    table.add_column(ui.factors, justify="right", width=8)

    for obj in objectives:
        table.add_row(obj.id, obj.name, f"{obj.weight:.0%}", str(len(obj.factors)))
    console.print(table)

    seal_table = Table(show_header=True, header_style="bold", title=ui.seal_guide)
    seal_table.add_column("SEAL", width=6)
    seal_table.add_column(ui.seal_level)
    seal_table.add_column("")
    for seal in seal_definitions:
        seal_table.add_row(str(seal.level), seal.name, seal.description)
    console.print(seal_table)


@main.command("validate")
def validate_cmd():
    """Run integrity checks on every language catalog.

    Exits with status 1 when any catalog has issues.
    """
    all_valid = True
    reference, _ = catalog_for(Language.default())

    for language in supported_languages():
        objectives, seal_definitions = catalog_for(language)
        issues = validate_catalog(objectives, seal_definitions)
        issues.extend(compare_catalogs(reference, objectives))
        if issues:
            all_valid = False
            console.print(f"[red]✗ Catalog invalid: {language.value}[/red]")
            for issue in issues:
                console.print(f"  - {issue}")
        else:
            console.print(f"[green]✓ Catalog valid: {language.value}[/green]")

    sys.exit(0 if all_valid else 1)


@main.command("score")
@click.argument("assessment_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--lang", "-l", type=LANGUAGE_CHOICE, help="Report language (default: file language)")
@click.option("--report", "-r", "report_path", type=click.Path(dir_okay=False), help="Write the text report to this file")
@click.option("--pdf", "pdf_path", type=click.Path(dir_okay=False), help="Write a PDF report to this file")
@click.option("--json-output", "-j", is_flag=True, help="Output raw JSON instead of formatted text")
def score_cmd(
    assessment_file: str,
    lang: Optional[str],
    report_path: Optional[str],
    pdf_path: Optional[str],
    json_output: bool,
):
    """Compute the composite sovereignty score of an assessment file.

    Examples:
        sovereignty-scorer score assessment.yaml
        sovereignty-scorer score assessment.json --lang en --report report.txt
        sovereignty-scorer score assessment.yaml --pdf report.pdf
    """
    try:
        data = load_assessment_file(Path(assessment_file))
    except AssessmentFileError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    language = _resolve_language(lang, data.language)
    objectives, seal_definitions = catalog_for(language)
    ui = ui_strings(language)

    state = AssessmentState(objectives)
    state.load(data.scores, data.notes)
    snapshot = state.get_snapshot()

    if json_output:
        payload = report_data(language, objectives, snapshot.scores, snapshot.notes, seal_definitions)
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        display_assessment(state, seal_definitions, language)

    placeholder = get_config().report.empty_note_placeholder
    labels = ReportLabels.from_ui(ui)

    try:
        if report_path:
            text = format_report(
                ui.title,
                ui.subtitle,
                state.composite_score(),
                objectives,
                snapshot.scores,
                snapshot.notes,
                seal_definitions,
                labels=labels,
                placeholder=placeholder,
            )
            Path(report_path).write_text(text, encoding='utf-8')
            if not json_output:
                console.print(f"\n[green]Text report saved to {report_path}[/green]")

        if pdf_path:
            from .pdf_report import generate_pdf_report

            pdf_bytes = generate_pdf_report(
                ui.title,
                ui.subtitle,
                objectives,
                snapshot.scores,
                snapshot.notes,
                seal_definitions,
                labels=labels,
                placeholder=placeholder,
            )
            Path(pdf_path).write_bytes(pdf_bytes)
            if not json_output:
                console.print(f"[green]PDF report saved to {pdf_path}[/green]")
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command("advise")
@click.argument("objective_id")
@click.argument("assessment_file", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--evidence", "-e", help="Evidence text (overrides the note in the assessment file)")
@click.option("--lang", "-l", type=LANGUAGE_CHOICE, help="Response language")
def advise_cmd(
    objective_id: str,
    assessment_file: Optional[str],
    evidence: Optional[str],
    lang: Optional[str],
):
    """Ask the AI advisor to analyze the evidence for one objective.

    Examples:
        sovereignty-scorer advise SOV-3 --evidence "Customer-held keys in an EU HSM"
        sovereignty-scorer advise SOV-5 assessment.yaml --lang en
    """
    from sovereignty_advisor.gateway import AdvisoryGateway

    file_language = None
    notes: dict[str, str] = {}
    if assessment_file:
        try:
            data = load_assessment_file(Path(assessment_file))
        except AssessmentFileError as e:
            console.print(f"[red]Error: {e}[/red]")
            sys.exit(1)
        file_language = data.language
        notes = data.notes

    language = _resolve_language(lang, file_language)
    objectives, _ = catalog_for(language)
    ui = ui_strings(language)

    objective = _find_objective(objectives, objective_id)
    if objective is None:
        console.print(f"[red]Unknown objective: {objective_id}[/red]")
        sys.exit(1)

    evidence_text = evidence if evidence is not None else notes.get(objective.id, "")
    if not evidence_text.strip():
        console.print("[red]No evidence given. Use --evidence or an assessment file with a note.[/red]")
        sys.exit(1)

    gateway = AdvisoryGateway()
    with console.status(ui.ai_analyzing):
        outcome = asyncio.run(gateway.get_advice(objective.name, objective.factors, evidence_text, language.value))

    if not outcome.ok:
        console.print(f"[red]{outcome.error}[/red]")
        sys.exit(1)

    console.print(Panel(outcome.value, title=f"{ui.ai_advisor}: [{objective.id}] {objective.name}", border_style="blue"))


@main.command("auto-assess")
@click.argument("description_file", type=click.File("r", encoding="utf-8"))
@click.option("--lang", "-l", type=LANGUAGE_CHOICE, help="Assessment language")
@click.option("--out", "-o", type=click.Path(dir_okay=False), help="Save the proposed assessment (JSON or YAML)")
def auto_assess_cmd(description_file, lang: Optional[str], out: Optional[str]):
    """Propose SEAL levels for every objective from a solution description.

    Use '-' to read the description from stdin.

    Examples:
        sovereignty-scorer auto-assess solution.txt --out assessment.yaml
        cat solution.txt | sovereignty-scorer auto-assess - --lang en
    """
    from sovereignty_advisor.gateway import AdvisoryGateway

    description = description_file.read().strip()
    if not description:
        console.print("[red]The solution description is empty.[/red]")
        sys.exit(1)

    language = _resolve_language(lang)
    objectives, seal_definitions = catalog_for(language)
    ui = ui_strings(language)

    gateway = AdvisoryGateway()
    with console.status(ui.ai_consulting):
        outcome = asyncio.run(gateway.auto_assess(description, language.value))

    if not outcome.ok:
        console.print(f"[red]{outcome.error}[/red]")
        sys.exit(1)

    state = AssessmentState(objectives)
    updated = state.apply_auto_assessment(outcome.value)
    console.print(f"[green]{ui.auto_assess_done.format(count=len(updated))}[/green]\n")
    display_assessment(state, seal_definitions, language, show_notes=True)

    if out:
        try:
            save_assessment_file(Path(out), state.get_snapshot(), language)
        except OSError as e:
            console.print(f"[red]Error: {e}[/red]")
            sys.exit(1)
        console.print(f"\n[green]Assessment saved to {out}[/green]")


@main.command("init-config")
@click.argument("path", required=False, default="sovereignty-config.yaml", type=click.Path(dir_okay=False))
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing file")
def init_config_cmd(path: str, force: bool):
    """Write the default configuration to a YAML file."""
    target = Path(path)
    if target.exists() and not force:
        console.print(f"[yellow]{target} already exists. Use --force to overwrite.[/yellow]")
        sys.exit(1)
    save_default_config(target)
    console.print(f"[green]Configuration written to {target}[/green]")


def _find_objective(objectives: tuple[Objective, ...], objective_id: str) -> Optional[Objective]:
    wanted = objective_id.strip().upper()
    for obj in objectives:
        if obj.id == wanted:
            return obj
    return None


def display_assessment(
    state: AssessmentState,
    seal_definitions: tuple[SealDefinition, ...],
    language: Language,
    show_notes: bool = False,
):
    """Display an assessment as a rich table followed by the composite score."""
    ui = ui_strings(language)
    snapshot = state.get_snapshot()

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", width=6)
    table.add_column(ui.objective)
    table.add_column("SEAL", justify="center", width=6)
    table.add_column(ui.seal_level)
    table.add_column("%", justify="right", width=5)
    table.add_column("+", justify="right", width=6)
    if show_notes:
        table.add_column(ui.evidence, max_width=50)

    for item in score_breakdown(snapshot.scores, state.objectives):
        row = [
            item.objective_id,
            item.name,
            str(item.score),
            seal_for(item.score, seal_definitions).name,
            f"{item.weight:.0%}",
            f"{item.contribution:.1f}",
        ]
        if show_notes:
            row.append(snapshot.notes.get(item.objective_id, ""))
        table.add_row(*row)

    console.print(table)

    score = state.composite_score()
    color = "green" if score >= 75 else "yellow" if score >= 40 else "red"
    maturity = average_maturity(snapshot.scores, state.objectives)
    console.print(f"\n[bold]{ui.composite_score}:[/bold] [{color}]{score:.1f}%[/{color}]")
    console.print(f"[bold]{ui.avg_maturity}:[/bold] {maturity:.2f}")


if __name__ == "__main__":
    main()
