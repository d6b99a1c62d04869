#!/usr/bin/env python3
"""
Command line entry point for the Curve S / EVM engine.

Usage:
    curve-s migrate
    curve-s show PROJECT_ID [--json]
    curve-s export PROJECT_ID curve_s.xlsx

Commands:
    migrate   Upgrade the database schema to the latest revision
    show      Print the weekly PV/EV curve and EVM indices of a project
    export    Write the curve and indices to an Excel workbook
"""
from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Iterator

import click
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.exceptions import DomainError
from core.reporting.api import generate_curve_s_excel
from core.services.curve_s import CurveSResult, interpret_evm
from infra.logging_config import setup_logging
from infra.path import DB_URL_ENV, database_url
from infra.services import ServiceGraph, build_service_graph
from infra.tracing import bind_trace_id
from infra.version import get_app_version

logger = logging.getLogger(__name__)


@contextmanager
def _service_graph(db_url: str) -> Iterator[ServiceGraph]:
    engine = create_engine(db_url, future=True)
    session: Session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield build_service_graph(session)
    finally:
        session.close()
        engine.dispose()


def _fmt(value: float | None) -> str:
    return "N/A" if value is None else f"{value:,.2f}"


def _echo_table(result: CurveSResult) -> None:
    project = result.project
    click.echo(f"Project {project.code} - {project.name}")
    click.echo(f"Schedule: {result.schedule_id or '-'} (baseline: {'yes' if result.has_baseline else 'no'})")
    click.echo("")
    click.echo(f"{'Week':<12}{'Start':<12}{'PV':>14}{'EV':>14}{'PV cum.':>16}{'EV cum.':>16}")
    for week in result.weeks:
        click.echo(
            f"{week.label:<12}{week.week_start.isoformat():<12}"
            f"{week.pv:>14,.2f}{week.ev:>14,.2f}{week.pv_cumulative:>16,.2f}{week.ev_cumulative:>16,.2f}"
        )
    evm = result.evm
    click.echo("")
    click.echo(f"BAC {_fmt(result.bac)} | PV {_fmt(evm.pv_total)} | EV {_fmt(evm.ev_total)}")
    click.echo(f"SV {_fmt(evm.sv)} | SPI {_fmt(evm.spi)} | CV {_fmt(evm.cv)} | CPI {_fmt(evm.cpi)}")
    click.echo(interpret_evm(evm))
    for note in result.notes:
        click.echo(f"Note: {note}")


@click.group()
@click.version_option(version=get_app_version())
@click.option(
    "--db-url",
    envvar=DB_URL_ENV,
    default=None,
    help="SQLAlchemy database URL (defaults to the per-user SQLite file).",
)
@click.option("--log-level", default=None, help="Root log level (INFO, DEBUG, ...).")
@click.pass_context
def cli(ctx: click.Context, db_url: str | None, log_level: str | None) -> None:
    """Planned vs. billed S-curves and earned-value indices per project."""
    setup_logging(level=log_level)
    ctx.ensure_object(dict)
    ctx.obj["db_url"] = db_url or database_url()


@cli.command()
@click.pass_context
def migrate(ctx: click.Context) -> None:
    """Upgrade the database schema."""
    from infra.migrate import run_migrations

    run_migrations(ctx.obj["db_url"])
    click.echo("Database is up to date.")


@cli.command()
@click.argument("project_id")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def show(ctx: click.Context, project_id: str, as_json: bool) -> None:
    """Print the S-curve of PROJECT_ID."""
    with bind_trace_id() as trace_id, _service_graph(ctx.obj["db_url"]) as services:
        try:
            result = services.curve_s_service.get_curve_s(project_id)
        except DomainError as exc:
            logger.warning("curve-s show failed for %s: %s (%s)", project_id, exc, exc.code)
            raise click.ClickException(f"{exc} [{exc.code}]")
        logger.info("Rendered curve for project %s (trace %s)", project_id, trace_id)

    if as_json:
        click.echo(json.dumps(result.as_dict(), indent=2))
    else:
        _echo_table(result)


@cli.command()
@click.argument("project_id")
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@click.pass_context
def export(ctx: click.Context, project_id: str, output: str) -> None:
    """Write the S-curve of PROJECT_ID to an Excel workbook."""
    with bind_trace_id(), _service_graph(ctx.obj["db_url"]) as services:
        try:
            path = generate_curve_s_excel(services.curve_s_service, project_id, output)
        except DomainError as exc:
            logger.warning("curve-s export failed for %s: %s (%s)", project_id, exc, exc.code)
            raise click.ClickException(f"{exc} [{exc.code}]")
    click.echo(f"Curve S written to {path}")


if __name__ == "__main__":
    cli()
