import logging
from typing import List

import click

from autoclose.config import settings
from autoclose.errors import WorkFailedError
from autoclose.files import copy_file
from autoclose.manager import ResourceManager
from autoclose.report import ScopeReport
from autoclose.scope import run_scoped
from autoclose.sql import Connection


CHAIN = ("connection", "statement", "result")


def demo_work(rows: int, fail_work: bool, fail_release: List[str], journal: List[str]):
    def work(rm: ResourceManager) -> int:
        connection = rm.register(Connection.open(
            settings.DEMO_DB, journal=journal, fail_on_close="connection" in fail_release
        ))
        connection.execute("CREATE TABLE IF NOT EXISTS item (id INTEGER PRIMARY KEY, name TEXT)")
        for i in range(rows):
            connection.execute("INSERT INTO item (name) VALUES (?)", f"item-{i}")
        statement = rm.register(connection.prepare(
            "SELECT id, name FROM item", fail_on_close="statement" in fail_release
        ))
        result = rm.register(statement.execute(fail_on_close="result" in fail_release))
        count = len(result.fetchall())
        if fail_work:
            raise WorkFailedError(f"Work failed after reading {count} rows")
        return count

    return work


@click.group()
@click.pass_context
@click.option("--log-level", default=None, help="Overrides LOG_LEVEL from settings")
def cli(ctx, log_level):
    logging.basicConfig(level=(log_level or settings.LOG_LEVEL).upper())


@cli.command()
@click.pass_context
@click.option("--rows", default=3, show_default=True)
@click.option("--fail-work/--no-fail-work", default=False)
@click.option("--fail-release", multiple=True, type=click.Choice(CHAIN))
@click.option("--json/--no-json", "as_json", default=False)
def demo(ctx, rows, fail_work, fail_release, as_json):
    """Open a connection, a statement and a result set in one scope."""
    journal: List[str] = []
    outcome = run_scoped(demo_work(rows, fail_work, list(fail_release), journal))
    report = ScopeReport.create(outcome, released=journal)
    if as_json:
        click.echo(report.model_dump_json(indent=2))
    else:
        click.echo(f"released: {', '.join(report.released)}")
        if report.ok:
            click.echo(f"value: {report.value}")
        else:
            click.echo(f"error: {report.error.type}: {report.error.message}")
            for e in report.suppressed:
                click.echo(f"  suppressed: {e.type}: {e.message}")
    if not report.ok:
        ctx.exit(1)


@cli.command()
@click.pass_context
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.argument("dest", type=click.Path(dir_okay=False))
def copy(ctx, source, dest):
    total = copy_file(source, dest)
    logging.info("[COPY] Copied %d bytes from %s to %s", total, source, dest)
    click.echo(total)


if __name__ == "__main__":
    cli(obj={})
