import logging
from functools import partial
from typing import Optional

import typer

from hbasectl.config import Config
from hbasectl.modules.hbase import HBaseAdmin, HBaseError
from hbasectl.modules.pre_upgrade import all_passed, run_validations, select_validations

app = typer.Typer()

logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def pre_upgrade(
    run_all: bool = typer.Option(False, "--all", help="Run all pre-upgrade validations"),
    validate_dbe: bool = typer.Option(
        False, "--validateDBE", help="Validate DataBlockEncoding are compatible on the cluster"
    ),
    rest_url: Optional[str] = typer.Option(None, "--rest-url", help="HBase REST gateway URL"),
    timeout: Optional[int] = typer.Option(None, help="Request timeout in seconds"),
):
    """Check that the cluster can be upgraded from HBase 1.x to 2.0."""
    names = select_validations(run_all, ["validateDBE"] if validate_dbe else [])
    if not names:
        logger.warning("No validations requested; use --all or --validateDBE")
        raise typer.Exit(code=0)

    try:
        Config.validate(url=rest_url or "")
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    admin_factory = partial(HBaseAdmin, url=rest_url, timeout=timeout)
    try:
        results = run_validations(names, admin_factory)
    except HBaseError as e:
        logger.error(f"Pre-upgrade validation aborted: {e}")
        raise typer.Exit(code=1)

    if not all_passed(results):
        failed = ", ".join(r.name for r in results if not r.compatible)
        typer.echo(f"❌ Pre-upgrade validation failed: {failed}")
        raise typer.Exit(code=1)
    typer.echo("✅ All requested pre-upgrade validations passed.")
