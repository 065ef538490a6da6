import logging
import sys

import typer

from hbasectl.commands import pre_upgrade
from hbasectl.config import Config
from hbasectl.logging import setup_logging

app = typer.Typer()

# Global debug flag
debug_mode = False

# Add all command groups
app.add_typer(pre_upgrade.app, name="pre-upgrade")


# Global options callback
@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """HBaseCTL - HBase Cluster Administration CLI."""
    global debug_mode
    debug_mode = debug
    setup_logging(debug)
    if debug:
        logging.debug("Debug mode enabled")
        logging.debug(f"Configuration: {Config.as_dict()}")


def run():
    try:
        app()
    except Exception as e:
        if debug_mode:
            logging.exception(f"Unhandled exception: {e}")
        else:
            logging.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
