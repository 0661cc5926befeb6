"""Command-line interface for syoj_py."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .client import JudgeClient
from .config import CredentialStore, Credentials, Settings
from .exceptions import NotFoundError, SyojError
from .utils import (
    DEFAULT_LANGUAGE,
    format_error,
    infer_language,
    make_logger,
    render_problem,
)


@dataclass
class AppContext:
    """Everything one command invocation needs."""

    settings: Settings
    store: CredentialStore
    logger: logging.Logger
    console: Console = field(default_factory=Console)

    @classmethod
    def create(cls, verbose: bool = False) -> "AppContext":
        logger = make_logger(verbose)
        return cls(
            settings=Settings.from_env(),
            store=CredentialStore(logger=logger),
            logger=logger,
        )

    def client(self, credentials: Optional[Credentials] = None) -> JudgeClient:
        return JudgeClient(credentials=credentials, settings=self.settings, logger=self.logger)


def fail(app: AppContext, message: str) -> None:
    """Report an error and end the command with exit status 1."""
    app.console.print(format_error(message), markup=True, highlight=False)
    sys.exit(1)


def load_credentials(app: AppContext) -> Credentials:
    """Load stored credentials, exiting with a login hint when unusable."""
    try:
        credentials = app.store.load()
    except NotFoundError as e:
        fail(app, f"{e}. Please login first.")
    except SyojError as e:
        fail(app, f"Failed to load credentials: {e}")

    if not credentials.is_valid():
        fail(app, "Saved credentials are incomplete. Please login first.")
    return credentials


@click.command()
@click.option(
    "-u",
    "--username",
    envvar="SYOJ_USERNAME",
    default="",
    help="Username for SYOJ login (defaults to SYOJ_USERNAME environment variable)",
)
@click.option(
    "-p",
    "--password",
    envvar="SYOJ_PASSWORD",
    default="",
    help="Password for SYOJ login (defaults to SYOJ_PASSWORD environment variable)",
)
@click.pass_obj
def login(app: AppContext, username: str, password: str):
    """Login to the SYOJ platform and save credentials."""
    if not username or not password:
        fail(
            app,
            "Username and password are required. "
            "Please provide them via flags or environment variables.",
        )

    try:
        with app.client() as client:
            credentials = client.authenticate(username, password)
        path = app.store.save(credentials)
    except SyojError as e:
        fail(app, f"Login failed: {e}")

    if not credentials.is_valid():
        app.logger.warning("The judge did not return a complete session; later commands may fail")
    app.logger.info("Credentials saved to %s", path)
    app.console.print(f"[green]Successfully logged in as {escape(username)}[/green]")


@click.command()
@click.pass_obj
def logout(app: AppContext):
    """Delete saved credentials."""
    try:
        path = app.store.delete()
    except SyojError as e:
        fail(app, f"Logout failed: {e}")

    app.console.print(f"[green]Removed {escape(str(path))}[/green]")


@click.command(name="show-problem")
@click.argument("problem_id")
@click.pass_obj
def show_problem(app: AppContext, problem_id: str):
    """Show details of a specific problem."""
    credentials = load_credentials(app)

    try:
        with app.client(credentials) as client:
            problem = client.fetch_problem(problem_id)
    except SyojError as e:
        fail(app, f"Failed to fetch problem: {e}")

    render_problem(app.console, problem)


@click.command()
@click.argument("problem_id")
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Input file containing source code (reads from stdin if not specified)",
)
@click.option("-l", "--language", default="", help="Programming language for submission")
@click.pass_obj
def submit(app: AppContext, problem_id: str, input_file: Optional[Path], language: str):
    """
    Submit solution code for a problem.

    Code is read from the file given with -i, or from standard input.

    \b
    Examples:
      syojctl submit I001 -i solution.cpp
      cat solution.cpp | syojctl submit I001
    """
    if input_file is not None:
        try:
            code = input_file.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            fail(app, f"Failed to read input file: {e}")

        if not language:
            language = infer_language(input_file) or ""
            if not language:
                language = DEFAULT_LANGUAGE
                app.logger.warning(
                    "Could not infer language from file extension, defaulting to %s",
                    DEFAULT_LANGUAGE,
                )
    else:
        app.logger.info("Reading code from standard input. Press Ctrl+D when finished.")
        code = click.get_text_stream("stdin").read()
        if not language:
            language = DEFAULT_LANGUAGE
            app.logger.info("No language specified, defaulting to %s", DEFAULT_LANGUAGE)

    if not code:
        fail(app, "No code provided for submission")

    credentials = load_credentials(app)

    try:
        with app.client(credentials) as client:
            response = client.submit(code, language, problem_id)
    except SyojError as e:
        fail(app, f"Failed to submit code: {e}")

    app.console.print(f"[green]Code submitted successfully![/green] {escape(response.message)}")


@click.command()
@click.pass_obj
def version(app: AppContext):
    """Show version information."""
    app.console.print(f"[bold cyan]syojctl[/bold cyan] version [green]{__version__}[/green]")
    app.console.print("CLI client for the SYOJ online judge")


def build_cli() -> click.Group:
    """Construct the command tree."""

    @click.group()
    @click.version_option(version=__version__, prog_name="syojctl")
    @click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug output")
    @click.pass_context
    def cli(ctx: click.Context, verbose: bool):
        """syojctl - CLI client for the SYOJ online judge."""
        if ctx.obj is None:
            try:
                ctx.obj = AppContext.create(verbose)
            except ValueError as e:
                raise click.UsageError(str(e))

    for command in (login, logout, show_problem, submit, version):
        cli.add_command(command)
    return cli


def main():
    """Main entry point."""
    build_cli()()


if __name__ == "__main__":
    main()
