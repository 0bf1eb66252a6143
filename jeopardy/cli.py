"""Command-line interface for playing Jeopardy in the terminal."""

import asyncio
import logging
from dataclasses import replace
from typing import Optional

import click

from .config import GameConfig, load_config
from .exceptions import SourceError
from .game import GameSession
from .render import parse_cell_label, render_board
from .source import JServiceSource

logger = logging.getLogger(__name__)


def _build_config(config_path: Optional[str], base_url: Optional[str], seed: Optional[int]) -> GameConfig:
    try:
        cfg = load_config(config_path)
    except ValueError as e:
        raise click.ClickException(f"Bad configuration: {e}")
    if base_url:
        cfg = replace(cfg, base_url=base_url.rstrip("/"))
    if seed is not None:
        cfg = replace(cfg, seed=seed)
    return cfg


def _start(session: GameSession) -> bool:
    click.echo("Loading...")
    try:
        asyncio.run(session.start())
    except SourceError as e:
        logger.error("Board setup failed: %s", e)
        click.echo(f"Could not load the board: {e}", err=True)
        return False
    return True


@click.group()
@click.option(
    "--log-level",
    envvar="JEOPARDY_LOG_LEVEL",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
def main(log_level: str):
    """Jeopardy trivia board CLI."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config JSON file")
@click.option("--base-url", help="Question service base URL")
@click.option("--seed", "-s", type=int, help="Random seed for category selection")
def play(config_path: Optional[str], base_url: Optional[str], seed: Optional[int]):
    """Play a board: type a cell like B3 to reveal it."""
    cfg = _build_config(config_path, base_url, seed)
    session = GameSession(JServiceSource(cfg), config=cfg)

    ready = _start(session)
    while True:
        if ready:
            click.echo("\n" + render_board(session.board) + "\n")
            prompt = f"Cell (e.g. A1), r to {session.control_label.lower()}, q to quit"
        else:
            prompt = f"r to {session.control_label.lower()}, q to quit"

        command = click.prompt(prompt, default="", show_default=False).strip()
        if command.lower() == "q":
            break
        if command.lower() == "r":
            ready = _start(session)
            continue
        if not ready:
            continue

        try:
            category_index, clue_index = parse_cell_label(command, session.board)
        except ValueError as e:
            click.echo(str(e), err=True)
            continue
        result = session.reveal(category_index, clue_index)
        click.echo(f"{command.upper()}: {result.text}")

        if session.board.is_fully_revealed:
            click.echo("Board cleared! Press r to play again.")


@main.command()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config JSON file")
@click.option("--count", "-n", type=int, help="Number of categories to list")
def categories(config_path: Optional[str], count: Optional[int]):
    """List the categories the service offers."""
    cfg = _build_config(config_path, None, None)
    source = JServiceSource(cfg)
    try:
        summaries = source.list_categories(count or cfg.pool_size)
    except SourceError as e:
        raise click.ClickException(str(e))

    for summary in summaries:
        click.echo(f"{summary.id:>8}  {summary.title}")


@main.command("show-category")
@click.argument("category_id", type=int)
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Config JSON file")
def show_category(category_id: int, config_path: Optional[str]):
    """Print the clues of one category with their answers."""
    cfg = _build_config(config_path, None, None)
    source = JServiceSource(cfg)
    try:
        category = source.get_category(category_id)
    except SourceError as e:
        raise click.ClickException(str(e))

    click.echo(category.title)
    click.echo("=" * len(category.title))
    for i, clue in enumerate(category.clues, start=1):
        click.echo(f"{i}. {clue.question}")
        click.echo(f"   -> {clue.answer}")


if __name__ == "__main__":
    main()
