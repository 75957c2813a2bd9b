import asyncio
import logging

import click

from dotenv import load_dotenv

from tasklist.config import ClientSettings
from tasklist.controller import messages
from tasklist.session import TaskListSession, open_session
from tasklist.types import TaskId
from tasklist.view import ViewState


logger = logging.getLogger(__name__)


def render(view: ViewState) -> None:
    """Prints the task list the way the list view shows it."""
    if view.error_message:
        click.echo(f'Error: {view.error_message}', err=True)
    if view.show_loading_placeholder:
        click.echo(messages.LOADING)
    elif view.is_empty:
        click.echo(messages.EMPTY_LIST)
    else:
        for task in view.tasks:
            click.echo(f'{task.id}\t{task.text}')
        click.echo(view.counter_label)


def _finish(view: ViewState) -> None:
    render(view)
    if view.error_message:
        raise SystemExit(1)


def _resolve_task_id(session: TaskListSession, raw_id: str) -> TaskId:
    """Maps the id typed on the command line to the id the service uses."""
    for task in session.view().tasks:
        if str(task.id) == raw_id:
            return task.id
    return raw_id


async def _list(settings: ClientSettings) -> ViewState:
    async with open_session(settings) as session:
        return await session.load()


async def _add(settings: ClientSettings, text: str) -> ViewState:
    async with open_session(settings) as session:
        view = await session.load()
        if view.error_message:
            return view
        return await session.add(text)


async def _delete(
    settings: ClientSettings, raw_id: str, assume_yes: bool
) -> ViewState:
    async with open_session(settings) as session:
        view = await session.load()
        if view.error_message:
            return view
        task_id = _resolve_task_id(session, raw_id)
        if assume_yes:
            return await session.delete(task_id, confirm=True)
        return await session.delete(
            task_id,
            confirm=lambda: click.confirm(messages.CONFIRM_DELETE),
        )


@click.group()
@click.option(
    '--api-url',
    default=None,
    help='Base URL of the task service (default: $TASKLIST_API_URL).',
)
@click.option(
    '--log-level',
    default='WARNING',
    type=click.Choice(
        ['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False
    ),
)
@click.pass_context
def cli(ctx: click.Context, api_url: str | None, log_level: str):
    """Manage the task list kept by a remote task service."""
    load_dotenv()
    logging.basicConfig(level=log_level.upper())
    ctx.obj = ClientSettings.from_env(api_url)
    logger.debug('Using %r', ctx.obj)


@cli.command('list')
@click.pass_obj
def list_command(settings: ClientSettings):
    """Show every task."""
    _finish(asyncio.run(_list(settings)))


@cli.command('add')
@click.argument('text')
@click.pass_obj
def add_command(settings: ClientSettings, text: str):
    """Add a task."""
    _finish(asyncio.run(_add(settings, text)))


@cli.command('delete')
@click.argument('task_id')
@click.option('--yes', 'assume_yes', is_flag=True, help='Do not ask.')
@click.pass_obj
def delete_command(settings: ClientSettings, task_id: str, assume_yes: bool):
    """Delete a task by id."""
    _finish(asyncio.run(_delete(settings, task_id, assume_yes)))
