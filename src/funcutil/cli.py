"""Command-line interface for the timing and naming helpers."""

import importlib
import logging
import sys
from typing import Any, Dict, Optional

import click

from .decorators.timer import HIDDEN, Named, NameDisplay, new_with_func_name_in_log
from .funcs.names import name, NotCallableError
from .utils.io import load_config
from .utils.logging import ROOT_LOGGER, configure_logging

logger = logging.getLogger(f"{ROOT_LOGGER}.cli")

def import_target(target: str) -> Any:
    """Import an object from ``module:attr`` or dotted ``module.attr`` form.

    Args:
        target: Import path such as ``os.path:join`` or ``os.path.join``

    Returns:
        The imported object
    """
    if ':' in target:
        module_name, attr_path = target.split(':', 1)
        obj = importlib.import_module(module_name)
        return _get_attr_path(obj, attr_path)

    parts = target.split('.')
    # Longest importable prefix wins, the rest are attributes
    for i in range(len(parts), 0, -1):
        module_name = '.'.join(parts[:i])
        try:
            obj = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            if e.name is not None and not module_name.startswith(e.name):
                raise
            continue
        return _get_attr_path(obj, '.'.join(parts[i:]))

    raise ModuleNotFoundError(f"No importable module in {target!r}")

def _get_attr_path(obj: Any, attr_path: str) -> Any:
    for part in filter(None, attr_path.split('.')):
        obj = getattr(obj, part)
    return obj

def is_palindrome(s: str) -> bool:
    return s == s[::-1]

@click.group()
@click.option('--config', '-c', 'config_path', help='YAML config file')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Override the configured log level')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], log_level: Optional[str]):
    """Function timing and naming helpers."""
    config: Dict[str, Any] = load_config(config_path) if config_path else {}

    if log_level:
        config.setdefault('logging', {})
        config['logging'] = dict(config['logging'] or {}, level=log_level)

    configure_logging(config)
    ctx.obj = config

@cli.command('name')
@click.argument('target')
def name_command(target: str):
    """Print the short name of an importable callable."""
    try:
        obj = import_target(target)
        click.echo(name(obj))
    except (ImportError, AttributeError, NotCallableError) as e:
        logger.error(f"Cannot resolve name of {target}: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

@cli.command()
@click.argument('target')
@click.option('--repeat', '-n', default=1, show_default=True, type=click.IntRange(min=1),
              help='Number of timed runs')
@click.option('--show-name/--hide-name', default=True, help='Show the function name in the log')
def run(target: str, repeat: int, show_name: bool):
    """Run an importable no-argument callable under the timer."""
    try:
        action = import_target(target)
        display: NameDisplay = Named(action) if show_name else HIDDEN
        timer = new_with_func_name_in_log(display, action)
    except (ImportError, AttributeError, NotCallableError) as e:
        logger.error(f"Cannot load {target}: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        for _ in range(repeat):
            timer()
    except Exception as e:
        logger.error(f"Run of {target} failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Ran {target} {repeat} time(s)")

@cli.command()
@click.option('--text', '-t', default='I love Python!', show_default=True,
              help='String to check')
def demo(text: str):
    """Time a palindrome check with and without the function name."""
    results: Dict[str, bool] = {}

    def check_hidden():
        results['hidden'] = is_palindrome(text)

    def check_named():
        results['named'] = is_palindrome(text)

    timer1 = new_with_func_name_in_log(HIDDEN, check_hidden)
    timer2 = new_with_func_name_in_log(Named(is_palindrome), check_named)

    timer1()
    timer2()

    click.echo(f"is_palindrome({text}) == {results['hidden']}")
    click.echo(f"results match: {results['hidden'] == results['named']}")

if __name__ == '__main__':
    cli()
