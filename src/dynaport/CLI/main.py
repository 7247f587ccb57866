"""
Command Line Interface for dynaport.
"""
import click
from dotenv import find_dotenv, load_dotenv
from ..MODELS.port_range import PortRangeName, get_port_range, REGISTERED, DYNAMIC
from ..MODELS.prober_config import ProberConfig
from ..PROBER.port_prober import PortProber
from ..UTILS.log import setup_logging
from ..errors import DynaportError

RANGE_CHOICES = [name.value for name in PortRangeName]


def _range_option(f):
    return click.option('--range', '-r', 'range_name', type=click.Choice(RANGE_CHOICES, case_sensitive=False),
                        default=PortRangeName.REGISTERED.value, show_default=True,
                        help='Port range to scan')(f)


def _count_option(f):
    return click.option('--count', '-n', type=click.IntRange(min=1), default=None,
                        help='Number of ports to return')(f)


@click.group()
@click.option('--host', default=None, help='Address to probe (default 127.0.0.1 or $DYNAPORT_HOST)')
@click.option('--verbose', '-v', is_flag=True, help='Log every scan')
@click.pass_context
def cli(ctx, host, verbose):
    """
    dynaport - find free TCP ports on this machine.

    Ports are only known to be free at the moment they are probed.
    """
    ctx.ensure_object(dict)
    load_dotenv(find_dotenv(usecwd=True))
    config = ProberConfig.from_env()
    if host:
        config = config.model_copy(update={'host': host})
    setup_logging('DEBUG' if verbose else config.log_level)
    ctx.obj['config'] = config
    ctx.obj.setdefault('prober', PortProber(config))


def _find(ctx, policy, range_name, count):
    prober = ctx.obj['prober']
    port_range = get_port_range(range_name)
    try:
        if count is None:
            port = getattr(prober, f'{policy}_port')(port_range)
            if port is None:
                raise click.ClickException(f"No free port in {port_range}")
            ports = [port]
        else:
            ports = getattr(prober, f'{policy}_n_ports')(port_range, count)
    except DynaportError as e:
        raise click.ClickException(str(e))
    for port in ports:
        click.echo(port)


@cli.command()
@_range_option
@_count_option
@click.pass_context
def random(ctx, range_name, count):
    """Print free ports picked at random."""
    _find(ctx, 'random', range_name, count)


@cli.command()
@_range_option
@_count_option
@click.pass_context
def lowest(ctx, range_name, count):
    """Print the lowest free ports, ascending."""
    _find(ctx, 'lowest', range_name, count)


@cli.command()
@_range_option
@_count_option
@click.pass_context
def highest(ctx, range_name, count):
    """Print the highest free ports, descending."""
    _find(ctx, 'highest', range_name, count)


@cli.command()
@click.argument('port', type=click.IntRange(1, 65535))
@click.pass_context
def check(ctx, port):
    """Check whether PORT can be bound right now."""
    if ctx.obj['prober'].is_available(port):
        click.echo(f"{port} available")
    else:
        click.echo(f"{port} in use")
        ctx.exit(1)


@cli.command()
def ranges():
    """List the built-in port ranges."""
    for port_range in (REGISTERED, DYNAMIC):
        click.echo(f"{port_range.name}: {port_range.lower}-{port_range.upper}")


def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})

if __name__ == '__main__':
    main()
