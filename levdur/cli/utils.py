import sys
import click
import configparser
import numpy as np

from logging import getLogger, StreamHandler, Formatter, INFO

from levdur.core.errors import StreamError


class ToolCommand(click.Command):
    """Click command exiting with status 1, not 2, on bad options or arguments."""

    def main(self, *args, standalone_mode=True, **kwargs):
        try:
            super().main(*args, standalone_mode=False, **kwargs)
        except click.ClickException as e:
            e.show()
            sys.exit(1)
        except click.Abort:
            click.echo('Aborted!', err=True)
            sys.exit(1)

        if standalone_mode:
            sys.exit(0)


def setup_logger(name):
    """Return the logger of a tool, printing to the current stderr."""
    logger = getLogger(name)
    logger.setLevel(INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = StreamHandler(sys.stderr)
    handler.setFormatter(Formatter('%(name)s [%(levelname)s] %(message)s'))
    handler.setLevel(INFO)
    logger.addHandler(handler)

    return logger


def load_config(ctx, param, value):
    """Use the section named after the command in an ini file as default option values."""
    if value is None:
        return

    parser = configparser.ConfigParser()
    try:
        found = parser.read(value)
    except configparser.Error as e:
        raise click.BadParameter('cannot parse %s: %s' % (value, e), ctx=ctx, param=param)
    if not found:
        raise click.BadParameter('cannot read %s' % value, ctx=ctx, param=param)

    section_name = ctx.command.name
    if section_name in parser:
        ctx.default_map = dict(parser[section_name])


def config_option(f):
    return click.option('-c', '--config', type=click.Path(dir_okay=False),
                        callback=load_config, is_eager=True, expose_value=False,
                        help='Ini file whose section named after the command gives default values.')(f)


def input_stream(infile):
    """Return the given binary file, or binary stdin if no file is given."""
    return sys.stdin.buffer if infile is None else infile


def write_stream(stream, values):
    """Write values to a binary stream as native float64.

    Raises:
        StreamError: Writing failed.

    """
    data = np.asarray(values, dtype=np.float64).tobytes()
    try:
        stream.write(data)
        stream.flush()
    except (OSError, ValueError) as e:
        raise StreamError('failed to write: %s' % e) from e
