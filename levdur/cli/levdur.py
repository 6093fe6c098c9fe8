import sys
import click
from enum import IntEnum

from levdur.core.errors import LevinsonDurbinError, StreamError, UnstableFilterError
from levdur.core.input_source import InputSourceFromStream
from levdur.core.levinson import LevinsonDurbinBuffer, LevinsonDurbinRecursion

from .utils import ToolCommand, config_option, input_stream, setup_logger, write_stream


class WarningType(IntEnum):
    IGNORE = 0
    WARN = 1
    EXIT = 2


def solve_frames(source, recursion, output, warning_type, logger):
    """Solve the normal equations of every frame of a source and write the coefficients.

    Args:
        source (InputSourceInterface): Autocorrelation frames.
        recursion (LevinsonDurbinRecursion): Solver.
        output (file object): Binary stream receiving the coefficients.
        warning_type (WarningType): What to do when a frame is unstable.
        logger (Logger): Where warnings go.

    Returns:
        int: Number of processed frames.

    """
    buffer = LevinsonDurbinBuffer()

    num_frames = 0
    for frame_index, autocorrelation in enumerate(source):
        lpc, is_stable = recursion.run(autocorrelation, buffer)

        if not is_stable and warning_type != WarningType.IGNORE:
            logger.warning('%dth frame is unstable' % frame_index)
            if warning_type == WarningType.EXIT:
                raise UnstableFilterError('%dth frame is unstable' % frame_index)

        write_stream(output, lpc)
        num_frames += 1

    return num_frames


@click.command('levdur', cls=ToolCommand, context_settings=dict(help_option_names=['-h', '--help']))
@config_option
@click.option('-m', 'num_order', type=click.IntRange(min=0), default=25, show_default=True,
              help='Order of autocorrelation.')
@click.option('-f', 'epsilon', type=click.FloatRange(min=0.0), default=0.0, show_default=True,
              help='Minimum value of the determinant of normal matrix.')
@click.option('-e', 'warning_type', type=click.IntRange(0, 2), default=0, show_default=True,
              help='Warning type of unstable index: 0 (no warning), 1 (output the index to stderr), '
                   '2 (output the index to stderr and exit immediately).')
@click.option('-g', '--gain', is_flag=True, default=False,
              help='Output sqrt of the prediction error energy as the first coefficient instead of 1.')
@click.argument('infile', type=click.File('rb'), required=False)
def levdur(num_order, epsilon, warning_type, gain, infile):
    """Solve autocorrelation normal equations using Levinson-Durbin recursion.

    Reads autocorrelation sequences (double) from INFILE or stdin and writes
    linear predictive coefficients (double) to stdout.
    """
    logger = setup_logger('levdur')

    recursion = LevinsonDurbinRecursion(num_order, epsilon, gain=gain)
    source = InputSourceFromStream(input_stream(infile), num_order + 1)
    output = sys.stdout.buffer

    try:
        solve_frames(source, recursion, output, WarningType(warning_type), logger)
    except UnstableFilterError:
        sys.exit(1)
    except StreamError as e:
        logger.error(str(e))
        sys.exit(1)
    except LevinsonDurbinError as e:
        logger.error('Failed to solve autocorrelation normal equations: %s' % e)
        sys.exit(1)


if __name__ == '__main__':
    levdur()
