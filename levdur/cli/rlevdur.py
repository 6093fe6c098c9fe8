import sys
import click

from levdur.core.errors import LevinsonDurbinError, StreamError
from levdur.core.input_source import InputSourceFromStream
from levdur.core.levinson import ReverseLevinsonDurbinBuffer, ReverseLevinsonDurbinRecursion

from .utils import ToolCommand, config_option, input_stream, setup_logger, write_stream


def reconstruct_frames(source, recursion, output):
    """Reconstruct the autocorrelation of every LPC frame of a source.

    Returns:
        int: Number of processed frames.

    """
    buffer = ReverseLevinsonDurbinBuffer()

    num_frames = 0
    for lpc in source:
        write_stream(output, recursion.run(lpc, buffer))
        num_frames += 1

    return num_frames


@click.command('rlevdur', cls=ToolCommand, context_settings=dict(help_option_names=['-h', '--help']))
@config_option
@click.option('-m', 'num_order', type=click.IntRange(min=0), default=25, show_default=True,
              help='Order of linear predictive coefficients.')
@click.option('-f', 'epsilon', type=click.FloatRange(min=0.0), default=0.0, show_default=True,
              help='Minimum value of the determinant of normal matrix.')
@click.argument('infile', type=click.File('rb'), required=False)
def rlevdur(num_order, epsilon, infile):
    """Solve autocorrelation normal equations using reverse Levinson-Durbin recursion.

    Reads linear predictive coefficients (double) from INFILE or stdin and writes
    autocorrelation sequences (double) to stdout. The first coefficient of each
    frame is the gain, i.e. the square root of the prediction error energy.
    """
    logger = setup_logger('rlevdur')

    recursion = ReverseLevinsonDurbinRecursion(num_order, epsilon)
    source = InputSourceFromStream(input_stream(infile), num_order + 1)
    output = sys.stdout.buffer

    try:
        reconstruct_frames(source, recursion, output)
    except StreamError as e:
        logger.error(str(e))
        sys.exit(1)
    except LevinsonDurbinError as e:
        logger.error('Failed to solve autocorrelation normal equations: %s' % e)
        sys.exit(1)


if __name__ == '__main__':
    rlevdur()
