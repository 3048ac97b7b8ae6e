"""
CLI commands for blocksort.

Each transform command takes a single flag argument:
    -   forward transform (encode)
    +   inverse transform (decode)

Binary data goes to stdout (or --output); diagnostics go to stderr.
"""

import logging
import time
from functools import wraps

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from blocksort.config import BlockSortSettings, SUFFIX_ALGORITHMS
from blocksort.context.encoding import bwt as bwt_codec
from blocksort.context.encoding import mtf as mtf_codec
from blocksort.context.encoding.suffix_array import CircularSuffixArray
from blocksort.context.io import BinaryIn, BinaryOut
from blocksort.errors import BlockSortError
from blocksort.models import PipelineStats
from blocksort.services import BlockSortPipeline

FORWARD = '-'
INVERSE = '+'


def setup_logging(verbose: bool) -> None:
    """Send blocksort debug logs to stderr through rich when verbose"""
    logger = logging.getLogger('blocksort')
    if not verbose:
        logger.handlers = []
        logger.setLevel(logging.WARNING)
        logger.propagate = True
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False


def validate_flag(ctx, param, value):
    if value not in (FORWARD, INVERSE):
        raise click.BadParameter(
            f"expected '{FORWARD}' (forward) or '{INVERSE}' (inverse), got {value!r}"
        )
    return value


def resolve_settings(algorithm, compat, measure) -> BlockSortSettings:
    try:
        settings = BlockSortSettings.from_env()
    except BlockSortError as e:
        raise click.UsageError(str(e)) from e
    return settings.with_overrides(
        suffix_algorithm=algorithm,
        strict=False if compat else None,
        measure=measure or None,
    )


def report_errors(func):
    """Turn blocksort errors into click errors (exit status 1)"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BlockSortError as e:
            raise click.ClickException(str(e)) from e
    return wrapper


def stream_options(func):
    func = click.option('--verbose', '-v', is_flag=True, help='Log each step to stderr')(func)
    func = click.option('--measure', '-m', is_flag=True, help='Print statistics to stderr')(func)
    func = click.option('--output', '-o', type=click.File('wb'), default='-',
                        help='Output file (default: stdout)')(func)
    func = click.option('--input', '-i', 'input_file', type=click.File('rb'), default='-',
                        help='Input file (default: stdin)')(func)
    func = click.argument('flag', callback=validate_flag)(func)
    return func


def transform_options(func):
    func = click.option('--compat', is_flag=True,
                        help='Decode without the integrity check (default: strict, or BLOCKSORT_STRICT)')(func)
    func = click.option('--algorithm', type=click.Choice(SUFFIX_ALGORITHMS), default=None,
                        help='Suffix sort strategy (default: doubling, or BLOCKSORT_SUFFIX_ALGORITHM)')(func)
    return stream_options(func)


def print_stats(rows) -> None:
    table = Table(title='blocksort')
    table.add_column('Metric')
    table.add_column('Value', justify='right')
    for name, value in rows:
        table.add_row(name, str(value))
    Console(stderr=True).print(table)


@click.command()
@transform_options
@report_errors
def bwt(flag, input_file, output, algorithm, compat, measure, verbose):
    """
    Burrows-Wheeler transform ('-') or inverse transform ('+').

    Example:
        blocksort bwt - < abra.txt > abra.bwt
    """
    setup_logging(verbose)
    settings = resolve_settings(algorithm, compat, measure)
    source = BinaryIn(input_file)

    start = time.time()
    with BinaryOut(output) as out:
        if flag == FORWARD:
            encoded = bwt_codec.transform(source, out, algorithm=settings.suffix_algorithm)
            rows = [('Block size', len(encoded)), ('First index', encoded.first)]
        else:
            decoded = bwt_codec.inverse_transform(source, out, strict=settings.strict)
            rows = [('Block size', len(decoded))]

    if settings.measure:
        rows.append(('Time (s)', f"{time.time() - start:.4f}"))
        print_stats(rows)


@click.command()
@stream_options
@report_errors
def mtf(flag, input_file, output, measure, verbose):
    """
    Move-to-front encode ('-') or decode ('+').

    Example:
        blocksort mtf - < abra.bwt > abra.mtf
    """
    setup_logging(verbose)
    source = BinaryIn(input_file)

    start = time.time()
    with BinaryOut(output) as out:
        if flag == FORWARD:
            count = mtf_codec.encode(source, out)
        else:
            count = mtf_codec.decode(source, out)

    if measure:
        print_stats([('Bytes', count), ('Time (s)', f"{time.time() - start:.4f}")])


@click.command()
@transform_options
@report_errors
def pipeline(flag, input_file, output, algorithm, compat, measure, verbose):
    """
    BWT followed by MTF ('-'), or the reverse ('+').

    Example:
        blocksort pipeline - -i book.txt -o book.bsp -m
    """
    setup_logging(verbose)
    settings = resolve_settings(algorithm, compat, measure)
    service = BlockSortPipeline(settings)
    data = BinaryIn(input_file).read_all()

    if flag == FORWARD:
        result, stats = service.compress(data, verbose=verbose)
    else:
        result = service.decompress(data, verbose=verbose)
        stats = None

    with BinaryOut(output) as out:
        out.write_bytes(result)

    if settings.measure:
        print_stats(stats_rows(stats) if stats else [('Block size', len(result))])


def stats_rows(stats: PipelineStats):
    return [
        ('Original size', stats.original_size),
        ('Transformed size', stats.transformed_size),
        ('First index', stats.first_index),
        ('Zero ranks', f"{stats.zero_ratio:.1%}"),
        ('Longest zero run', stats.longest_zero_run),
        ('Distinct ranks', stats.distinct_symbols),
        ('Time (s)', f"{stats.elapsed:.4f}"),
    ]


@click.command()
@click.argument('text')
@click.option('--algorithm', type=click.Choice(SUFFIX_ALGORITHMS), default='doubling',
              help='Suffix sort strategy (default: doubling)')
@report_errors
def csa(text, algorithm):
    """
    Print the sorted circular rotation offsets of TEXT.

    Example:
        blocksort csa 'ABRACADABRA!'
    """
    array = CircularSuffixArray(text, algorithm=algorithm)
    click.echo(' '.join(str(off) for off in array))
