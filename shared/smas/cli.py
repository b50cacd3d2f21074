"""
Command-line front end.

Usage:
    smas solve acc.txt                        # accumulation vector from a file
    smas solve -a "0.0 1e5 0.5 ..."           # ... or inline (39 values)
    smas solve acc.txt -s smat.txt -f decimal -p 3 --document -o r.txt
    smas validate acc.txt -r rstd015.txt -e 1e-4 --plot comparison.png

Without -s the built-in 39 x 28 stoichiometric matrix is used.

Exit status: 0 on success, 1 when `validate` finds values outside epsilon,
2 on any error (a single diagnostic line is printed to stderr and nothing is
written to the output).
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

import numpy as np

from . import __version__
from .config import DEFAULT_EPSILON, DEFAULT_PRECISION, DEFAULT_FLOAT_FORMAT, FloatFormat, OutputOptions
from .errors import SmasError
from .io import (
    format_comparison,
    format_document,
    format_flat,
    load_matrix,
    load_vector,
    parse_vector,
    write_text,
)
from .solve import PseudoInverseSolver, SolveResult
from .util import default_s_matrix, within_epsilon

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def _add_accumulation_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        'accumulation_path', nargs='?', default=None,
        help='Path to an accumulation vector file (interchange format).')
    parser.add_argument(
        '-a', dest='accumulation_string', default=None,
        help='The accumulation vector inline, quoted and whitespace delimited, '
             'e.g. "0.0 1e5 0.5 0.3 0.0 ...".')


def _add_common_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        '-s', dest='matrix_path', default=None,
        help='Path to a stoichiometric matrix file (default: built-in 39 x 28 matrix).')
    parser.add_argument(
        '-o', dest='out_path', default=None,
        help='Output path (default: stdout).')
    parser.add_argument(
        '-e', dest='epsilon', type=float, default=DEFAULT_EPSILON,
        help=f'Values closer than epsilon are considered equal (default: {DEFAULT_EPSILON:g}).')
    parser.add_argument(
        '-p', dest='precision', type=int, default=DEFAULT_PRECISION,
        help=f'Digits after the decimal point in the output (default: {DEFAULT_PRECISION}).')
    parser.add_argument(
        '-f', dest='float_format', default=DEFAULT_FLOAT_FORMAT.value,
        choices=[f.value for f in FloatFormat],
        help=f'Float formatting in the output (default: {DEFAULT_FLOAT_FORMAT.value}).')
    parser.add_argument(
        '-v', '--verbose', action='count', default=0,
        help='Log progress to stderr (-v info, -vv debug).')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='smas',
        description='Find the least-norm reaction vector r solving S r = a '
                    'for a stoichiometric matrix S and an accumulation vector a.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    solve_parser = subparsers.add_parser(
        'solve', help='Solve for a reaction vector given an accumulation vector.')
    _add_accumulation_args(solve_parser)
    solve_parser.add_argument(
        '--document', action='store_true',
        help='Write the result in the interchange format instead of a flat string.')
    solve_parser.add_argument(
        '--header', default='reaction vector computed by smas',
        help='Header comment used with --document.')
    _add_common_args(solve_parser)

    validate_parser = subparsers.add_parser(
        'validate', help='Solve and compare the result with a ground truth reaction vector.')
    _add_accumulation_args(validate_parser)
    validate_parser.add_argument(
        '-r', dest='reactions_path', required=True,
        help='Path to the ground truth reaction vector file (interchange format).')
    validate_parser.add_argument(
        '--plot', dest='plot_path', default=None,
        help='Also save a comparison figure (PNG, PDF, ...) to this path.')
    _add_common_args(validate_parser)

    return parser


def _configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def _load_inputs(args: argparse.Namespace) -> Tuple[np.ndarray, np.ndarray]:
    if args.accumulation_path is not None:
        a = load_vector(args.accumulation_path)
    else:
        a = parse_vector(args.accumulation_string)

    if args.matrix_path is not None:
        S = load_matrix(args.matrix_path)
    else:
        logger.info('No matrix file given, using the built-in stoichiometric matrix')
        S = default_s_matrix()
    return a, S


def _run_solve(args: argparse.Namespace, options: OutputOptions) -> Tuple[str, int]:
    a, S = _load_inputs(args)
    result = PseudoInverseSolver().solve_system(a, S)
    if args.document:
        text = format_document(result.reactions, options.float_format, options.precision, args.header)
    else:
        text = format_flat(result.reactions, options.float_format, options.precision)
    return text, EXIT_OK


def _run_validate(args: argparse.Namespace, options: OutputOptions) -> Tuple[str, int]:
    a, S = _load_inputs(args)
    truth = load_vector(args.reactions_path)
    result = PseudoInverseSolver().solve_system(a, S)
    text = format_comparison(
        result.reactions, truth, options.float_format, options.precision, options.epsilon,
    )

    if args.plot_path:
        _save_plot(result, truth, options.epsilon, args.plot_path)

    n_bad = int(np.count_nonzero(~within_epsilon(result.reactions, truth, options.epsilon)))
    if n_bad:
        logger.warning(f'{n_bad} of {truth.size} reactions differ by epsilon or more')
        return text, EXIT_MISMATCH
    return text, EXIT_OK


def _save_plot(result: SolveResult, truth: np.ndarray, epsilon: float, path: str):
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from .visualization import plot_solution_panel

    fig = plot_solution_panel(result, truth, epsilon=epsilon, save_path=path)
    plt.close(fig)
    logger.info(f'Saved comparison figure to {path}')


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if (args.accumulation_path is None) == (args.accumulation_string is None):
        parser.error('provide exactly one of ACCUMULATION_PATH or -a STRING')

    try:
        options = OutputOptions.from_strings(args.float_format, args.precision, args.epsilon)
        if args.command == 'solve':
            text, status = _run_solve(args, options)
        else:
            text, status = _run_validate(args, options)

        if args.out_path:
            write_text(text, args.out_path)
        else:
            print(text)
    except (SmasError, ValueError) as e:
        print(f'smas: error: {e}', file=sys.stderr)
        return EXIT_ERROR

    return status


if __name__ == '__main__':
    sys.exit(main())
