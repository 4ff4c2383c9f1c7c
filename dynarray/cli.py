import sys
import logging
from typing import Optional, List
from argparse import ArgumentParser

from dynarray.util import ContainerError, GrowableArray, QUICK_INIT_SIZE, display


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------


def make_parser() -> 'ArgumentParser':
    parser = ArgumentParser(prog='dynarray', description='Growable array of integers.')
    parser.add_argument('values', metavar='Value', type=int, nargs='*',
                        help='integers appended to the array in order')
    parser.add_argument('-s', '--step', type=int, default=QUICK_INIT_SIZE,
                        help=f'initial capacity and growth step (default {QUICK_INIT_SIZE})')
    parser.add_argument('--insert', metavar=('INDEX', 'VALUE'), type=int, nargs=2,
                        action='append', default=[], help='insert VALUE at INDEX')
    parser.add_argument('--delete', metavar='INDEX', type=int, action='append',
                        default=[], help='delete element at INDEX')
    parser.add_argument('--remove', metavar='VALUE', type=int, action='append',
                        default=[], help='remove all occurrences of VALUE')
    order = parser.add_mutually_exclusive_group()
    order.add_argument('--sort', action='store_true', help='sort ascending')
    order.add_argument('--sort-desc', action='store_true', help='sort descending')
    parser.add_argument('--reverse', action='store_true', help='reverse the order')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log capacity changes')
    return parser


def main(argv: 'Optional[List[str]]' = None) -> 'int':
    """ Builds an array from command line values, applies the requested
        edits (insertions, deletions, removals, ordering) in that order
        and prints the result.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    logging.getLogger('dynarray').setLevel(level)

    if args.step < 1:
        parser.error(f"step must be positive, got {args.step}")
    array: 'GrowableArray[int]' = GrowableArray(args.step)
    array.extend(args.values)
    try:
        for index, value in args.insert:
            array.insert(index, value)
        for index in args.delete:
            array.delete(index)
        for value in args.remove:
            removed = array.remove(value)
            logger.info("removed %d occurrence(s) of %d", removed, value)
    except ContainerError as e:
        print(f"dynarray: {e}", file=sys.stderr)
        return 1

    if args.sort:
        array.sort()
    elif args.sort_desc:
        array.sort_descending()
    if args.reverse:
        array.reverse()
    display(array)
    return 0


if __name__ == '__main__':
    sys.exit(main())
