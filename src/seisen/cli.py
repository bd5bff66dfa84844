"""Command-line interface for seisen."""


import argparse
import json
import logging
import random
import sys
from mako.template import Template
from terminaltables import AsciiTable
from seisen.api import Seisen
from seisen.models import SeisenError


def _positive_int(value: str) -> int:
    count = int(value)
    if count < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, got {count}')
    return count


def _render(template: str, note: str, category: str) -> str:
    if not template:
        return note
    return Template(text=template).render(note=note, category=category)


def _pick(args, sn: Seisen) -> int:
    if args.files:
        sn.load_files(args.files)
    else:
        sn.ensure_category_files()
        sn.load_category(args.category[0] if args.category else None)
    if args.seed:
        sn.picker.rng = random.Random(args.seed[0])
    notes = [sn.get_note() for _ in range(args.count[0] if args.count else 1)]
    if args.json:
        print(json.dumps(notes))
    else:
        template = args.template[0] if args.template else sn.conf.note_template
        for note in notes:
            print(_render(template, note, sn.category))
    return 0


def _add(args, sn: Seisen) -> int:
    category = args.category[0] if args.category else None
    sn.ensure_category_files()
    if sn.add_note(args.text[0], category) is None:
        print('Nothing to add: the note is blank.', file=sys.stderr)
        return 1
    print(f'Added to {sn.category_path(sn.category)}')
    return 0


def _categories(args, sn: Seisen) -> int:
    sn.ensure_category_files()
    counts = sn.category_counts()
    if args.json:
        print(json.dumps(counts))
    else:
        data = [('Category', 'Notes', 'Path')]
        data += [(c, counts[c], sn.category_path(c)) for c in sn.conf.categories]
        table = AsciiTable(data)
        table.justify_columns[1] = 'right'
        print(table.table)
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.set_defaults(func=None)
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug messages.')

    subs = parser.add_subparsers(title='Commands')

    p_pick = subs.add_parser('pick', help='Print a random note.')
    p_pick_source = p_pick.add_mutually_exclusive_group()
    p_pick_source.add_argument('-c', '--category', nargs=1,
                               help='Category to pick from. Defaults to conf.default_category.')
    p_pick_source.add_argument('-f', '--files', nargs='+',
                               help='Pick from these notes files instead of a category. The notes of all the files '
                                    'are combined.')
    p_pick.add_argument('-n', '--count', nargs=1, type=_positive_int,
                        help='Number of notes to print. Each is drawn independently, so repeats are possible.')
    p_pick.add_argument('-s', '--seed', nargs=1, type=int, help='Seed the random generator, for repeatable output.')
    p_pick_formats = p_pick.add_mutually_exclusive_group()
    p_pick_formats.add_argument('-t', '--template', nargs=1,
                                help='Mako template for printing each note, for example "~ ${note} ~". The names '
                                     '`note` and `category` are available. Defaults to conf.note_template.')
    p_pick_formats.add_argument('-j', '--json', action='store_true', help='Output as a JSON list.')
    p_pick.set_defaults(func=_pick)

    p_add = subs.add_parser('add', help='Add a note to the end of a category file.')
    p_add.add_argument('text', nargs=1, help='Text of the note. Surrounding whitespace is removed.')
    p_add.add_argument('-c', '--category', nargs=1, help='Category to add to. Defaults to conf.default_category.')
    p_add.set_defaults(func=_add)

    p_cats = subs.add_parser('categories', help='Show each category with its number of notes and its file path.')
    p_cats.add_argument('-j', '--json', action='store_true',
                        help='Output as JSON. The output is an object whose keys are categories and whose values '
                             'are the number of notes in them.')
    p_cats.set_defaults(func=_categories)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')
    if not args.func:
        parser.print_help()
        return 1
    try:
        with Seisen.for_user() as sn:
            return args.func(args, sn)
    except SeisenError as ex:
        print(ex.message, file=sys.stderr)
        return 2
