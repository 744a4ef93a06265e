#!/usr/bin/env python3
"""Command-line interface for cssbuilder."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, NoReturn

from .builder import SelectorBuilder, combine
from .errors import SelectorBuilderError

# Destination shared by every fragment flag so command-line order is kept
_STEPS = "steps"
_COMBINATOR = "combinator"


def _get_version() -> str:
    try:
        return version("cssbuilder")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


class _StepAction(argparse.Action):
    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        steps = getattr(namespace, _STEPS, None)
        if steps is None:
            steps = []
            setattr(namespace, _STEPS, steps)
        steps.append((self.const, values))


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cssbuilder",
        description="Build a CSS selector from fragments given in order.",
        epilog=(
            "Examples:\n"
            "  cssbuilder -i main -c container -c editable\n"
            "  cssbuilder -e a -a 'href$=\".png\"' -p focus\n"
            "  cssbuilder -e div -i main -x + -e table -i data\n"
            "\n"
            "Combinators are right-associative: 'A -x + B -x ~ C' builds A + (B ~ C).\n"
            "If you don't have the 'cssbuilder' command available, use:\n"
            "  python -m cssbuilder ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    fragments = [
        ("-e", "--element", "element", "Element type name"),
        ("-i", "--id", "id", "Id name (without #)"),
        ("-c", "--class", "class_", "Class name (without .), may be repeated"),
        ("-a", "--attr", "attr", "Attribute expression (without brackets), may be repeated"),
        ("-p", "--pseudo-class", "pseudo_class", "Pseudo-class name (without :), may be repeated"),
        ("-P", "--pseudo-element", "pseudo_element", "Pseudo-element name (without ::)"),
    ]
    for short, long, method, help_text in fragments:
        parser.add_argument(
            short,
            long,
            action=_StepAction,
            const=method,
            dest=_STEPS,
            metavar="NAME",
            help=help_text,
        )

    parser.add_argument(
        "-x",
        "--combinator",
        action=_StepAction,
        const=_COMBINATOR,
        dest=_STEPS,
        metavar="SYMBOL",
        help="Combinator joining the selector so far to the next one (' ', '+', '~', '>')",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log builder activity to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cssbuilder {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.steps:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def build(steps: list[tuple[str, str]]) -> SelectorBuilder:
    """Apply ``(method, value)`` steps in order and return the resulting selector.

    A ``combinator`` step closes the current compound selector. The parts are
    then folded from the right so the result matches nested combine() calls.
    """
    compounds: list[SelectorBuilder] = [SelectorBuilder()]
    combinators: list[str] = []

    for method, value in steps:
        if method == _COMBINATOR:
            combinators.append(value)
            compounds.append(SelectorBuilder())
            continue
        getattr(compounds[-1], method)(value)

    result = compounds[-1]
    for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators)):
        result = combine(left, combinator, result)
    return result


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        selector = build(args.steps)
    except SelectorBuilderError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    sys.stdout.write(selector.stringify())
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
