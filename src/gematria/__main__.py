from __future__ import annotations
import argparse, json, random, sys

from . import config as CFG
from .engine import Engine
from .models import (
    Decomposition, EmptyCorpus, EmptyInput, Matched, NoMatch, TimedOut, outcome_to_dict,
)
from .normalize import format_breakdown, is_repdigit


def _parse_target(raw: str) -> tuple[str, int]:
    name, sep, value = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {raw!r}")
    try:
        return name.strip().lower(), int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"target value must be an integer: {raw!r}") from None


def _print_weights(eng: Engine, text: str) -> None:
    print(f"{text!r}")
    for name, w in eng.weigh(text).items():
        mark = " *" if is_repdigit(w.total) else ""
        print(f"  {name:<10} {w.total:>6}{mark}   {format_breakdown(w.breakdown)}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Gematria calculator and phrase finder")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--weigh", metavar="TEXT", help="Print per-scheme totals for TEXT")
    g.add_argument("--target", metavar="NAME=VALUE", action="append", type=_parse_target,
                   help="Search for a phrase; repeat for several schemes (hebrew, english, simple, aiq_bekar)")
    g.add_argument("--anagram", metavar="LETTERS", help="Split LETTERS into corpus words")

    p.add_argument("--roots", nargs="+", default=[], help="Word-list files or folders (default: built-in list)")
    p.add_argument("--attempts", type=int, default=None, help="Attempt cap")
    p.add_argument("--timeout-ms", type=int, default=CFG.TIMEOUT_MS, help="Search wall-clock limit")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = Engine()
    if args.weigh is not None:
        if args.json:
            rows = {n: {"total": w.total, "breakdown": [list(b) for b in w.breakdown]}
                    for n, w in eng.weigh(args.weigh).items()}
            print(json.dumps(rows, indent=2))
        else:
            _print_weights(eng, args.weigh)
        return 0

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        eng.build(roots=args.roots, verbose=args.verbose)

        if args.target:
            outcome = eng.generate(
                dict(args.target),
                max_attempts=CFG.MAX_ATTEMPTS if args.attempts is None else args.attempts,
                timeout_ms=args.timeout_ms,
                rng=rng,
            )
            if args.json:
                print(json.dumps(outcome_to_dict(outcome, eng.schemes), indent=2))
            elif isinstance(outcome, Matched):
                print(f"match after {outcome.attempts:,} attempts")
                _print_weights(eng, outcome.phrase.text)
            elif isinstance(outcome, NoMatch):
                kind = "timed out" if isinstance(outcome, TimedOut) else "exhausted"
                print(f"(no match; {kind} after {outcome.attempts:,} attempts; try a different target)")
                if outcome.best is not None:
                    print(f"closest (distance {outcome.best.distance}):")
                    _print_weights(eng, outcome.best.phrase.text)
            elif isinstance(outcome, EmptyCorpus):
                print("(word list is empty; load a corpus first)")
            return 0 if isinstance(outcome, Matched) else 1

        attempts = CFG.ANAGRAM_ATTEMPTS if args.attempts is None else args.attempts
        outcome = eng.decompose(args.anagram, max_attempts=attempts, rng=rng)
        if args.json:
            print(json.dumps(outcome_to_dict(outcome), indent=2))
        elif isinstance(outcome, EmptyInput):
            print("(please enter a non-empty phrase)")
        elif isinstance(outcome, Decomposition):
            print(" ".join(outcome.phrase) or "(no words fit)")
            if outcome.leftover:
                print(f"leftover {outcome.leftover}: {''.join(sorted(outcome.remaining.elements()))}")
        return 0 if isinstance(outcome, Decomposition) and outcome.complete else 1
    except ValueError as exc:
        p.error(str(exc))
        return 2
    finally:
        eng.shutdown()


if __name__ == "__main__":
    sys.exit(main())
