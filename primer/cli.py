import argparse
import random
from typing import List, Optional

import yaml

from primer.bank.scenario import Scenario, run_scenario
from primer.deck.deck import Deck
from primer.logging_utils import LOG_LEVEL, get_logger, setup_logging
from primer.media.catalog import SAMPLE_CATALOG, load_catalog, media_from_dict, print_media

log = get_logger("primer.cli")


def run_deck(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed) if args.seed is not None else None
    deck = Deck.create(rng=rng)
    if args.shuffle:
        deck.shuffle()

    if args.deal is None:
        print(f"Here is your deck ({len(deck)} cards):")
        for label in deck.labels():
            print(f"  {label}")
        return

    try:
        hand = deck.deal(args.deal)
    except ValueError as e:
        raise SystemExit(f"deal failed: {e}")

    print(f"Here is your hand ({len(hand)} cards):")
    for card in hand:
        print(f"  {card}")
    print(f"Cards left in deck: {len(deck)}")


def run_bank(args: argparse.Namespace) -> None:
    try:
        scenario = Scenario.from_yaml(args.scenario) if args.scenario else Scenario.default()
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"bad scenario: {e}")

    log.info("running scenario %r (%d accounts)", scenario.name, len(scenario.accounts))
    def report_rejected(account_id: int, requested: int, balance: int) -> None:
        print(
            f"Account {account_id}: cannot withdraw {requested} due to insufficient funds"
            f" (balance {balance})"
        )

    bank = run_scenario(scenario, on_rejected=report_rejected)
    summaries = bank.summary()

    if summaries:
        print(summaries[0])
    print()
    print("Account summaries:")
    for line in summaries:
        print(f"  {line}")
    print(f"Total balance in bank: {bank.total_balance()}")


def run_media(args: argparse.Namespace) -> None:
    try:
        if args.catalog:
            items = load_catalog(args.catalog)
        else:
            items = [media_from_dict(entry) for entry in SAMPLE_CATALOG]
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"bad catalog: {e}")

    for media in items:
        print_media(media)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Primer: deck, bank and media examples")
    ap.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    deck = sub.add_parser("deck", help="Build a 52-card deck, optionally shuffle and deal")
    deck.add_argument("--shuffle", action="store_true", help="Shuffle before dealing")
    deck.add_argument("--deal", type=int, default=None, help="Deal N cards off the end")
    deck.add_argument("--seed", type=int, default=None, help="RNG seed (default: unseeded)")
    deck.set_defaults(func=run_deck)

    bank = sub.add_parser("bank", help="Run a bank ledger scenario")
    bank.add_argument("--scenario", help="Path to scenario YAML (default: built-in Alice/Bob)")
    bank.set_defaults(func=run_bank)

    media = sub.add_parser("media", help="Print a media catalog")
    media.add_argument("--catalog", help="Path to catalog YAML (default: built-in sample)")
    media.set_defaults(func=run_media)

    return ap


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
