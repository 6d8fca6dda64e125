"""
Command-line demonstration of the payment and notification systems.

Usage:
    extensible-demo                      # run both demos from the packaged config
    extensible-demo payments --amount 250
    extensible-demo notifications --recipient carol@example.com --message "Hi"
    extensible-demo all --config my_demo.yaml --ledger
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import (
    DemoConfig,
    build_notification_manager,
    build_payment_processor,
    get_log_level,
    load_config,
    load_environment,
)
from .errors import ExtensibleSystemsError
from .ledger import DispatchLedger

logger = logging.getLogger(__name__)


def run_payments(config: DemoConfig, amount: Optional[float], ledger: Optional[DispatchLedger]) -> None:
    payments = config.payments
    charge = payments.amount if amount is None else amount
    processor = build_payment_processor(payments, ledger=ledger)
    print(f"=== Payments ({len(processor)} methods, amount {charge:.2f}) ===")
    processor.process_payments(charge)


def run_notifications(
    config: DemoConfig,
    recipient: Optional[str],
    message: Optional[str],
    ledger: Optional[DispatchLedger],
) -> None:
    notifications = config.notifications
    manager = build_notification_manager(notifications, ledger=ledger)
    print(f"=== Notifications ({len(manager)} channels) ===")
    manager.broadcast(
        recipient if recipient is not None else notifications.recipient,
        message if message is not None else notifications.message,
    )


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the extensible payment and notification demos."
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["payments", "notifications", "all"],
        default="all",
        help="Which demo to run (default: all)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a demo YAML config (default: $EXTENSIBLE_CONFIG or packaged demo.yaml)",
    )
    parser.add_argument(
        "--amount",
        type=float,
        default=None,
        help="Override the payment amount from the config",
    )
    parser.add_argument("--recipient", type=str, default=None, help="Override broadcast recipient")
    parser.add_argument("--message", type=str, default=None, help="Override broadcast message")
    parser.add_argument(
        "--ledger",
        action="store_true",
        help="Print the dispatch ledger after the demos",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    load_environment()

    log_level = logging.DEBUG if args.verbose else get_log_level()
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    ledger = DispatchLedger() if args.ledger else None

    try:
        config = load_config(args.config)
        if args.command in ("payments", "all"):
            run_payments(config, args.amount, ledger)
        if args.command in ("notifications", "all"):
            run_notifications(config, args.recipient, args.message, ledger)
    except ExtensibleSystemsError as e:
        logger.debug("Demo aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if ledger is not None:
        print("=== Ledger ===")
        print(ledger.to_dataframe().to_string(index=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
