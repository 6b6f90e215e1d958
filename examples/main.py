import argparse
import sys
from pathlib import Path

from order_mediator import CoordinationError, OrderFormClient, OrderFormClientError


def main(config_path: str | None, delivery_date: str, log_level: str, tablefmt: str):
    """
    Replay a customer filling in the order form: pick a delivery date, mark
    the recipient as another person, then switch to self-pickup.
    """
    with OrderFormClient(config_path=config_path, log_level=log_level) as client:
        steps = [
            (f"Select delivery date {delivery_date}", lambda: client.date_selector.select_date(delivery_date)),
            ("Recipient is another person", lambda: client.recipient_flag.set_other_person(True)),
            ("Switch to self-pickup", lambda: client.pickup_flag.set_pickup(True)),
        ]

        print(client.render_snapshot(tablefmt=tablefmt))
        for title, action in steps:
            try:
                action()
            except CoordinationError as e:
                client.logger.error(f"{title} rejected: {e}")
                continue
            print(f"\n=== {title} ===")
            print(client.render_snapshot(tablefmt=tablefmt))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Order form coordination demo")
    parser.add_argument("--config", dest="config_path", default=None, help="Path to config file (YAML)")
    parser.add_argument("--date", default="25.10.2025", help="Delivery date, ISO or day-first")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--tablefmt", default="simple", help="tabulate table format")

    args = parser.parse_args()

    if args.config_path and not Path(args.config_path).exists():
        print(f"Error: Config file not found: {args.config_path}")
        sys.exit(1)

    try:
        main(
            config_path=args.config_path,
            delivery_date=args.date,
            log_level=args.log_level,
            tablefmt=args.tablefmt,
        )
    except OrderFormClientError as e:
        print(f"Error: {e}")
        sys.exit(1)
