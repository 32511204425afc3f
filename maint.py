#!/usr/bin/env python3
"""
Interactive console for car maintenance records.

Menu options:
  1. Add Maintenance Record
  2. Display All Records
  3. Search for a Record by Date
  4. Delete a Record by Date
  5. Export Records to File
  6. Update Maintenance Record
  7. Exit

Records are kept in memory, one date-ordered index per vehicle model.
"""

import argparse
import math
import os
import sys
from pathlib import Path
from tabulate import tabulate
from typing import Callable, List, Optional

from maintlog import (
    DeleteOutcome,
    InsertOutcome,
    MaintenanceRecord,
    ModelRegistry,
    Settings,
    SettingsError,
    UpdateOutcome,
    export_records,
    format_cost,
    load_settings,
    render_records,
)
from maintlog.logging_setup import (
    LOG_LEVEL_ENV,
    configure_logging,
    get_logger,
    resolve_level,
)

logger = get_logger("maintlog.cli")

Prompt = Callable[[str], str]

MENU = """
--- Car Maintenance Record System ---
1. Add Maintenance Record
2. Display All Records
3. Search for a Record by Date
4. Delete a Record by Date
5. Export Records to File
6. Update Maintenance Record
7. Exit"""

EXIT_CHOICE = 7

# =============================================================================
# Input and formatting helpers
# =============================================================================


def parse_choice(text: str) -> Optional[int]:
    """Parse a menu choice, or None if it is not a number."""
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_cost(text: str) -> Optional[float]:
    """Parse a cost, or None if it is not a finite number."""
    try:
        cost = float(text.strip())
    except ValueError:
        return None
    return cost if math.isfinite(cost) else None


def is_blank(*values: str) -> bool:
    """Report blank model/date input. Returns True when any value is empty."""
    if all(values):
        return False
    print("Invalid input! Vehicle model and date must not be blank.")
    return True


def make_record_table(records: List[MaintenanceRecord]) -> str:
    """Render records as a Date | Description | Cost table."""
    rows = [[r.date, r.description, f"${format_cost(r.cost)}"] for r in records]
    return tabulate(
        rows, headers=["Date", "Description", "Cost"], tablefmt="simple"
    )


def no_records_for_model(model: str) -> None:
    print(f"No records found for model: {model}")


# =============================================================================
# Menu commands
# =============================================================================


def cmd_add(registry: ModelRegistry, settings: Settings, ask: Prompt) -> None:
    """Add a maintenance record, creating the model's index on first use."""
    model = ask("Enter vehicle model: ").strip()
    date = ask("Enter maintenance date (YYYY-MM-DD): ").strip()
    if is_blank(model, date):
        return
    description = ask("Enter maintenance description: ")
    cost = parse_cost(ask("Enter cost: "))
    if cost is None:
        print("Invalid input for cost! Please enter a valid numeric value.")
        return

    outcome = registry.add_record(model, date, description, cost)
    if outcome == InsertOutcome.INSERTED:
        print(f"Maintenance record added successfully for {model}.")
    else:
        print(
            f"A record for {date} already exists for {model}. "
            "Use update to change it."
        )


def cmd_display(registry: ModelRegistry, settings: Settings, ask: Prompt) -> None:
    """Print every record of a model in date order."""
    model = ask("Enter vehicle model to display records: ").strip()
    if is_blank(model):
        return
    index = registry.get(model)
    if index is None:
        no_records_for_model(model)
        return
    if index.is_empty:
        print("No maintenance records found.")
        return
    lines = render_records(index, settings.export_header, settings.export_footer)
    for line in lines:
        print(line)


def cmd_search(registry: ModelRegistry, settings: Settings, ask: Prompt) -> None:
    """Look up a single record by date."""
    model = ask("Enter vehicle model: ").strip()
    date = ask("Enter date to search (YYYY-MM-DD): ").strip()
    if is_blank(model, date):
        return
    index = registry.get(model)
    if index is None:
        no_records_for_model(model)
        return

    record = index.search(date)
    if record is None:
        print(f"No maintenance record found for date: {date}")
        return
    print("=== Record Found ===")
    print(make_record_table([record]))
    print("====================")


def cmd_delete(registry: ModelRegistry, settings: Settings, ask: Prompt) -> None:
    """Delete a record by date."""
    model = ask("Enter vehicle model: ").strip()
    date = ask("Enter date to delete (YYYY-MM-DD): ").strip()
    if is_blank(model, date):
        return
    index = registry.get(model)
    if index is None:
        no_records_for_model(model)
        return

    if index.delete(date) == DeleteOutcome.DELETED:
        print(f"Record deleted for {date}.")
    else:
        print(f"No maintenance record found for date: {date}")


def cmd_export(registry: ModelRegistry, settings: Settings, ask: Prompt) -> None:
    """Write a model's records to a text file."""
    filename = ask("Enter filename to export records: ").strip()
    filename = filename or settings.default_export_file
    model = ask("Enter vehicle model: ").strip()
    if is_blank(model):
        return
    index = registry.get(model)
    if index is None:
        no_records_for_model(model)
        return

    try:
        export_records(
            index, filename, settings.export_header, settings.export_footer
        )
    except OSError:
        print(f"Failed to open file: {filename}")
        return
    print(f"Records exported to {filename}")


def cmd_update(registry: ModelRegistry, settings: Settings, ask: Prompt) -> None:
    """Replace the description and cost of an existing record."""
    model = ask("Enter vehicle model: ").strip()
    date = ask("Enter date of record to update (YYYY-MM-DD): ").strip()
    if is_blank(model, date):
        return
    description = ask("Enter new description: ")
    cost = parse_cost(ask("Enter new cost: "))
    if cost is None:
        print("Invalid input for cost! Please enter a valid numeric value.")
        return

    index = registry.get(model)
    if index is None:
        no_records_for_model(model)
        return

    if index.update(date, description, cost) == UpdateOutcome.UPDATED:
        print(f"Record updated for {date}.")
    else:
        print(f"No record found for date: {date}")


COMMANDS = {
    1: cmd_add,
    2: cmd_display,
    3: cmd_search,
    4: cmd_delete,
    5: cmd_export,
    6: cmd_update,
}


# =============================================================================
# Menu loop
# =============================================================================


def run_menu(
    registry: ModelRegistry, settings: Settings, ask: Prompt = input
) -> int:
    """Run the menu until Exit is chosen or input runs out."""
    while True:
        print(MENU)
        try:
            choice = parse_choice(ask("Enter your choice: "))
            if choice is None:
                print("Invalid input! Please enter a number between 1 and 7.")
                continue
            if choice == EXIT_CHOICE:
                print("Exiting the system. Thank you!")
                return 0

            command = COMMANDS.get(choice)
            if command is None:
                print("Invalid choice! Please try again.")
                continue
            command(registry, settings, ask)
        except EOFError:
            logger.debug("End of input, leaving menu")
            print()
            return 0


# =============================================================================
# Main
# =============================================================================


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Car maintenance record system",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --config maint.yaml
  %(prog)s --log-level DEBUG
""",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to settings YAML file (default: $MAINT_CONFIG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (overrides settings file and $MAINT_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except SettingsError as e:
        for error in e.errors:
            print(f"Error: {error}")
        return 1

    # --log-level, then $MAINT_LOG_LEVEL, then the settings file
    configure_logging(
        resolve_level(args.log_level, os.getenv(LOG_LEVEL_ENV), settings.log_level)
    )

    return run_menu(ModelRegistry(), settings)


if __name__ == "__main__":
    sys.exit(main() or 0)
