"""Command-line interface for LaughMeter.

Provides subcommands for logging laughs, browsing the journal, and
viewing stats and achievements.
"""

import argparse
import calendar
import sqlite3
import sys
from datetime import date, datetime
from pathlib import Path

from .config import AppConfig, config_from_env
from .controller import JournalController
from .dates import local_time
from .journal import MOODS, Entry, EntryStore
from .logging import configure_logger
from .settings import load_settings
from .stats import entries_on

PLACEHOLDER = "---"

# Commands that render the last refresh.
SNAPSHOT_COMMANDS = ("list", "stats", "badges", "calendar")


def _get_controller(config: AppConfig) -> JournalController:
    """Create a JournalController backed by the configured files."""
    store = EntryStore(config.db_path)
    store.init_db()
    events = configure_logger(config.log_dir, max_size_mb=config.log_max_size_mb)
    settings = load_settings(config.settings_path)
    return JournalController(
        store,
        settings=settings,
        settings_path=config.settings_path,
        events=events,
    )


def format_relative(timestamp: datetime, now: datetime) -> str:
    """Short relative time, e.g. "5 min ago"."""
    seconds = int((now - local_time(timestamp, now)).total_seconds())
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} min ago"
    hours = minutes // 60
    return f"{hours} hr ago"


def _format_entry(entry: Entry) -> str:
    when = entry.timestamp.strftime("%Y-%m-%d %H:%M")
    parts = [f"{entry.id[:8]}  {when}  {entry.emoji}"]
    if entry.person:
        parts.append(f"with {entry.person}")
    if entry.location:
        parts.append(f"at {entry.location}")
    line = "  ".join(parts)
    if entry.note:
        line += f"\n          \"{entry.note}\""
    return line


def _announce_unlocked(controller: JournalController) -> None:
    for badge in controller.newly_unlocked:
        print(f"🏆 Unlocked: {badge.icon} {badge.title} - {badge.description}")


def _report_status(controller: JournalController) -> None:
    if not controller.status.ok:
        print(f"Warning: could not refresh journal: {controller.status.error}")


def cmd_log(controller: JournalController, args: argparse.Namespace) -> int:
    """Log a new laugh."""
    entry = controller.log_laugh(
        mood=args.mood,
        person=args.person,
        location=args.location,
        note=args.note,
    )
    print(f"Logged {entry.emoji} ({entry.id[:8]})")
    _report_status(controller)
    _announce_unlocked(controller)
    return 0


def cmd_edit(controller: JournalController, args: argparse.Namespace) -> int:
    """Edit the mood, person or note of a laugh."""
    entry = controller.find_entry(args.id)
    if entry is None:
        print(f"Error: Entry '{args.id}' not found.")
        return 1

    controller.update_laugh(
        entry.id,
        mood=args.mood or entry.mood,
        person=args.person if args.person is not None else entry.person,
        note=args.note if args.note is not None else entry.note,
    )
    print(f"Updated {entry.id[:8]}")
    _report_status(controller)
    _announce_unlocked(controller)
    return 0


def cmd_delete(controller: JournalController, args: argparse.Namespace) -> int:
    """Delete a laugh."""
    entry = controller.find_entry(args.id)
    if entry is None:
        print(f"Error: Entry '{args.id}' not found.")
        return 1

    controller.delete_laugh(entry.id)
    print(f"Deleted {entry.id[:8]}")
    _report_status(controller)
    return 0


def cmd_list(controller: JournalController, args: argparse.Namespace) -> int:
    """List journal entries, newest first."""
    snapshot = controller.snapshot
    entries = list(snapshot.entries)

    if args.date:
        try:
            day = date.fromisoformat(args.date)
        except ValueError:
            print(f"Error: Invalid date '{args.date}'. Use YYYY-MM-DD.")
            return 1
        entries = entries_on(entries, day, snapshot.now)

    if args.limit:
        entries = entries[: args.limit]

    if not entries:
        print("No laughs logged yet.")
        return 0

    for entry in entries:
        print(_format_entry(entry))

    print(f"\nTotal: {len(entries)} laugh(s)")
    return 0


def cmd_stats(controller: JournalController, args: argparse.Namespace) -> int:
    """Show the dashboard statistics."""
    snapshot = controller.snapshot
    stats = snapshot.stats

    last = PLACEHOLDER
    if stats.last_laugh is not None:
        last = format_relative(stats.last_laugh, snapshot.now)

    print(f"\nToday:          {stats.today_count}")
    print(f"Streak:         {stats.streak}")
    print(f"Last laugh:     {last}")
    print(f"Top person:     {stats.top_person or PLACEHOLDER}")
    print(f"Top location:   {stats.top_location or PLACEHOLDER}")
    print(f"Total:          {len(snapshot.entries)}")

    print("\nLast 7 days")
    print("-" * 40)
    peak = max(stats.weekly_chart.values(), default=0) or 1
    for day, count in stats.weekly_chart.items():
        bar = "█" * round(20 * count / peak) if count else ""
        print(f"{day.strftime('%a %d')}  {bar} {count}")

    print(f"\n\"{controller.daily_quote()}\"")
    return 0


def cmd_badges(controller: JournalController, args: argparse.Namespace) -> int:
    """Show the trophy case."""
    badges = controller.snapshot.badges
    unlocked = sum(1 for b in badges if b.is_unlocked)

    print(f"\nYour Trophy Case: {unlocked} / {len(badges)} Unlocked")
    print("-" * 60)
    for badge in badges:
        if args.unlocked and not badge.is_unlocked:
            continue
        icon = badge.icon if badge.is_unlocked else "🔒"
        print(f"{icon}  {badge.title:<20} {badge.description}")
    return 0


def cmd_calendar(controller: JournalController, args: argparse.Namespace) -> int:
    """Show a month with a laugh count under each day."""
    snapshot = controller.snapshot
    if args.month:
        try:
            first = datetime.strptime(args.month, "%Y-%m").date()
        except ValueError:
            print(f"Error: Invalid month '{args.month}'. Use YYYY-MM.")
            return 1
    else:
        first = snapshot.now.date().replace(day=1)

    by_date = snapshot.stats.laughs_by_date
    cal = calendar.Calendar(firstweekday=calendar.SUNDAY)

    print(f"\n{first.strftime('%B %Y'):^34}")
    print(" ".join(f"{name:>4}" for name in ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")))
    for week in cal.monthdatescalendar(first.year, first.month):
        days = []
        counts = []
        for day in week:
            in_month = day.month == first.month
            days.append(f"{day.day:>4}" if in_month else "    ")
            count = by_date.get(day, 0) if in_month else 0
            counts.append(f"{'•' * min(count, 3):>4}" if count else "    ")
        print(" ".join(days))
        print(" ".join(counts))
    return 0


def cmd_people(controller: JournalController, args: argparse.Namespace) -> int:
    """Manage the people quick-pick list."""
    action = args.action or "list"

    if action == "add":
        if controller.add_person(args.name):
            print(f"Added: {args.name}")
        else:
            print(f"'{args.name}' is empty or already in the list.")
        return 0

    if action == "remove":
        if not controller.remove_person(args.name):
            print(f"Error: '{args.name}' is not in the list.")
            return 1
        print(f"Removed: {args.name}")
        return 0

    if action == "move":
        try:
            controller.move_person(args.source, args.destination)
        except IndexError as e:
            print(f"Error: {e}")
            return 1

    for index, name in enumerate(controller.people):
        print(f"{index}. {name}")
    return 0


def cmd_export(controller: JournalController, args: argparse.Namespace) -> int:
    """Export the journal as CSV."""
    text = controller.export_csv()
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Exported to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def cmd_quote(controller: JournalController, args: argparse.Namespace) -> int:
    """Print the quote of the day."""
    print(controller.daily_quote())
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the LaughMeter CLI."""
    parser = argparse.ArgumentParser(
        prog="laughmeter",
        description="Log your laughs, track your mood, unlock achievements.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    log_parser = subparsers.add_parser("log", help="Log a laugh")
    log_parser.add_argument("--mood", "-m", choices=sorted(MOODS), default="smile")
    log_parser.add_argument("--person", "-p", help="Who you were with")
    log_parser.add_argument("--location", "-l", help="Where it happened")
    log_parser.add_argument("--note", "-n", help="A note about it")
    log_parser.set_defaults(func=cmd_log)

    edit_parser = subparsers.add_parser("edit", help="Edit a laugh")
    edit_parser.add_argument("id", help="Entry id or id prefix")
    edit_parser.add_argument("--mood", "-m", choices=sorted(MOODS))
    edit_parser.add_argument("--person", "-p")
    edit_parser.add_argument("--note", "-n")
    edit_parser.set_defaults(func=cmd_edit)

    delete_parser = subparsers.add_parser("delete", help="Delete a laugh")
    delete_parser.add_argument("id", help="Entry id or id prefix")
    delete_parser.set_defaults(func=cmd_delete)

    list_parser = subparsers.add_parser("list", help="List laughs")
    list_parser.add_argument("--date", "-d", help="Only this day (YYYY-MM-DD)")
    list_parser.add_argument("--limit", type=int, default=0)
    list_parser.set_defaults(func=cmd_list)

    stats_parser = subparsers.add_parser("stats", help="Show statistics")
    stats_parser.set_defaults(func=cmd_stats)

    badges_parser = subparsers.add_parser("badges", help="Show achievements")
    badges_parser.add_argument("--unlocked", "-u", action="store_true", help="Only unlocked badges")
    badges_parser.set_defaults(func=cmd_badges)

    calendar_parser = subparsers.add_parser("calendar", help="Show a month")
    calendar_parser.add_argument("--month", help="Month to show (YYYY-MM)")
    calendar_parser.set_defaults(func=cmd_calendar)

    people_parser = subparsers.add_parser("people", help="Manage quick-pick people")
    people_sub = people_parser.add_subparsers(dest="action")
    people_sub.add_parser("list", help="List people")
    add_parser = people_sub.add_parser("add", help="Add a person")
    add_parser.add_argument("name")
    remove_parser = people_sub.add_parser("remove", help="Remove a person")
    remove_parser.add_argument("name")
    move_parser = people_sub.add_parser("move", help="Reorder a person")
    move_parser.add_argument("source", type=int)
    move_parser.add_argument("destination", type=int)
    people_parser.set_defaults(func=cmd_people)

    export_parser = subparsers.add_parser("export", help="Export journal to CSV")
    export_parser.add_argument("--output", "-o", help="File to write (default: stdout)")
    export_parser.set_defaults(func=cmd_export)

    quote_parser = subparsers.add_parser("quote", help="Quote of the day")
    quote_parser.set_defaults(func=cmd_quote)

    return parser


def run_cli(argv: list[str] | None = None, config: AppConfig | None = None) -> int:
    """Run the LaughMeter CLI.

    Args:
        argv: Command-line arguments (without the program name).
        config: Paths to use. Read from the environment if None.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    controller = _get_controller(config or config_from_env())
    try:
        if controller.snapshot is None and args.command in SNAPSHOT_COMMANDS:
            print(f"Error: could not read journal: {controller.status.error}")
            return 1
        return args.func(controller, args)
    except sqlite3.Error as e:
        print(f"Error: {e}")
        return 1
    finally:
        controller.store.close()
