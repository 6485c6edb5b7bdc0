#!/usr/bin/env python3
"""Log viewer and analyzer for ping server logs."""

import argparse
import re
import statistics
import sys
import time
from collections import Counter, deque
from pathlib import Path
from typing import Any, Dict, List

# ANSI color codes
class Colors:
    RED = '\033[91m'
    YELLOW = '\033[93m'
    GREEN = '\033[92m'
    RESET = '\033[0m'

DEFAULT_LINES = 50
FOLLOW_SLEEP = 0.1

LOG_FILES = {
    "main": "ping_server.log",
    "error": "ping_server_errors.log",
    "access": "ping_server_access.log"
}

PING_PATTERN = re.compile(r'path=/ping(?:\s|\||$)')
STATUS_PATTERN = re.compile(r'status=(\d{3})')
RESPONSE_TIME_PATTERN = re.compile(r'response_time=([\d.]+)s')


def tail_file(filepath: Path, lines: int = DEFAULT_LINES) -> List[str]:
    """Get last N lines from file efficiently."""
    try:
        with filepath.open('r', encoding='utf-8') as f:
            return list(deque(f, maxlen=lines))
    except FileNotFoundError:
        return [f"Log file not found: {filepath}\n"]
    except (OSError, UnicodeDecodeError) as e:
        return [f"Error reading log file {filepath}: {e}\n"]


def colorize_line(line: str) -> str:
    """Apply color formatting to log line based on level."""
    line = line.rstrip()
    if "ERROR" in line:
        return f"{Colors.RED}{line}{Colors.RESET}"
    elif "WARNING" in line:
        return f"{Colors.YELLOW}{line}{Colors.RESET}"
    elif "INFO" in line:
        return f"{Colors.GREEN}{line}{Colors.RESET}"
    return line


def follow_log(filepath: Path) -> None:
    """Follow a log file in real-time (like tail -f)."""
    try:
        with filepath.open('r', encoding='utf-8') as f:
            f.seek(0, 2)

            while True:
                line = f.readline()
                if not line:
                    time.sleep(FOLLOW_SLEEP)
                    continue
                print(colorize_line(line))

    except KeyboardInterrupt:
        print("\nLog following stopped.")
    except FileNotFoundError:
        print(f"Log file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error following log file: {e}")


def collect_stats(log_dir: Path) -> Dict[str, Any]:
    """Collect request, status and timing statistics from the log files."""
    stats = {
        'total_requests': 0,
        'ping_requests': 0,
        'statuses': Counter(),
        'errors': 0,
        'warnings': 0,
        'response_times': []
    }

    main_log = log_dir / LOG_FILES["main"]
    if main_log.exists():
        with main_log.open('r', encoding='utf-8') as f:
            for line in f:
                if "| ERROR |" in line:
                    stats['errors'] += 1
                elif "| WARNING |" in line:
                    stats['warnings'] += 1

    access_log = log_dir / LOG_FILES["access"]
    if access_log.exists():
        with access_log.open('r', encoding='utf-8') as f:
            for line in f:
                if "method=" not in line:
                    continue
                stats['total_requests'] += 1
                if PING_PATTERN.search(line):
                    stats['ping_requests'] += 1

                status_match = STATUS_PATTERN.search(line)
                if status_match:
                    stats['statuses'][int(status_match.group(1))] += 1

                time_match = RESPONSE_TIME_PATTERN.search(line)
                if time_match:
                    stats['response_times'].append(float(time_match.group(1)))

    return stats


def analyze_logs(log_dir: Path) -> None:
    """Analyze logs and print a summary."""
    stats = collect_stats(log_dir)

    print("=" * 60)
    print("PING SERVER LOG ANALYSIS")
    print("=" * 60)

    print(f"Total Requests:     {stats['total_requests']}")
    print(f"  - Ping:           {stats['ping_requests']}")
    print(f"  - Other:          {stats['total_requests'] - stats['ping_requests']}")
    print()

    if stats['statuses']:
        print("Status Codes:")
        for status, count in sorted(stats['statuses'].items()):
            print(f"  - {status}:          {count}")
        print()

    print(f"Errors:             {stats['errors']}")
    print(f"Warnings:           {stats['warnings']}")
    print()

    if stats['response_times']:
        avg_time = statistics.mean(stats['response_times'])
        median_time = statistics.median(stats['response_times'])
        print(f"Average Response:   {avg_time:.3f} seconds")
        print(f"Median Response:    {median_time:.3f} seconds")
        print(f"Fastest Response:   {min(stats['response_times']):.3f} seconds")
        print(f"Slowest Response:   {max(stats['response_times']):.3f} seconds")

    print("=" * 60)


def main() -> None:
    """Main entry point for log viewer."""
    parser = argparse.ArgumentParser(description="Ping Server Log Viewer and Analyzer")
    parser.add_argument("--log-dir", type=Path, default=Path("logs"),
                       help="Directory containing log files")
    parser.add_argument("--lines", "-n", type=int, default=DEFAULT_LINES,
                       help="Number of lines to show")
    parser.add_argument("--follow", "-f", action="store_true",
                       help="Follow log in real-time")
    parser.add_argument("--analyze", "-a", action="store_true",
                       help="Analyze logs and show statistics")
    parser.add_argument("--file", choices=sorted(LOG_FILES), default="main",
                       help="Which log file to view")

    args = parser.parse_args()

    if not args.log_dir.exists():
        print(f"Log directory not found: {args.log_dir}")
        print("Make sure the server has been started at least once.")
        sys.exit(1)

    if args.analyze:
        analyze_logs(args.log_dir)
        return

    log_file = args.log_dir / LOG_FILES[args.file]

    if args.follow:
        print(f"Following {log_file} (Press Ctrl+C to stop)")
        print("-" * 60)
        follow_log(log_file)
    else:
        print(f"Last {args.lines} lines from {log_file}:")
        print("-" * 60)
        for line in tail_file(log_file, args.lines):
            print(colorize_line(line))


if __name__ == "__main__":
    main()
