#!/usr/bin/env python3
"""
Print launch conditions for a perfectly timed swing with every club in the bag.
"""

import argparse

from swing_impact.log import configure_logging
from swing_impact.services.club_comparison import compare_clubs


def main():
    """Run the club comparison."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("clubs", nargs="*", help="club ids, defaults to the standard bag")
    parser.add_argument("--tempo", type=float, default=1.0)
    parser.add_argument("--surface", default="FAIRWAY")
    args = parser.parse_args()

    configure_logging(level="WARNING", json_output=False)

    rows = compare_clubs(args.clubs or None, tempo=args.tempo, surface_key=args.surface)

    print(f"{'Club':<16}{'Club mph':>9}{'Ball mph':>9}{'Smash':>7}{'Launch':>8}{'AoA':>7}{'Backspin':>10}{'Strike':>10}")
    for row in rows:
        print(
            f"{row.name:<16}{row.club_speed:>9.1f}{row.ball_speed:>9.1f}{row.smash_factor:>7.2f}"
            f"{row.launch_angle:>8.1f}{row.attack_angle:>7.1f}{row.backspin:>10.0f}{row.strike_quality:>10}"
        )


if __name__ == "__main__":
    main()
