import argparse

from conference_data.config import FAVORITES_DIR, SCHEDULE_URL, SEGMENT_ALL, SEGMENT_FAVORITES
from conference_data.overview import timeline_overview
from conference_data.provider import ConferenceData
from favorites_store import FavoritesStore


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print the filtered conference timeline.")
    parser.add_argument("--source", default=SCHEDULE_URL, help="Schedule URL or local JSON file.")
    parser.add_argument("--day", type=int, default=None, help="Day index (default: all days).")
    parser.add_argument("--query", default="", help="Free-text filter on session names.")
    parser.add_argument("--exclude", action="append", default=[], help="Track to exclude (repeatable).")
    parser.add_argument("--favorites", metavar="USER_ID", default=None, help="Only show this user's favorites.")
    args = parser.parse_args(argv)

    favorites = FavoritesStore(args.favorites, base_dir=FAVORITES_DIR) if args.favorites else None
    provider = ConferenceData(source=args.source, favorites=favorites)
    days = provider.get_timeline(
        day_index=args.day,
        query_text=args.query,
        exclude_tracks=args.exclude,
        segment=SEGMENT_FAVORITES if favorites else SEGMENT_ALL,
    )
    print(timeline_overview(days))


if __name__ == "__main__":
    main()
