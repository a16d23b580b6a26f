"""
Print the full career ranking for a Big Five / Holland profile.
Run from the project root: python scripts/rank_all_careers.py [profile.json]

profile.json holds {"bigFive": {...}, "holland": {...}}. Without it a
sample investigative/realistic profile is used.
"""
import json
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ingestion.catalog import get_default_catalog
from logger import setup_logging
from matching.engine import match_careers

SAMPLE_BIG_FIVE = {"O": 80, "C": 85, "E": 40, "A": 50, "N": 30}
SAMPLE_HOLLAND = {"R": 70, "I": 90, "A": 40, "S": 20, "E": 30, "C": 60}


def rank_profiles(big_five, holland):
    catalog = get_default_catalog()
    return match_careers(big_five, holland, top_n=len(catalog), catalog=catalog)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    setup_logging()

    if argv:
        with open(argv[0], encoding="utf-8") as f:
            profile = json.load(f)
        big_five, holland = profile.get("bigFive", {}), profile.get("holland", {})
    else:
        big_five, holland = SAMPLE_BIG_FIVE, SAMPLE_HOLLAND

    print("\n===== CAREER RANKINGS =====\n")
    print(f"Big Five: {big_five}")
    print(f"Holland:  {holland}\n")

    for rank, result in enumerate(rank_profiles(big_five, holland), start=1):
        print(f"{rank:3d}. {result.career.title:<30} | SCORE: {result.score:3d} | {result.match_level}")
        print(
            f"     holland:  {result.breakdown.holland_score:3d}\n"
            f"     big five: {result.breakdown.big_five_score:3d}\n"
        )


if __name__ == "__main__":
    main()
