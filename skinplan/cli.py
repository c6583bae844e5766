"""
Command-line entry point: reads a survey JSON document, prints the plan.

    skinplan survey.json
    cat survey.json | skinplan --profile
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from skinplan.config import get_settings
from skinplan.errors import InvalidInput
from skinplan.services.plan import build_plan, parse_survey
from skinplan.services.profile import derive_profile

logger = logging.getLogger(__name__)


def _read_survey(path: Optional[str]) -> dict:
    if path is None or path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="skinplan", description="Build a skincare plan from a survey response")
    parser.add_argument("survey", nargs="?", help="path to survey JSON (default: stdin)")
    parser.add_argument("--profile", action="store_true", help="print the personalization profile instead of the plan")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    try:
        data = _read_survey(args.survey)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read survey: {str(e)}")
        return 1

    try:
        survey = parse_survey(data)
        result = derive_profile(survey) if args.profile else build_plan(survey, settings)
    except InvalidInput as e:
        for error in e.errors:
            logger.error(error)
        return 2

    print(result.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
