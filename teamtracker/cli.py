from __future__ import annotations

import argparse
import json
import logging
from typing import Any, List

from dotenv import load_dotenv

from .airtable_client import AirtableClient
from .config import config_from_env
from .errors import InsufficientDataError, TrackerError
from .llm_client import ReportWriter
from .render import render_text
from .report import build_season_focus_job


def _read_games(path: str) -> List[Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("games") or data.get("records") or []
    return [r.get("fields", r) if isinstance(r, dict) else r for r in data]


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Season trend summary for a youth hockey team")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--games", default=None, help="Path to a JSON list of game rows")
    source.add_argument("--season", default=None, help="Season to fetch from Airtable (e.g. 2025-26)")
    parser.add_argument(
        "--output-format", choices=["json", "text"], default="text", help="Output format"
    )
    parser.add_argument("--report", action="store_true", help="Also write the season review with the LLM")
    parser.add_argument("--output", default=None, help="Path to write output to")
    parser.add_argument("--debug", action="store_true", help="Print debug logs")
    return parser.parse_args()


def main() -> None:
    load_dotenv()
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = config_from_env()

    try:
        if args.games:
            raw_games = _read_games(args.games)
        else:
            config.require_airtable()
            client = AirtableClient(
                token=config.airtable_token or "",
                base_id=config.airtable_base_id or "",
                table=config.airtable_table,
                timeout_s=config.request_timeout_s,
            )
            raw_games = client.list_records(season=args.season)

        job = build_season_focus_job(raw_games)
    except InsufficientDataError as exc:
        raise SystemExit(str(exc))
    except TrackerError as exc:
        raise SystemExit(f"Error: {exc}")

    computed = job.context["computed"]
    if args.output_format == "json":
        output_text = json.dumps(computed, indent=2)
    else:
        output_text = render_text(computed)

    if args.report:
        try:
            config.require_openai()
            writer = ReportWriter(
                api_key=config.openai_api_key or "",
                model=config.openai_model,
                timeout_s=config.request_timeout_s,
            )
            output_text += "\n\n" + writer.write(job.instruction, job.context)
        except TrackerError as exc:
            raise SystemExit(f"Error: {exc}")

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output_text)
    else:
        print(output_text)


if __name__ == "__main__":
    main()
