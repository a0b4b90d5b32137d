#!/usr/bin/env python3
"""
LLM Psychometrics — Profile Runner CLI

Administers inventories to a model through OpenRouter, stores the run and
browses stored results.  Three subcommands:

  run          — Administer inventories to one model/persona and save the run.
  leaderboard  — Print per model/persona averages over stored runs.
  show         — Print the aggregated profile of one model.

Usage examples
--------------
  # Full battery against a base model
  python scripts/run_profile.py run openai/gpt-4o-mini

  # Big Five only, as a persona, without saving
  python scripts/run_profile.py run openai/gpt-4o-mini -i bigfive \\
      --persona "Pirate" --system-prompt "You are a pirate." --no-save

  python scripts/run_profile.py leaderboard
  python scripts/run_profile.py show openai/gpt-4o-mini --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

# Ensure the project root is importable
sys.path.insert(0, ".")

from psychometrics.config import get_settings
from psychometrics.database import create_tables
from psychometrics.item_banks import INVENTORY_KEYS
from psychometrics.main import configure_logging
from psychometrics.schemas.inventory import ModelProfile
from psychometrics.services.aggregation_service import AggregationService
from psychometrics.services.assessment_service import AssessmentService
from psychometrics.services.openrouter_service import OpenRouterService
from psychometrics.services.run_service import RunService


# ──────────────────────────────────────────────────────────────────────────────
# Output helpers
# ──────────────────────────────────────────────────────────────────────────────

def _print_profile(profile: ModelProfile) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {profile.model_name} [{profile.persona}]")
    print(f"{'=' * 60}")
    for key, result in profile.results.items():
        print(f"\n  {result.inventory_name} ({key})")
        if result.type:
            print(f"    Type: {result.type}")
        for trait, score in result.trait_scores.items():
            if trait.startswith("_raw_"):
                continue
            print(f"    {trait:<18} {score:8.2f}")
        if result.psi:
            psi = ", ".join(f"{d}={v:.2f}" for d, v in result.psi.items())
            print(f"    PSI: {psi}")
    print()


def _progress(done: int, total: int) -> None:
    print(f"\r  Progress: {done}/{total} items", end="", file=sys.stderr, flush=True)
    if done == total:
        print(file=sys.stderr)


# ──────────────────────────────────────────────────────────────────────────────
# Subcommands
# ──────────────────────────────────────────────────────────────────────────────

async def cmd_run(args: argparse.Namespace) -> None:
    """Administer the selected inventories and optionally persist the run."""
    settings = get_settings()
    if not settings.OPENROUTER_API_KEY:
        print("OPENROUTER_API_KEY is not set.", file=sys.stderr)
        sys.exit(1)

    async with OpenRouterService() as client:
        service = AssessmentService(
            client,
            samples_per_item=args.samples,
            chunk_size=args.chunk_size,
        )
        profile = await service.run_assessment(
            model=args.model,
            inventories=args.inventories,
            persona=args.persona,
            system_prompt=args.system_prompt,
            progress=_progress,
            enable_calibration=not args.no_calibration,
        )

    if args.verbose:
        for entry in profile.logs or []:
            print(f"  [{entry.timestamp}] {entry.type:<7} {entry.message}")

    if args.json:
        print(profile.model_dump_json(indent=2))
    else:
        _print_profile(profile)

    if not args.no_save:
        await create_tables()
        run_id = await RunService().save_run(profile)
        print(f"  Saved run {run_id}")


async def cmd_leaderboard(args: argparse.Namespace) -> None:
    """Print the leaderboard over stored runs."""
    await create_tables()
    profiles = await RunService().list_profiles(limit=args.limit)
    entries = AggregationService().build_leaderboard(profiles)

    if args.json:
        print(json.dumps([e.model_dump() for e in entries], indent=2))
        return

    print(f"\n  {'Model':<40} {'Persona':<16} {'Runs':>4}  {'MBTI':<5} "
          f"{'N':>6} {'E':>6} {'O':>6} {'A':>6} {'C':>6}")
    for e in entries:
        s = e.scores
        print(f"  {e.name:<40} {e.persona:<16} {e.count:>4}  {e.mbti:<5} "
              f"{s['N']:6.1f} {s['E']:6.1f} {s['O']:6.1f} {s['A']:6.1f} {s['C']:6.1f}")
    print()


async def cmd_show(args: argparse.Namespace) -> None:
    """Print the aggregated profile for one model."""
    await create_tables()
    profiles = await RunService().list_profiles(model_name=args.model)
    profile = AggregationService().aggregate_model_profile(args.model, profiles)
    if profile is None:
        print(f"No runs recorded for model '{args.model}'.", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(profile.model_dump_json(indent=2))
    else:
        _print_profile(profile)


# ──────────────────────────────────────────────────────────────────────────────
# CLI entry point
# ──────────────────────────────────────────────────────────────────────────────

def main() -> None:
    parser = argparse.ArgumentParser(
        description="LLM Psychometrics — administer inventories and browse results.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available subcommands")

    # ── run ───────────────────────────────────────────────────────────
    run_parser = subparsers.add_parser("run", help="Administer inventories to a model.")
    run_parser.add_argument("model", help="OpenRouter model id, e.g. openai/gpt-4o-mini.")
    run_parser.add_argument(
        "--inventories", "-i",
        nargs="+",
        choices=INVENTORY_KEYS,
        default=list(INVENTORY_KEYS),
        help="Inventories to administer (default: all).",
    )
    run_parser.add_argument("--persona", default=None, help="Persona label stored with the run.")
    run_parser.add_argument("--system-prompt", default="", help="System prompt for the persona.")
    run_parser.add_argument("--samples", type=int, default=None, help="Samples per item.")
    run_parser.add_argument("--chunk-size", type=int, default=None, help="Items queried concurrently.")
    run_parser.add_argument("--no-calibration", action="store_true", default=False)
    run_parser.add_argument("--no-save", action="store_true", default=False)
    run_parser.add_argument("--json", action="store_true", default=False)
    run_parser.add_argument("--verbose", "-v", action="store_true", default=False,
                            help="Print the verification log.")

    # ── leaderboard ───────────────────────────────────────────────────
    lb_parser = subparsers.add_parser("leaderboard", help="Print the leaderboard.")
    lb_parser.add_argument("--limit", type=int, default=None)
    lb_parser.add_argument("--json", action="store_true", default=False)

    # ── show ──────────────────────────────────────────────────────────
    show_parser = subparsers.add_parser("show", help="Print one model's aggregated profile.")
    show_parser.add_argument("model")
    show_parser.add_argument("--json", action="store_true", default=False)

    args = parser.parse_args()
    configure_logging(get_settings().LOG_LEVEL)

    if args.command == "run":
        asyncio.run(cmd_run(args))
    elif args.command == "leaderboard":
        asyncio.run(cmd_leaderboard(args))
    elif args.command == "show":
        asyncio.run(cmd_show(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
