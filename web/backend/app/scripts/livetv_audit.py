#!/usr/bin/env python3
"""
Live TV Resolution Audit Script

Lists every live channel and tries to resolve each one, grouping them by:
- Resolved (a playable stream was found)
- Unavailable (the provider has nothing to play right now)
- Error (the provider raised while resolving)

Usage:
    cd web/backend
    python -m app.scripts.livetv_audit --concurrency 5

Output:
    data/livetv_audit_YYYYMMDD_HHMMSS.json
"""

import asyncio
import argparse
import json
import logging
import time
from datetime import datetime
from pathlib import Path

from app.config import get_settings
from app.models.channel import Channel
from app.services.livetv import LiveTVResolver
from app.services.registry import build_default_registry

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


CATEGORIES = {
    "resolved": "Resolved",
    "unavailable": "Unavailable",
    "error": "Error",
}


async def audit_channel(resolver: LiveTVResolver, channel: Channel) -> dict:
    """
    Resolve a single channel and return diagnostic info.
    """
    result = {
        "provider": channel.provider,
        "channel": channel.id,
        "name": channel.name,
        "category": "unavailable",
        "stream": None,
        "response_time_ms": None,
        "error": None,
    }

    start_time = time.monotonic()
    try:
        stream = await resolver.resolve_live_stream(channel.provider, channel.id)
        if stream is not None:
            result["category"] = "resolved"
            result["stream"] = stream.model_dump()
    except Exception as e:
        result["category"] = "error"
        result["error"] = f"{type(e).__name__}: {str(e)}"

    result["response_time_ms"] = round((time.monotonic() - start_time) * 1000, 2)
    return result


async def run_audit(resolver: LiveTVResolver, concurrency: int = 5) -> dict:
    """
    Run the resolution audit over every listed channel.
    """
    channels = await resolver.get_all_live_channels()
    logger.info(f"Listed {len(channels)} channels from {len(resolver.registry)} providers")

    if not channels:
        logger.error("No channels listed by any provider!")
        return {}

    semaphore = asyncio.Semaphore(concurrency)

    async def audit_with_semaphore(channel):
        async with semaphore:
            return await audit_channel(resolver, channel)

    logger.info(f"Resolving {len(channels)} channels (concurrency: {concurrency})...")
    results = await asyncio.gather(*(audit_with_semaphore(ch) for ch in channels))

    summary = {cat: 0 for cat in CATEGORIES.keys()}
    for r in results:
        summary[r["category"]] += 1

    per_provider = {}
    for r in results:
        counts = per_provider.setdefault(r["provider"], {cat: 0 for cat in CATEGORIES.keys()})
        counts[r["category"]] += 1

    return {
        "timestamp": datetime.now().isoformat(),
        "channel_count": len(channels),
        "concurrency": concurrency,
        "summary": summary,
        "percentages": {k: round(v / len(channels) * 100, 1) for k, v in summary.items()},
        "providers": per_provider,
        "results": results,
    }


def print_summary(report: dict):
    """
    Print a human-readable summary of the audit.
    """
    print("\n" + "=" * 60)
    print("LIVE TV RESOLUTION AUDIT")
    print("=" * 60)
    print(f"Channels: {report['channel_count']}")
    print(f"Time: {report['timestamp']}")
    print("-" * 60)

    for category, count in report["summary"].items():
        pct = report["percentages"][category]
        bar = "#" * int(pct / 2)
        print(f"{CATEGORIES[category]:15} {count:5} ({pct:5.1f}%) {bar}")

    print("-" * 60)

    for provider, counts in report["providers"].items():
        print(f"{provider:20} " + "  ".join(f"{k}={v}" for k, v in counts.items()))

    errors = [r for r in report["results"] if r["category"] == "error"][:5]
    if errors:
        print("\nERRORS (sample):")
        for r in errors:
            print(f"   - {r['provider']}/{r['channel']}: {r['error']}")

    print("\n" + "=" * 60)


async def main():
    parser = argparse.ArgumentParser(description="Live TV Resolution Audit")
    parser.add_argument(
        "--concurrency", "-c",
        type=int,
        default=5,
        help="Concurrent resolutions (default: 5)"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file path (default: data/livetv_audit_TIMESTAMP.json)"
    )

    args = parser.parse_args()

    resolver = LiveTVResolver(build_default_registry(get_settings()))
    report = await run_audit(resolver, args.concurrency)

    if not report:
        print("Audit failed - no channels")
        return

    print_summary(report)

    output_path = args.output or f"data/livetv_audit_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2, default=str)

    print(f"\nFull report saved to: {output_path}")


if __name__ == "__main__":
    asyncio.run(main())
