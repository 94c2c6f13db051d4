#!/usr/bin/env python3
"""Post-build step: report a finished build to the SMS notifier service.

Requires the notifier to be running:
    python -m sms_notifier

Usage:
    python scripts/notify_build.py --project NAME --number N --status FAILURE \
        --recipients "+79991234567,+79997654321" [--notifier-url URL]
"""

import argparse
import sys
from datetime import datetime

import httpx

from sms_notifier.log import StreamBuildLog

STATUSES = ["SUCCESS", "UNSTABLE", "FAILURE", "NOT_BUILT", "ABORTED"]


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a build status SMS")
    parser.add_argument("--project", required=True, help="Job name")
    parser.add_argument("--number", required=True, type=int, help="Build number")
    parser.add_argument("--status", required=True, choices=STATUSES)
    parser.add_argument(
        "--recipients",
        required=True,
        help="Comma-separated phone numbers",
    )
    parser.add_argument(
        "--notifier-url",
        default="http://localhost:8000",
        help="SMS notifier base URL (default: http://localhost:8000)",
    )
    args = parser.parse_args()

    body = {
        "recipients": args.recipients,
        "build": {
            "number": args.number,
            "project_name": args.project,
            "status": args.status,
            "timestamp": datetime.now().isoformat(timespec="seconds"),
        },
    }

    build_log = StreamBuildLog(sys.stdout)

    with httpx.Client(base_url=args.notifier_url, timeout=60.0) as client:
        try:
            resp = client.post("/notifications", json=body)
        except httpx.ConnectError:
            build_log.error(f"Cannot connect to {args.notifier_url}")
            build_log.info("Make sure the notifier is running: python -m sms_notifier")
            # Notification problems never fail the build.
            sys.exit(0)

        if resp.status_code != 200:
            build_log.error(f"Notifier rejected the request {resp.status_code}: {resp.text}")
            sys.exit(0)

        for result in resp.json()["results"]:
            recipient = result["recipient"] or "<empty>"
            if result["success"]:
                build_log.info(f"SMS sent to {recipient}")
            else:
                build_log.error(f"Failed to send SMS notification to {recipient}: {result['error']}")


if __name__ == "__main__":
    main()
