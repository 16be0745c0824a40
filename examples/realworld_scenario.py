"""End-to-end scenario demonstrating the helper against a REST + LogInsight style API."""

from __future__ import annotations

import os
from typing import Any

from simple_http_helper import SimpleHttpResult, TransportError, create_helper

BASE_URL = os.getenv("SIMPLE_HTTP_DEMO_URL", "https://localhost:9543/api/v1")
USERNAME = os.getenv("SIMPLE_HTTP_USER", "admin")
PASSWORD = os.getenv("SIMPLE_HTTP_PASSWORD", "admin-password")


def log_section(title: str) -> None:
    print("\n" + "=" * 80)
    print(title)
    print("=" * 80)


def pretty_rows(rows: Any) -> None:
    if not rows:
        print("  (no data)")
        return
    if isinstance(rows, dict):
        rows = rows.get("events") or [rows]
    for row in rows:
        print("  " + repr(row))


def report(label: str, result: SimpleHttpResult) -> None:
    if result.is_success():
        print(f"→ {label}: ok ({result.status_code})")
        pretty_rows(result.content())
    else:
        print(f"→ {label}: failed ({result.status_code}) {result.error_message()}")


def main() -> None:
    log_section("Simple HTTP helper: Real-World Scenario")
    log_level = os.getenv("SIMPLE_HTTP_LOG", "info")
    helper = create_helper(BASE_URL, debug=True, log_level=log_level)
    helper.set_auth(USERNAME, PASSWORD)
    print(f"Talking to {BASE_URL} as {USERNAME}")

    try:
        log_section("Step 1: Create a dashboard")
        created = helper.post(
            "dashboards",
            configure=lambda c: c.attach_parameters({"name": "disk usage", "widgets": ["df", "iostat"]}),
        )
        report("create dashboard", created)

        log_section("Step 2: List dashboards")
        listed = helper.get("dashboards", configure=lambda c: c.attach_parameters({"limit": 5}))
        report("list dashboards", listed)

        log_section("Step 3: Query events")
        events = helper.loginsight_get(
            "events",
            configure=lambda c: c.attach_path_segment_parameters(
                {"text": ["CONTAINS disk", "CONTAINS full"], "hostname": "web01"}
            ),
        )
        report("query events", events)
    except TransportError as exc:
        print(f"→ Cannot reach {BASE_URL}: {exc}")


if __name__ == "__main__":
    main()
