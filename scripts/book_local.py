#!/usr/bin/env python3
"""
Interactive local booking harness (no HTTP).

Usage:
  python3 scripts/book_local.py

Drives one BookingFlow built from the project wiring (static directory and
mock gateway in dev) and prints the step, the options and the draft after
every command.
"""

from __future__ import annotations

import asyncio
import shlex
import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from salon_booking.application.exceptions import FlowStateError
from salon_booking.application.use_cases.booking_flow import BookingFlow
from salon_booking.application.use_cases.selection import total_duration_minutes, total_price
from salon_booking.application.utils.formatting import format_long_date, format_price, format_time_12h
from salon_booking.domain.entities.booking_step import BookingStep
from salon_booking.wiring.dependencies import new_booking_flow

HELP = """Commands:
  toggle <service_id>     location <location_id>   stylist <stylist_id|any>
  date <yyyy-mm-dd>       time <HH:MM>             details <field> <value>
  next   back   submit   show   /quit"""


def _print_options(flow: BookingFlow) -> None:
    if flow.step == BookingStep.service:
        for category, entries in flow.services_by_category.items():
            print(f"  [{category}]")
            for e in entries:
                price = f" - {format_price(e.price)}" if e.price else ""
                print(f"    {e.id}: {e.name} ({e.duration_minutes} min){price}")
    elif flow.step == BookingStep.location:
        for loc in flow.locations:
            print(f"  {loc.id}: {loc.name} {loc.address or ''}")
    elif flow.step == BookingStep.stylist:
        print("  any: First Available")
        for s in flow.stylists:
            print(f"  {s.id}: {s.name}")
    elif flow.step == BookingStep.datetime:
        print("  dates: " + ", ".join(d.isoformat() for d in flow.available_dates()))
        if flow.draft.date:
            print("  times: " + ", ".join(flow.time_slots()))


def _print_state(flow: BookingFlow) -> None:
    draft = flow.draft
    print("-" * 60)
    if flow.confirmation:
        c = flow.confirmation
        print("Booking confirmed")
        print(f"  {', '.join(c.service_names)} at {c.location_name}")
        print(f"  {format_long_date(c.date)} at {format_time_12h(c.time)}")
        print(f"  We've sent a confirmation email to {c.client_email}")
        return
    print(f"step: {flow.step.value}  can_proceed={flow.can_proceed}")
    print(
        f"services: {[s.name for s in draft.services]} "
        f"({total_duration_minutes(draft)} min, {format_price(total_price(draft))})"
    )
    print(f"location: {draft.location_name}  stylist: {draft.stylist_name}")
    print(f"date: {draft.date}  time: {draft.time}")
    print(f"client: {draft.client_name} / {draft.client_email} / {draft.client_phone}")
    _print_options(flow)


async def _run_command(flow: BookingFlow, parts: list[str]) -> None:
    cmd, args = parts[0], parts[1:]
    if cmd == "toggle":
        flow.toggle_service(args[0])
    elif cmd == "location":
        await flow.select_location(args[0])
    elif cmd == "stylist":
        flow.select_stylist(args[0])
    elif cmd == "date":
        flow.select_date(date.fromisoformat(args[0]))
    elif cmd == "time":
        flow.select_time(args[0])
    elif cmd == "details":
        flow.update_details(**{args[0]: " ".join(args[1:])})
    elif cmd == "next":
        flow.next()
    elif cmd == "back":
        flow.back()
    elif cmd == "submit":
        result = await flow.submit()
        print(result.notification)
    elif cmd != "show":
        print(HELP)


async def main() -> None:
    flow = new_booking_flow()
    await flow.load_services()
    await flow.load_locations()
    print("\nLocal Booking Harness")
    print(HELP)
    _print_state(flow)

    while True:
        try:
            line = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not line:
            continue
        if line in {"/quit", "/exit"}:
            return
        try:
            await _run_command(flow, shlex.split(line))
        except (LookupError, ValueError, FlowStateError) as e:
            print(f"! {e}")
        _print_state(flow)


if __name__ == "__main__":
    asyncio.run(main())
