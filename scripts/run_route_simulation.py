import argparse
import asyncio
import csv
import logging
import os
import time
from dataclasses import replace

from animation.models import AnimationState
from animation.policy import policy_from_env
from animation.scheduler import AsyncioScheduler
from animation.session import RouteSession
from catalog.loader import load_catalog
from routing.models import FitDirective


class FrameRecorder:
    """
    Stands in for the map widget: keeps every frame and fit directive it is handed.
    """
    def __init__(self, echo_every: int = 20):
        self.frames = []
        self.fits = []
        self.echo_every = echo_every
        self.finished = asyncio.Event()

    def on_frame(self, state: AnimationState):
        self.frames.append(state)
        if state.cursor_index % self.echo_every == 0 or state.is_done:
            lat, lon = state.position
            print(f"  [{state.cursor_index:>4}] ({lat:9.4f}, {lon:9.4f}) heading {state.heading:7.2f}  {state.status.value}")
        if state.is_done:
            self.finished.set()

    def on_fit(self, fit: FitDirective):
        self.fits.append(fit)
        print(f"Fit bounds SW={fit.southwest} NE={fit.northeast} padding={fit.padding} maxZoom={fit.max_zoom}")


async def fly(destination: str, tick_ms: int = None) -> FrameRecorder:
    policy = policy_from_env()
    if tick_ms is not None:
        policy = replace(policy, tick_ms=tick_ms)
        policy.validate()

    catalog = load_catalog(policy.catalog_path)
    recorder = FrameRecorder()

    with RouteSession(
        catalog,
        policy=policy,
        scheduler=AsyncioScheduler(),
        on_frame=recorder.on_frame,
        on_fit=recorder.on_fit,
    ) as session:
        print("Destinations:")
        for location in catalog.destinations(session.origin):
            print(f"  {location.code}  {location.name:<12} {location.fare_label}")
        print()

        route = session.select_destination(destination)
        if route is None:
            print(f"No route from {session.origin} to {destination}.")
            return recorder

        print(f"Flying {route.from_location.name} -> {route.to_location.name} ({len(route.curve)} points)")
        await recorder.finished.wait()

    return recorder


def run_simulation():
    parser = argparse.ArgumentParser(description="Fly the marker along one route headlessly.")
    parser.add_argument("destination", nargs="?", default="SYD")
    parser.add_argument("--tick-ms", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=== STARTING ROUTE ANIMATION SIMULATION ===")
    start_time = time.time()
    recorder = asyncio.run(fly(args.destination, args.tick_ms))

    # Save next to the project root
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = os.path.join(base_dir, "route_frames.csv")

    with open(output_path, "w", newline="") as file:
        writer = csv.writer(file)
        writer.writerow(["cursor_index", "lat", "lon", "heading", "status"])
        for state in recorder.frames:
            writer.writerow([state.cursor_index, state.position[0], state.position[1], round(state.heading, 4), state.status.value])

    print("\n=== SIMULATION COMPLETE ===")
    print(f"Frames emitted: {len(recorder.frames)} in {time.time() - start_time:.2f}s")
    print(f"Frames written to '{output_path}'.")


if __name__ == "__main__":
    run_simulation()
