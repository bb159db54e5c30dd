import pytest

from animation.models import AnimatorStatus
from animation.policy import AnimationPolicy
from animation.session import RouteSession
from catalog.models import Catalog, Location
from routing.route_service import build_route


@pytest.fixture
def fits():
    return []


@pytest.fixture
def frames():
    return []


@pytest.fixture
def session(catalog, scheduler, fits, frames):
    return RouteSession(
        catalog,
        policy=AnimationPolicy(tick_ms=1000, arc_segments=200),
        scheduler=scheduler,
        on_frame=frames.append,
        on_fit=fits.append,
    )


def test_origin_defaults_to_base_location(session):
    assert session.origin == "MEL"
    assert session.route is None
    assert session.state is None


def test_select_destination_builds_route_and_starts(session, fits, frames, catalog, scheduler):
    route = session.select_destination("SYD")

    assert route.from_location == catalog["MEL"]
    assert route.to_location == catalog["SYD"]
    assert len(route.curve) == 201
    assert route.start == catalog["MEL"].coordinates
    assert route.end == catalog["SYD"].coordinates

    assert len(fits) == 1
    assert fits[0].max_zoom == 4
    assert session.fit_directive is fits[0]

    assert frames[0].cursor_index == 0
    assert session.state.status == AnimatorStatus.RUNNING
    assert len(scheduler.pending) == 1


def test_fit_is_emitted_once_per_route_not_per_tick(session, fits, scheduler):
    session.select_destination("PER")
    scheduler.advance(50.0)

    assert session.state.cursor_index == 50
    assert len(fits) == 1


def test_unknown_destination_yields_no_route(session, fits, scheduler):
    session.select_destination("SYD")
    scheduler.advance(3.0)

    route = session.select_destination("XXX")

    assert route is None
    assert session.route is None
    assert session.fit_directive is None
    assert scheduler.pending == []
    assert len(fits) == 1


def test_reselecting_same_destination_restarts(session, fits, scheduler):
    first = session.select_destination("SYD")
    scheduler.advance(20.0)
    assert session.state.cursor_index == 20

    second = session.select_destination("SYD")

    assert second is not first
    assert session.state.cursor_index == 0
    assert len(scheduler.pending) == 1
    assert len(fits) == 2


def test_switching_destination_mid_flight(session, scheduler, frames):
    session.select_destination("SYD")
    scheduler.advance(10.0)

    route = session.select_destination("HBA")
    frames.clear()
    scheduler.advance(1.0)

    assert frames[0].position == route.curve[1]
    assert session.selection.destination == "HBA"


def test_flight_completes(session, scheduler, catalog):
    session.select_destination("CBR")
    scheduler.advance(500.0)

    assert session.state.status == AnimatorStatus.DONE
    assert session.state.position == catalog["CBR"].coordinates
    assert scheduler.pending == []


def test_origin_as_destination_is_valid(session, catalog):
    route = session.select_destination("MEL")

    assert route is not None
    assert len(route.curve) == 201
    assert route.start == route.end == catalog["MEL"].coordinates


def test_select_origin_rebuilds_current_route(session, catalog):
    session.select_destination("SYD")
    route = session.select_origin("BNE")

    assert route.from_location == catalog["BNE"]
    assert route.to_location == catalog["SYD"]
    assert session.selection.origin == "BNE"


def test_close_stops_ticks(session, scheduler, frames):
    session.select_destination("SYD")
    session.close()
    emitted = len(frames)

    scheduler.advance(100.0)

    assert len(frames) == emitted
    assert scheduler.pending == []


def test_context_manager_closes(catalog, scheduler):
    with RouteSession(catalog, scheduler=scheduler) as session:
        session.select_destination("ADL")
    assert session.animator.closed
    assert scheduler.pending == []


def test_catalog_without_base_needs_origin(scheduler):
    catalog = Catalog([Location("AAA", "A", (0.0, 0.0), 10)])
    with pytest.raises(ValueError):
        RouteSession(catalog, scheduler=scheduler)


def test_build_route_unknown_codes(catalog):
    assert build_route(catalog, "MEL", "XXX") is None
    assert build_route(catalog, "XXX", "SYD") is None
    assert len(build_route(catalog, "MEL", "SYD", segments=10).curve) == 11


def test_unknown_destination_returns_animator_to_idle(session, scheduler, frames):
    session.select_destination("SYD")
    scheduler.advance(3.0)

    session.select_destination("XXX")
    emitted = len(frames)
    scheduler.advance(100.0)

    assert session.state is None
    assert session.animator.status == AnimatorStatus.IDLE
    assert session.animator.curve == ()
    assert len(frames) == emitted

    # a valid pick afterwards flies again from the start
    session.select_destination("SYD")
    assert session.state.cursor_index == 0
    assert session.state.status == AnimatorStatus.RUNNING
