from __future__ import annotations

import pytest

from liftsim import Car, Direction, InvalidFloor, Trip


def boarded(rider_id: str, origin: int, destination: int) -> Trip:
    trip = Trip(rider_id, origin, destination)
    trip.board()
    return trip


class TestCarBasics:
    def test_starts_on_ground_floor_heading_up(self):
        car = Car(0, top_floor=5)
        assert car.position == 0
        assert car.heading is Direction.UP
        assert car.active_trips == ()
        assert car.trace == ()

    def test_force_reposition(self):
        car = Car(0, top_floor=5)
        car.force_reposition(4, "DOWN")
        assert car.position == 4
        assert car.heading is Direction.DOWN

    @pytest.mark.parametrize("floor", [-1, 6])
    def test_force_reposition_rejects_floors_outside_building(self, floor):
        car = Car(0, top_floor=5)
        with pytest.raises(InvalidFloor):
            car.force_reposition(floor, Direction.UP)
        assert car.position == 0

    @pytest.mark.parametrize("field_name, value", [("current_floor", 99), ("direction", Direction.DOWN), ("trips", []), ("steps", [])])
    def test_state_cannot_be_injected_at_construction(self, field_name, value):
        with pytest.raises(TypeError):
            Car(0, top_floor=5, **{field_name: value})

    def test_assign_does_not_deduplicate(self):
        car = Car(0, top_floor=5)
        car.assign(Trip("A", 1, 2))
        car.assign(Trip("A", 1, 2))
        assert len(car.active_trips) == 2


class TestBoundaryBounce:
    def test_idle_car_flips_only_at_top(self):
        car = Car(0, top_floor=3)
        for expected in (1, 2, 3):
            car.step()
            assert car.position == expected
            assert car.heading is Direction.UP
        car.step()
        assert car.position == 2
        assert car.heading is Direction.DOWN

    def test_idle_car_flips_at_ground(self):
        car = Car(0, top_floor=3)
        car.force_reposition(1, Direction.DOWN)
        car.step()
        assert (car.position, car.heading) == (0, Direction.DOWN)
        car.step()
        assert (car.position, car.heading) == (1, Direction.UP)

    def test_single_floor_building_stays_put(self):
        car = Car(0, top_floor=0)
        car.step()
        assert car.position == 0
        assert car.heading is Direction.DOWN
        car.step()
        assert car.position == 0
        assert car.heading is Direction.UP


class TestNextStop:
    def test_defaults_to_adjacent_floor(self):
        car = Car(0, top_floor=10)
        car.force_reposition(4, Direction.UP)
        assert car.next_stop() == 5
        car.force_reposition(4, Direction.DOWN)
        assert car.next_stop() == 3

    def test_jumps_to_nearest_waiting_rider_ahead(self):
        car = Car(0, top_floor=10)
        car.force_reposition(2, Direction.UP)
        car.assign(Trip("far", 9, 0))
        car.assign(Trip("near", 6, 1))
        assert car.next_stop() == 6

    def test_ignores_waiting_riders_behind(self):
        car = Car(0, top_floor=10)
        car.force_reposition(3, Direction.DOWN)
        car.assign(Trip("A", 8, 9))
        assert car.next_stop() == 2

    def test_drop_off_before_pickup_wins(self):
        car = Car(0, top_floor=10)
        car.force_reposition(2, Direction.UP)
        car.assign(Trip("waiting", 7, 9))
        car.assign(boarded("riding", 2, 5))
        assert car.next_stop() == 5

    def test_pickup_before_drop_off_wins(self):
        car = Car(0, top_floor=10)
        car.force_reposition(2, Direction.UP)
        car.assign(Trip("waiting", 4, 9))
        car.assign(boarded("riding", 2, 8))
        assert car.next_stop() == 4

    def test_drop_off_without_pickups(self):
        car = Car(0, top_floor=10)
        car.force_reposition(9, Direction.DOWN)
        car.assign(boarded("riding", 9, 3))
        car.assign(boarded("other", 9, 6))
        assert car.next_stop() == 6

    def test_heading_down_looks_below(self):
        car = Car(0, top_floor=10)
        car.force_reposition(9, Direction.DOWN)
        car.assign(Trip("waiting", 4, 0))
        car.assign(boarded("riding", 9, 6))
        assert car.next_stop() == 6


class TestRunToQuiescence:
    def test_single_rider(self):
        car = Car(0, top_floor=5)
        car.assign(Trip("A", 2, 4))
        car.run_to_quiescence()

        assert car.position == 4
        assert car.active_trips == ()
        steps = [(e.rider_id, e.action, e.car_floor) for e in car.trace]
        assert steps == [
            ("A", "waiting", 0),
            ("A", "boarding", 2),
            ("A", "disembarking", 4),
        ]
        assert all(e.origin == 2 and e.destination == 4 for e in car.trace)

    def test_rider_already_at_car_floor_is_not_traced_waiting(self):
        car = Car(0, top_floor=5)
        car.assign(Trip("A", 0, 3))
        car.run_to_quiescence()
        assert [e.action for e in car.trace] == ["boarding", "disembarking"]

    def test_same_floor_trip_leaves_on_boarding(self):
        car = Car(0, top_floor=5)
        car.assign(Trip("D", 3, 3))
        car.run_to_quiescence()

        assert car.position == 3
        assert [(e.action, e.car_floor) for e in car.trace] == [
            ("waiting", 0),
            ("boarding", 3),
            ("disembarking", 3),
        ]

    def test_riders_sharing_a_floor_all_get_off(self):
        car = Car(0, top_floor=6)
        for rider in ("A", "B", "C"):
            car.assign(Trip(rider, 1, 4))
        car.run_to_quiescence()

        drop_offs = [e for e in car.trace if e.action == "disembarking"]
        assert [e.rider_id for e in drop_offs] == ["A", "B", "C"]
        assert {e.car_floor for e in drop_offs} == {4}

    def test_rider_going_down_is_collected_after_the_bounce(self):
        car = Car(0, top_floor=4)
        car.assign(Trip("A", 3, 1))
        car.run_to_quiescence()

        boarding = next(e for e in car.trace if e.action == "boarding")
        drop_off = next(e for e in car.trace if e.action == "disembarking")
        assert boarding.car_floor == 3
        assert drop_off.car_floor == 1
        assert drop_off.car_direction is Direction.DOWN

    def test_floor_stays_in_bounds_while_stepping(self):
        car = Car(0, top_floor=6)
        for i, (origin, destination) in enumerate([(5, 0), (6, 2), (1, 6), (0, 3), (4, 4)]):
            car.assign(Trip(f"R{i}", origin, destination))
        while car.active_trips:
            car.step()
            assert 0 <= car.position <= 6

    def test_trace_has_no_duplicate_keys(self):
        car = Car(0, top_floor=8)
        for i, (origin, destination) in enumerate([(3, 7), (3, 7), (7, 0), (2, 2)]):
            car.assign(Trip(f"R{i % 2}", origin, destination))
        car.run_to_quiescence()
        keys = [e.key for e in car.trace]
        assert len(keys) == len(set(keys))

    def test_returns_cycle_count(self):
        car = Car(0, top_floor=5)
        car.assign(Trip("A", 2, 4))
        assert car.run_to_quiescence() == 3

    def test_empty_car_does_nothing(self):
        car = Car(0, top_floor=5)
        assert car.run_to_quiescence() == 0
        assert car.position == 0
