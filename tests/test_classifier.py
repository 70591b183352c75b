from liftsched import ASCENDING, DESCENDING, DirectionGroup, Request, classify

from conftest import batch


class TestClassify:
    def test_empty_batch_yields_two_empty_groups(self):
        groups = classify(batch())
        assert not groups.ascending
        assert not groups.descending
        assert groups.ascending.direction == ASCENDING
        assert groups.descending.direction == DESCENDING

    def test_partitions_by_derived_direction(self):
        requests = batch((6, 3), (2, 5), (9, 1), (1, 2))
        groups = classify(requests)
        assert groups.ascending.requests == (Request(2, 5), Request(1, 2))
        assert groups.descending.requests == (Request(6, 3), Request(9, 1))

    def test_batch_is_left_untouched(self):
        requests = batch((5, 1), (1, 5))
        snapshot = tuple(requests)
        classify(requests)
        assert tuple(requests) == snapshot


class TestDirectionGroup:
    def test_demand_is_aggregated_per_floor(self):
        group = DirectionGroup(ASCENDING, (Request(1, 4), Request(2, 4)))
        assert group.boarding_demand == {1: 1, 2: 1}
        assert group.alighting_demand == {4: 2}
        assert group.demand_floors == [1, 2, 4]

    def test_shared_source_floor(self):
        group = DirectionGroup(ASCENDING, (Request(3, 7), Request(3, 8), Request(3, 9)))
        assert group.boarding_demand == {3: 3}
        assert group.alighting_demand == {7: 1, 8: 1, 9: 1}

    def test_descending_demand(self):
        group = DirectionGroup(DESCENDING, (Request(5, 2),))
        assert group.boarding_demand == {5: 1}
        assert group.alighting_demand == {2: 1}

    def test_request_direction(self):
        assert Request(1, 9).direction == ASCENDING
        assert Request(9, 1).direction == DESCENDING
