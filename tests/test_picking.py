import pytest

from obsidian_kit.picking import MAX_DEPTH, HitData, PointerHits, update_hits


def test_hit_reported_below_camera_order():
    hits = update_hits([("cam", "mouse")], {"cam": 3}, "backdrop")
    assert len(hits) == 1
    h = hits[0]
    assert h.pointer == "mouse"
    assert h.order == 2.0
    assert h.picks == [("backdrop", HitData("cam", MAX_DEPTH))]


def test_rays_from_other_cameras_are_skipped():
    rays = [("cam", "p1"), ("other", "p2"), ("cam", "p3")]
    hits = update_hits(rays, {"cam": 0}, 7)
    assert [h.pointer for h in hits] == ["p1", "p3"]
    assert all(h.picks[0][0] == 7 for h in hits)


def test_hit_data_defaults_have_no_geometry():
    hit = update_hits([(1, 2)], {1: 5}, 9)[0].picks[0][1]
    assert hit.position is None and hit.normal is None
    assert hit.depth == MAX_DEPTH
    assert hit.camera == 1


def test_no_rays_gives_no_hits():
    assert update_hits([], {"cam": 0}, "backdrop") == []


def test_missing_backdrop_raises():
    with pytest.raises(LookupError):
        update_hits([("cam", "mouse")], {"cam": 0}, None)


def test_pointer_hits_order_field():
    hits = update_hits([("a", "m"), ("b", "m")], {"a": 0, "b": 10}, "bd")
    assert [h.order for h in hits] == [-1.0, 9.0]
    assert all(isinstance(h, PointerHits) for h in hits)