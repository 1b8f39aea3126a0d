from battleship.tile import Tile, TileStatus


def test_new_tile_is_unknown_and_empty():
    tile = Tile()
    assert tile.status is TileStatus.UNKNOWN
    assert tile.has_ship is False


def test_place_ship_resets_status():
    tile = Tile(status=TileStatus.SOMETHING)
    tile.place_ship()
    assert tile.has_ship is True
    assert tile.status is TileStatus.UNKNOWN


def test_mark_miss_only_from_unknown():
    tile = Tile()
    tile.mark_miss()
    assert tile.status is TileStatus.MISS
    hit = Tile(status=TileStatus.HIT)
    hit.mark_miss()
    assert hit.status is TileStatus.HIT


def test_mark_hit_requires_ship():
    empty = Tile()
    empty.mark_hit()
    assert empty.status is TileStatus.UNKNOWN
    occupied = Tile()
    occupied.place_ship()
    occupied.mark_hit()
    assert occupied.status is TileStatus.HIT


def test_mark_hit_ignored_when_already_resolved():
    tile = Tile(status=TileStatus.MISS, has_ship=True)
    tile.mark_hit()
    assert tile.status is TileStatus.MISS