from aegisbot.cache_sizing import DEFAULT_CHANNEL_SIZE, resize_channels, store_rows


def test_busy_channel_grows():
    result = resize_channels({1: 90}, {1: 100})
    assert result[1] > 100


def test_quiet_channel_shrinks():
    result = resize_channels({1: 5}, {1: 100})
    assert result[1] < 100


def test_moderate_channel_unchanged():
    result = resize_channels({1: 30}, {1: 100})
    assert result[1] == 100


def test_grow_and_shrink_exact_values():
    assert resize_channels({1: 50}, {1: 100})[1] == 120
    assert resize_channels({1: 0}, {1: 100})[1] == 80


def test_unknown_channel_starts_at_default():
    result = resize_channels({7: 30}, {})
    assert result[7] == DEFAULT_CHANNEL_SIZE


def test_channels_without_inserts_are_kept():
    sizes = {1: 250, 2: 40}
    result = resize_channels({}, sizes)
    assert result == sizes


def test_input_mapping_not_modified():
    sizes = {1: 100}
    resize_channels({1: 99, 2: 0}, sizes)
    assert sizes == {1: 100}


def test_store_rows_carry_sizes_with_zero_action():
    sizes = {5: 120, 3: 80}
    rows = store_rows(sizes)
    assert {(c, n) for c, n, _ in rows} == set(sizes.items())
    assert all(action == 0 for _, _, action in rows)
    assert [c for c, _, _ in rows] == sorted(sizes)