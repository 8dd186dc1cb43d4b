from hypothesis import given, strategies as st

from opstring import GraphemeView

# mix ASCII, combining marks, emoji modifiers and ZWJ so clusters span several code points
_fragments = st.sampled_from(
    [
        "a",
        "Z",
        " ",
        "\r\n",
        "\u20ac",
        "e\u0301",
        "\U0001F44D\U0001F3FD",
        "\U0001F468\u200d\U0001F469",
        "\U0001F1EB\U0001F1F7",
    ]
)
_texts = st.one_of(st.text(max_size=40), st.lists(_fragments, max_size=12).map("".join))


@given(_texts)
def test_source_and_display_are_unchanged(text: str) -> None:
    view = GraphemeView(text)
    assert view.source() is text
    assert str(view) == text


@given(_texts)
def test_clusters_partition_the_text(text: str) -> None:
    view = GraphemeView(text)
    assert "".join(cluster for _offset, cluster in view.pairs()) == text
    assert "".join(view.clusters()) == text


@given(_texts)
def test_offsets_strictly_increase(text: str) -> None:
    view = GraphemeView(text)
    offsets = [view.translate_to_byte(index) for index in range(view.length())]
    assert offsets == sorted(set(offsets))
    if offsets:
        assert offsets[0] == 0


@given(_texts)
def test_round_trip_and_sentinels(text: str) -> None:
    view = GraphemeView(text)
    byte_length = len(text.encode("utf-8"))
    for index in range(view.length()):
        assert view.translate_to_cluster(view.translate_to_byte(index)) == index
    assert view.translate_to_byte(view.length()) == byte_length
    assert view.translate_to_cluster(byte_length) == view.length()


@given(_texts)
def test_every_byte_maps_to_its_cluster(text: str) -> None:
    view = GraphemeView(text)
    for index, (offset, cluster) in enumerate(view.pairs()):
        for position in range(offset, offset + len(cluster.encode("utf-8"))):
            assert view.translate_to_cluster(position) == index


@given(_texts, st.integers(min_value=-4, max_value=200))
def test_bisect_and_linear_agree(text: str, byte_offset: int) -> None:
    assert GraphemeView(text).translate_to_cluster(byte_offset) == GraphemeView(
        text, search="linear"
    ).translate_to_cluster(byte_offset)


@given(_texts)
def test_bytes_and_text_sources_agree(text: str) -> None:
    from_text = GraphemeView(text)
    from_bytes = GraphemeView(text.encode("utf-8"))
    assert list(from_text.pairs()) == list(from_bytes.pairs())
