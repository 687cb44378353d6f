from bizlens.services import extraction


def test_extract_payload_between_markers_ignores_surrounding_prose():
    text = 'Intro text. [DATA_START]  [{"name": "A"}]\n[DATA_END] trailing words'
    assert extraction.extract_payload(text) == '[{"name": "A"}]'


def test_extract_payload_uses_first_end_marker_after_start():
    text = "[DATA_START][1][DATA_END] more [DATA_END]"
    assert extraction.extract_payload(text) == "[1]"


def test_extract_payload_falls_back_to_fenced_block():
    text = 'Here you go:\n```json\n[{"name": "X"}]\n```\nBye'
    assert extraction.extract_payload(text) == '[{"name": "X"}]'


def test_extract_payload_accepts_untagged_fence():
    assert extraction.extract_payload("```\n[2]\n```") == "[2]"


def test_markers_win_over_fenced_block():
    text = "```json\n[1]\n``` [DATA_START][2][DATA_END]"
    assert extraction.extract_payload(text) == "[2]"


def test_start_marker_alone_falls_through_to_fence():
    text = "[DATA_START] ```json\n[3]\n```"
    assert extraction.extract_payload(text) == "[3]"


def test_extract_payload_returns_empty_without_markers_or_fence():
    assert extraction.extract_payload("No results found.") == ""
    assert extraction.extract_payload("") == ""
    assert extraction.extract_payload(None) == ""


def test_strategies_are_independently_callable():
    markers, fence = extraction.EXTRACTION_STRATEGIES
    assert markers("nothing here") is None
    assert fence("nothing here") is None
    assert markers("[DATA_START]x[DATA_END]") == "x"


def test_parse_business_array_trims_to_outer_brackets():
    payload = 'Sure! Here is the data: [{"name": "A"}, {"name": "B"}] hope it helps'
    assert extraction.parse_business_array(payload) == [{"name": "A"}, {"name": "B"}]


def test_parse_business_array_swallows_malformed_json(caplog):
    assert extraction.parse_business_array('[{"name": "A",]') == []
    assert "Failed to parse" in caplog.text


def test_parse_business_array_without_brackets():
    assert extraction.parse_business_array('{"name": "A"}') == []
    assert extraction.parse_business_array("] backwards [") == []
    assert extraction.parse_business_array("") == []


def test_extract_businesses_end_to_end():
    text = 'Market. [DATA_START]Result: [{"name": "Acme"}][DATA_END]'
    assert extraction.extract_businesses(text) == [{"name": "Acme"}]
    assert extraction.extract_businesses("plain prose") == []


def test_strip_payload_removes_marker_span_and_keeps_tail():
    text = "Head part. [DATA_START][1][DATA_END] Tail part."
    assert extraction.strip_payload(text) == "Head part.\n\nTail part."


def test_strip_payload_without_end_marker_truncates_at_start():
    assert extraction.strip_payload("Head [DATA_START] [1, 2") == "Head"


def test_strip_payload_removes_first_fenced_block():
    text = "Summary\n```json\n[1]\n```"
    assert extraction.strip_payload(text) == "Summary"


def test_parse_business_array_swallows_deep_nesting(caplog):
    assert extraction.parse_business_array("[" * 100000 + "]" * 100000) == []
    assert "Failed to parse" in caplog.text
