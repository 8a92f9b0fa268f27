from catacomb.routes.validation import GENERATE_REQUEST, MAX_ROOMS, validate


def test_empty_payload_is_valid():
    ok, data = validate({}, GENERATE_REQUEST)
    assert ok and data == {}


def test_normalizes_seed_strings():
    ok, data = validate({"room_num": 4, "seed": "  dragon  "}, GENERATE_REQUEST)
    assert ok
    assert data == {"room_num": 4, "seed": "dragon"}


def test_rejects_wrong_types():
    ok, err = validate({"room_num": "4"}, GENERATE_REQUEST)
    assert not ok and err == {"field": "room_num", "error": "expected int", "code": "type"}
    ok, err = validate({"radius": True}, GENERATE_REQUEST)
    assert not ok and err["code"] == "type"
    ok, err = validate({"seed": [1]}, GENERATE_REQUEST)
    assert not ok and err["field"] == "seed"


def test_bounds():
    ok, err = validate({"room_num": 0}, GENERATE_REQUEST)
    assert not ok and err["code"] == "min"
    ok, err = validate({"room_num": MAX_ROOMS + 1}, GENERATE_REQUEST)
    assert not ok and err["code"] == "max"
    ok, err = validate({"seed": "x" * 200}, GENERATE_REQUEST)
    assert not ok and err["code"] == "max_len"


def test_non_object_payload():
    ok, err = validate([1, 2], GENERATE_REQUEST)
    assert not ok and err["field"] == "__root__"


def test_required_and_schema_errors():
    ok, err = validate({}, {"room_num": ("int", True)})
    assert not ok and err["code"] == "required"
    ok, err = validate({"x": 1}, {"x": ("float", True)})
    assert not ok and err["code"] == "schema"
