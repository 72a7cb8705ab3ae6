from mobius.model.note_id import NoteIdGenerator


def test_generate_counts_up_from_seed():
    ids = NoteIdGenerator()
    assert [ids.generate() for _ in range(3)] == ["1", "2", "3"]


def test_reseed_moves_past_highest_numeric_id():
    ids = NoteIdGenerator()
    ids.reseed(["4", "12", "x-1", ""])
    assert ids.generate() == "13"


def test_reseed_with_no_numeric_ids_keeps_seed():
    ids = NoteIdGenerator()
    ids.reseed(["abc"])
    assert ids.next_value == 1


def test_reseed_never_goes_backwards():
    ids = NoteIdGenerator(seed=50)
    ids.reseed(["3"])
    assert ids.generate() == "50"


def test_reseed_skips_ids_that_only_look_numeric():
    ids = NoteIdGenerator()
    ids.reseed(["²", "--5", "7"])
    assert ids.generate() == "8"
