from hatman.flags import Flags, is_negative, remove_negation


def test_negation_helpers():
    assert is_negative("!boss_dead")
    assert not is_negative("boss_dead")
    assert remove_negation("!boss_dead") == "boss_dead"


def test_add_and_check():
    flags = Flags()
    assert not flags.check("door_open")
    flags.add("door_open")
    assert flags.check("door_open")


def test_negated_check():
    flags = Flags()
    assert flags.check("!door_open")
    flags.add("door_open")
    assert not flags.check("!door_open")


def test_remove_missing_flag_is_harmless():
    flags = Flags({"a"})
    flags.remove("b")
    assert flags.flags == {"a"}
    flags.remove("a")
    assert flags.flags == set()


def test_remove_containing_substring():
    flags = Flags({"boss_1_dead", "boss_2_dead", "door_open"})
    flags.remove_containing_substring("boss")
    assert flags.flags == {"door_open"}