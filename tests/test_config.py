import pytest
from codebreaker.engine import Configuration, InvalidConfiguration, PRESETS, check_budget, preset, score_table


def test_default_configuration():
    cfg = Configuration()
    assert cfg.alphabet == "RGBYOP"
    assert cfg.length == 4 and cfg.allow_repetition is False and cfg.max_rounds == 10
    assert cfg.candidate_count == 360
    assert cfg.palette["P"] == "Purple"


@pytest.mark.parametrize("kwargs", [
    {"colors": 0},
    {"colors": 7},
    {"length": 0},
    {"max_rounds": 0},
    {"symbols": "RRGBYO"},
])
def test_invalid_fields_rejected(kwargs):
    with pytest.raises(InvalidConfiguration):
        Configuration(**kwargs)


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        Configuration(colors=99)


def test_zero_code_configuration_constructs_but_counts_zero():
    # Rejected at enumeration time, not construction time.
    cfg = Configuration(colors=3, length=4)
    assert cfg.candidate_count == 0


@pytest.mark.parametrize("name,colors,rounds,rep", [
    ("default", 6, 10, False),
    ("easy", 3, 20, True),
    ("intermediate", 4, 15, True),
    ("hard", 5, 10, False),
    ("expert", 6, 5, False),
])
def test_presets(name, colors, rounds, rep):
    cfg = preset(name)
    assert (cfg.colors, cfg.max_rounds, cfg.allow_repetition) == (colors, rounds, rep)
    assert PRESETS[name] is cfg


def test_preset_overrides_and_unknown():
    cfg = preset("hard", max_rounds=12)
    assert cfg.max_rounds == 12 and cfg.colors == 5
    with pytest.raises(InvalidConfiguration):
        preset("nightmare")


def test_check_budget():
    cfg = Configuration(allow_repetition=True)
    assert check_budget(cfg, 1296) == 1296
    with pytest.raises(InvalidConfiguration):
        check_budget(cfg, 1000)


def test_configuration_is_hashable_and_serializable():
    a, b = Configuration(colors=5), Configuration(colors=5)
    assert a == b and hash(a) == hash(b)
    d = a.to_dict()
    assert d["colors"] == 5 and d["names"][0] == "Red"


def test_custom_palette():
    cfg = Configuration(colors=4, symbols="1234", names=())
    assert cfg.alphabet == "1234"
    assert cfg.palette == {"1": "1", "2": "2", "3": "3", "4": "4"}


def test_names_given_as_list_stay_hashable():
    names = ["Red", "Green", "Blue", "Yellow"]
    cfg = Configuration(colors=4, names=names)
    assert cfg.names == ("Red", "Green", "Blue", "Yellow")
    assert hash(cfg) == hash(Configuration(colors=4, names=tuple(names)))
    assert len(score_table(cfg).codes) == 24
