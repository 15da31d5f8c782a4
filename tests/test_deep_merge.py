import yaml

from htmltext.config.schema import ConfigModel, deep_merge_dicts


def test_user_override_keeps_sibling_keys() -> None:
    defaults = {"entities": {"decode_named": True, "max_numeric": 511}, "excerpt": {"length": 40}}
    override = yaml.safe_load("entities:\n  max_numeric: 1000\nexcerpt:\n  length: null\n")
    merged = deep_merge_dicts(defaults, override)
    assert merged == {
        "entities": {"decode_named": True, "max_numeric": 1000},
        "excerpt": {"length": None},
    }
    assert defaults["entities"]["max_numeric"] == 511


def test_mapping_replaced_by_scalar() -> None:
    assert deep_merge_dicts({"output": {"newline": ""}}, {"output": "x"}) == {"output": "x"}


def test_merged_defaults_validate() -> None:
    base = {
        "schema_version": 1,
        "entities": {"decode_named": True, "decode_numeric": True, "max_numeric": 511},
        "convert": {"preserve_entity_codes": False},
        "excerpt": {"length": None, "ellipsis": "..."},
        "output": {"encoding": "utf-8", "newline": ""},
    }
    merged = deep_merge_dicts(base, {"convert": {"preserve_entity_codes": True}})
    cfg = ConfigModel.model_validate(merged)
    assert cfg.convert.preserve_entity_codes is True
    assert cfg.entities.max_numeric == 511
