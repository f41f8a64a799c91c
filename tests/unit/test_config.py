import pytest

from corpus_count.config import CountConfig, load_config, resolve_arg
from corpus_count.errors import ConfigurationError, CorpusIOError


def test_defaults_are_valid():
    config = CountConfig().validate()
    assert (config.min_n, config.max_n) == (3, 6)
    assert config.bracket is True
    assert config.filter_first is False
    assert config.count_ngrams is False


@pytest.mark.parametrize(
    "kwargs",
    [
        {"min_n": 0},
        {"min_n": 4, "max_n": 3},
        {"token_min": -1},
        {"ngram_min": -5},
        {"tie_break": "random"},
        {"min_n": "3"},
        {"bracket": "yes"},
        {"corpus": 123},
        {"ngram_counts": True},
        {"corpus": "c.txt", "token_counts": "c.txt"},
        {"corpus": "c.txt", "ngram_counts": "./c.txt"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        CountConfig(**kwargs).validate()


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigurationError):
        CountConfig.from_dict({"min_n": 2, "window": 5})


def test_load_config_nested_mapping(tmp_path):
    path = tmp_path / "count.yaml"
    path.write_text("count:\n  min_n: 2\n  max_n: 4\n  bracket: false\n", encoding="utf-8")
    assert load_config(str(path)) == {"min_n": 2, "max_n": 4, "bracket": False}


def test_load_config_flat_mapping_and_empty(tmp_path):
    flat = tmp_path / "flat.yaml"
    flat.write_text("token_min: 3\n", encoding="utf-8")
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_config(str(flat)) == {"token_min": 3}
    assert load_config(str(empty)) == {}
    assert load_config(None) == {}


def test_load_config_errors(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(bad))
    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("windows: 3\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(unknown))
    with pytest.raises(CorpusIOError) as excinfo:
        load_config(str(tmp_path / "missing.yaml"))
    assert excinfo.value.path.endswith("missing.yaml")


def test_resolve_arg_precedence():
    assert resolve_arg(1, 2, 3) == 1
    assert resolve_arg(None, 2, 3) == 2
    assert resolve_arg(None, None, 3) == 3
    assert resolve_arg(False, True, True) is False


def test_stdio_corpus_and_outputs_may_share_dash():
    CountConfig(corpus="-", token_counts="-", ngram_counts="-").validate()
    CountConfig(corpus="c.txt", token_counts="t.tsv", ngram_counts="-").validate()
