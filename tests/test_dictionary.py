import pytest

from data_designer_stop_words.dictionary import Rule, default_rules, load_dict, parse_dict
from data_designer_stop_words.rules import build_rule_set, filter_rules, normalize_rules


class TestParseDict:
    def test_empty_string(self):
        assert parse_dict("") == []

    def test_one_rule_per_line(self):
        assert parse_dict("a\nb") == [Rule("a"), Rule("b")]

    def test_trims_whitespace(self):
        assert parse_dict("   a\t\nb") == [Rule("a"), Rule("b")]

    def test_ignores_blank_lines(self):
        assert parse_dict("a\n \n\nb\r\n") == [Rule("a"), Rule("b")]

    def test_splits_term_and_replacement(self):
        assert parse_dict("a>b") == [Rule("a", "b")]

    def test_ignores_whitespace_around_separator(self):
        assert parse_dict("a > b") == parse_dict("a>b")

    def test_splits_on_first_separator_only(self):
        assert parse_dict("a > b > c") == [Rule("a", "b > c")]

    def test_dangling_separator_has_no_replacement(self):
        assert parse_dict("a >") == [Rule("a")]


class TestRule:
    def test_as_tuple(self):
        assert Rule("a").as_tuple() == ("a",)
        assert Rule("a", "b").as_tuple() == ("a", "b")

    def test_from_value(self):
        assert Rule.from_value("a") == Rule("a")
        assert Rule.from_value(["a"]) == Rule("a")
        assert Rule.from_value(("a", "b")) == Rule("a", "b")

    @pytest.mark.parametrize("value", [[], ["a", "b", "c"], [1], 3, "", ["foo", ""], ["", "bar"]])
    def test_from_value_rejects_malformed(self, value):
        with pytest.raises(ValueError):
            Rule.from_value(value)


class TestLoadDict:
    def test_reads_utf8_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("can’t > cannot\nsynergy\n", encoding="utf-8")
        assert load_dict(path) == [Rule("can’t", "cannot"), Rule("synergy")]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dict(tmp_path / "missing.txt")

    def test_default_rules_are_cached(self):
        rules = default_rules()
        assert rules is default_rules()
        assert Rule("utilize", "use") in rules
        assert Rule("hyperlocal") in rules


class TestFilterRules:
    def test_filters_pairs(self):
        assert filter_rules([Rule("foo"), Rule("bar")], [["foo"]]) == [Rule("bar")]

    def test_accepts_bare_terms(self):
        assert filter_rules([Rule("foo"), Rule("bar")], ["foo"]) == [Rule("bar")]

    def test_bare_term_keeps_rule_with_replacement(self):
        rules = [Rule("foo", "baz"), Rule("bar")]
        assert filter_rules(rules, ["foo"]) == rules

    def test_full_pair_removes_rule_with_replacement(self):
        assert filter_rules([Rule("foo", "baz"), Rule("bar")], [["foo", "baz"]]) == [Rule("bar")]


class TestBuildRuleSet:
    def test_defaults_come_first(self):
        rule_set = build_rule_set(words=[["synergy", "cooperation"]])
        assert rule_set[: len(default_rules())] == default_rules()
        assert rule_set[-1] == Rule("synergy", "cooperation")

    def test_without_defaults(self):
        assert build_rule_set(default_words=False, words=["a", ["b", "c"]]) == (Rule("a"), Rule("b", "c"))

    def test_loads_words_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("synergy\n", encoding="utf-8")
        assert build_rule_set(default_words=False, words=str(path)) == (Rule("synergy"),)
        assert normalize_rules(path) == [Rule("synergy")]

    def test_missing_words_file_fails_at_build_time(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            build_rule_set(words=str(tmp_path / "missing.txt"))

    def test_applies_exclusions(self):
        rule_set = build_rule_set(exclude=["hyperlocal", ["utilize", "use"]])
        assert Rule("hyperlocal") not in rule_set
        assert Rule("utilize", "use") not in rule_set

    def test_is_immutable(self):
        assert isinstance(build_rule_set(), tuple)
