"""Tests for the specification tree walker."""

from termcomplete.interface.walker import walk
from termcomplete.spec import SpecNode

ANCHOR = SpecNode.from_mapping({"anchor": {"idl": {"init": {}, "upgrade": {}}}})


class TestSubcommands:
    """Nested subcommands are offered level by level."""

    def test_root(self) -> None:
        assert walk(ANCHOR, [], 0) == ["anchor"]

    def test_second_level(self) -> None:
        assert walk(ANCHOR, ["anchor"], 1) == ["idl"]

    def test_third_level(self) -> None:
        assert walk(ANCHOR, ["anchor", "idl"], 2) == ["init", "upgrade"]

    def test_partial_token_filters_by_prefix(self) -> None:
        assert walk(ANCHOR, ["anchor", "idl", "up"], 2) == ["upgrade"]

    def test_unknown_subcommand_yields_nothing(self) -> None:
        assert walk(ANCHOR, ["anchor", "nope"], 2) == []

    def test_offset_past_target_yields_nothing(self) -> None:
        assert walk(ANCHOR, ["anchor"], 0, offset=1) == []


class TestPositionalSlots:
    """Argument values for integer-keyed slots."""

    def test_slot_zero(self) -> None:
        node = SpecNode.from_mapping({"0": ["foo", "bar"], "--flag": {"takeValue": False}})
        assert walk(node, [], 0) == ["foo", "bar", "--flag"]

    def test_slot_values_filtered_by_partial_token(self) -> None:
        node = SpecNode.from_mapping({"0": ["foo", "bar", "baz"]})
        assert walk(node, ["ba"], 0) == ["bar", "baz"]

    def test_second_slot(self) -> None:
        node = SpecNode.from_mapping({"0": ["a"], "1": ["b1", "b2"]})
        assert walk(node, ["a"], 1) == ["b1", "b2"]

    def test_lazy_source_is_called_per_visit(self) -> None:
        calls = []

        def producer() -> list[str]:
            calls.append(1)
            return ["x", "y"]

        node = SpecNode.from_mapping({"0": producer})
        assert walk(node, [], 0) == ["x", "y"]
        assert walk(node, ["y"], 0) == ["y"]
        assert len(calls) == 2

    def test_option_token_skips_positional_values(self) -> None:
        node = SpecNode.from_mapping({"0": ["-x-value"], "-f": {}})
        assert walk(node, ["-"], 0) == ["-f"]

    def test_options_offered_after_all_arguments(self) -> None:
        node = SpecNode.from_mapping({"0": ["foo", "bar"], "--flag": {}, "-f": {}})
        assert walk(node, ["foo", "-"], 1) == ["--flag", "-f"]

    def test_options_between_arguments_are_not_completed(self) -> None:
        node = SpecNode.from_mapping({"0": ["a"], "1": ["b"], "--x": {}})
        assert walk(node, ["a", "-"], 1) == []


class TestOptions:
    """Option flags, values and aliases."""

    def test_used_option_is_not_offered_again(self) -> None:
        node = SpecNode.from_mapping({"-v": {}, "-q": {}})
        assert walk(node, ["-v", "-"], 1) == ["-q"]

    def test_value_taking_option_skips_its_value(self) -> None:
        node = SpecNode.from_mapping({"--out": {"takeValue": True}, "-v": {}, "0": ["a", "b"]})
        assert walk(node, ["--out", "file"], 2) == ["a", "b", "-v"]

    def test_value_of_option_is_not_completed(self) -> None:
        node = SpecNode.from_mapping({"--out": {"takeValue": True}, "sub": {}})
        assert walk(node, ["--out"], 1) == []

    def test_alias_is_hidden_after_use(self) -> None:
        node = SpecNode.from_mapping({
            "--all": {"other": "-a"},
            "-a": {"other": "--all"},
            "--long": {"other": "-l"},
            "-l": {"other": "--long"},
        })
        assert walk(node, ["-a", "--"], 1) == ["--long"]
        assert walk(node, ["--all", "-"], 1) == ["--long", "-l"]

    def test_alias_removal_does_not_modify_the_tree(self) -> None:
        node = SpecNode.from_mapping({"--all": {"other": "-a"}, "-a": {"other": "--all"}})
        walk(node, ["--all", "-"], 1)
        assert list(node.named_entries) == ["--all", "-a"]

    def test_options_before_subcommand(self) -> None:
        node = SpecNode.from_mapping({"--verbose": {}, "build": {"--release": {}}})
        assert walk(node, ["--verbose", "bu"], 1) == ["build"]
        assert walk(node, ["--verbose", "build", "--"], 2) == ["--release"]
