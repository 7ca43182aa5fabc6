"""Parser and serializer."""

import pytest

from pairnum import MalformedInput, parse_tree, parse_trees, pretty_tree, to_text


class TestRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            "0",
            "[1,2]",
            "[[1,2],3]",
            "[9,[8,7]]",
            "[[1,9],[8,5]]",
            "[[[[1,2],[3,4]],[[5,6],[7,8]]],9]",
            "[[[9,[3,8]],[[0,9],6]],[[[3,7],[4,9]],3]]",
            "[[[[1,3],[5,3]],[[1,3],[8,7]]],[[[4,9],[6,9]],[[8,2],[7,3]]]]",
            "[[[[[9,8],1],2],3],4]",
        ],
    )
    def test_serialize_parse_is_identity(self, text):
        assert to_text(parse_tree(text)) == text
        assert str(parse_tree(text)) == text

    def test_surrounding_whitespace_is_stripped(self):
        assert str(parse_tree("  [1,2]\n")) == "[1,2]"

    def test_subtree_serialization(self):
        t = parse_tree("[[1,2],[3,4]]")
        assert to_text(t.ref(2)) == "[3,4]"

    def test_to_text_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_text("[1,2]")


class TestMalformed:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "[1,2",
            "[1,2]]",
            "[12,3]",
            "[a,1]",
            "[1]",
            "[1,2,3]",
            "[1 ,2]",
            "[[1,2],3]5",
            "1,2",
            ",1",
            "[,]",
            "[[1,2][3,4]]",
            "[[1,2],3,4]]",
            "[[1,2,3,4],5]]",
            "[1,2,3]]",
            "[[1,2]],3]",
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(MalformedInput):
            parse_tree(text)

    def test_error_carries_position_and_char(self):
        with pytest.raises(MalformedInput) as exc:
            parse_tree("[a,1]")
        assert exc.value.position == 1
        assert exc.value.char == "a"

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_tree("[x,1]")


class TestParseTrees:
    def test_blank_lines_skipped(self):
        trees = parse_trees(["[1,2]", "", "  ", "[3,4]"])
        assert [str(t) for t in trees] == ["[1,2]", "[3,4]"]


class TestPretty:
    def test_one_node_per_line(self):
        out = pretty_tree(parse_tree("[1,[2,3]]"))
        assert out.splitlines() == [
            "[] @0",
            "  1 @1",
            "  [] @2",
            "    2 @5",
            "    3 @6",
        ]


class TestCursorPosition:
    def test_extra_element_does_not_overwrite_parsed_leaf(self):
        with pytest.raises(MalformedInput) as exc:
            parse_tree("[[1,2],3,4]]")
        assert exc.value.position == 8
        assert exc.value.char == ","

    def test_close_after_first_element(self):
        with pytest.raises(MalformedInput) as exc:
            parse_tree("[1]")
        assert exc.value.position == 2
