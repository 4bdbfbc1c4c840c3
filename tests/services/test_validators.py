import pytest

from strings_panel.core.exceptions import ResponseParseError
from strings_panel.services.orchestration.validators import (
    is_valid_splitter,
    is_valid_state,
    parse_splitter_response,
    placeholder_to_splitter,
    splitter_to_display,
)


class TestStateValidation:
    @pytest.mark.parametrize("value", ["a", " ", "racecar", "hello world", "\0"])
    def test_non_empty_state_is_valid(self, value: str) -> None:
        assert is_valid_state(value) is True

    def test_empty_state_is_invalid(self) -> None:
        assert is_valid_state("") is False


class TestSplitterValidation:
    @pytest.mark.parametrize("value", ["l", ",", " ", "é", "[SPACE]"])
    def test_single_character_is_valid(self, value: str) -> None:
        assert is_valid_splitter(value) is True

    @pytest.mark.parametrize("value", ["", "ab", "[SPACE][SPACE]", "a[SPACE]", "[space]"])
    def test_wrong_length_is_invalid(self, value: str) -> None:
        assert is_valid_splitter(value) is False

    def test_null_byte_is_invalid(self) -> None:
        assert is_valid_splitter("\0") is False

    def test_placeholder_maps_to_space(self) -> None:
        assert placeholder_to_splitter("[SPACE]") == " "
        assert placeholder_to_splitter("x") == "x"


class TestSplitterDisplay:
    def test_space_shows_placeholder(self) -> None:
        assert splitter_to_display(" ") == "[SPACE]"

    def test_other_characters_show_as_is(self) -> None:
        assert splitter_to_display("l") == "l"

    def test_quoted_space_response(self) -> None:
        assert splitter_to_display(parse_splitter_response('" "')) == "[SPACE]"

    def test_json_escaped_quote(self) -> None:
        assert parse_splitter_response('"\\""') == '"'

    def test_unquoted_fallback(self) -> None:
        assert parse_splitter_response("l") == "l"

    def test_empty_response_raises(self) -> None:
        with pytest.raises(ResponseParseError):
            parse_splitter_response('""')
