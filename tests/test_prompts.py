"""Tests for kickoff.ui.prompts module."""

from unittest.mock import patch

import pytest
import questionary

from kickoff.ui.prompts import custom_style, prompt_input, prompt_select
from kickoff.utils.errors import SelectionAbortedError


class TestCustomStyle:
    """Tests for custom_style."""

    def test_style_has_qmark(self):
        """Style defines qmark."""
        assert any("qmark" in str(s) for s in custom_style.style_rules)

    def test_style_has_pointer(self):
        """Style defines pointer."""
        assert any("pointer" in str(s) for s in custom_style.style_rules)


class TestPromptInput:
    """Tests for prompt_input function."""

    @patch("questionary.text")
    def test_returns_input(self, mock_text):
        """Returns user input."""
        mock_text.return_value.ask.return_value = "my-app"

        assert prompt_input("Directory?") == "my-app"

    @patch("questionary.text")
    def test_empty_answer_returned_unchanged(self, mock_text):
        """An empty answer is not replaced or rejected."""
        mock_text.return_value.ask.return_value = ""

        assert prompt_input("Directory?") == ""

    @patch("questionary.text")
    def test_passes_default_and_style(self, mock_text):
        mock_text.return_value.ask.return_value = "x"

        prompt_input("Directory?", default=".")

        _, kwargs = mock_text.call_args
        assert kwargs["default"] == "."
        assert kwargs["style"] is custom_style

    @patch("questionary.text")
    def test_raises_on_cancel(self, mock_text):
        """Raises SelectionAbortedError when cancelled."""
        mock_text.return_value.ask.return_value = None

        with pytest.raises(SelectionAbortedError, match="input prompt"):
            prompt_input("Directory?")

    @patch("questionary.text")
    def test_keyboard_interrupt_converted(self, mock_text):
        """Ctrl+C becomes SelectionAbortedError."""
        mock_text.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(SelectionAbortedError):
            prompt_input("Directory?")


class TestPromptSelect:
    """Tests for prompt_select function."""

    @patch("questionary.select")
    def test_returns_selection(self, mock_select):
        """Returns selected option."""
        mock_select.return_value.ask.return_value = "react-antd"

        result = prompt_select("Pick", ["vue-naive", "react-antd"])

        assert result == "react-antd"

    @patch("questionary.select")
    def test_accepts_choice_objects(self, mock_select):
        mock_select.return_value.ask.return_value = "vue-naive"
        choices = [questionary.Choice("Vue 3", value="vue-naive")]

        prompt_select("Pick", choices)

        _, kwargs = mock_select.call_args
        assert kwargs["choices"] == choices

    @patch("questionary.select")
    def test_raises_on_cancel(self, mock_select):
        """Raises SelectionAbortedError when cancelled."""
        mock_select.return_value.ask.return_value = None

        with pytest.raises(SelectionAbortedError, match="selection prompt"):
            prompt_select("Pick", ["a"])

    @patch("questionary.select")
    def test_keyboard_interrupt_converted(self, mock_select):
        mock_select.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(SelectionAbortedError, match=r"Ctrl\+C"):
            prompt_select("Pick", ["a"])
