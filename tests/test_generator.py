import pandas as pd

from data_designer_stop_words.config import StopWordsColumnConfig
from data_designer_stop_words.generator import check_frame


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "title": ["Utilize Elm", "Clean title", "Plain"],
            "body": ["and hyperlocal JavaScript", "The bridge collapsed.", None],
        }
    )


class TestCheckFrame:
    def test_row_shape(self):
        config = StopWordsColumnConfig(name="stop_words", target_columns=["title", "body"])
        result = check_frame(_frame(), config)
        first = result["stop_words"].iloc[0]
        assert set(first) == {"is_valid", "issue_count", "stop_word_messages", "fixed_text"}
        assert first["issue_count"] == 2
        assert first["is_valid"] is False
        assert first["stop_word_messages"] == [
            'Avoid using "utilize", use "use" instead',
            'Avoid using "hyperlocal"',
        ]
        assert first["fixed_text"] == "Use Elm and hyperlocal JavaScript"

    def test_clean_rows_are_valid(self):
        config = StopWordsColumnConfig(name="stop_words", target_columns=["title", "body"])
        result = check_frame(_frame(), config)
        assert result["stop_words"].iloc[1] == {
            "is_valid": True,
            "issue_count": 0,
            "stop_word_messages": [],
            "fixed_text": "Clean title The bridge collapsed.",
        }
        assert result["stop_words"].iloc[2]["fixed_text"] == "Plain"

    def test_max_issues_threshold(self):
        config = StopWordsColumnConfig(name="stop_words", target_columns=["title", "body"], max_issues=2)
        result = check_frame(_frame(), config)
        assert result["stop_words"].iloc[0]["is_valid"] is True

    def test_optional_fields(self):
        config = StopWordsColumnConfig(
            name="stop_words",
            target_columns=["title"],
            include_fixed_text=False,
            include_violations=True,
        )
        first = check_frame(_frame(), config)["stop_words"].iloc[0]
        assert "fixed_text" not in first
        assert first["stop_word_violations"][0]["term"] == "utilize"
        assert first["stop_word_violations"][0]["fix"] == {"range": [0, 7], "text": "Use"}

    def test_input_frame_is_not_modified(self):
        data = _frame()
        config = StopWordsColumnConfig(name="stop_words", target_columns=["title"])
        check_frame(data, config)
        assert "stop_words" not in data.columns
