from __future__ import annotations

from typing import Literal, Union

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_stop_words.linter import DEFAULT_SKIP, ScanOptions


class StopWordsColumnConfig(SingleColumnConfig):
    """Flag discouraged words in text columns and suggest replacements.

    Each row's target columns are joined and checked as Markdown against the
    built-in dictionary plus any extra words. Matches are whole words only, and
    fixes keep the capitalization of the word they replace.

    Attributes:
        target_columns: Columns whose text content will be concatenated and checked.
        words: Extra rules, either a path to a dictionary file or a list of
            ``term`` / ``[term, replacement]`` entries.
        exclude: Rules to drop. A bare term only drops a rule that has no replacement.
        default_words: Include the built-in dictionary.
        skip_nodes: Node kinds whose text is not checked (``BlockQuote`` by default).
        max_issues: Rows with at most this many issues are ``is_valid=True``.
        include_fixed_text: Include the text with every available fix applied.
        include_violations: Include raw match details (term, match, offset, fix).
    """

    target_columns: list[str]
    words: Union[str, list[Union[str, list[str]]]] = Field(default_factory=list, description="Dictionary file path or extra rules")
    exclude: list[Union[str, list[str]]] = Field(default_factory=list, description="Rules to remove from the final rule set")
    default_words: bool = Field(default=True, description="Include the built-in dictionary")
    skip_nodes: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP), description="Node kinds that are not checked")
    max_issues: int = Field(default=0, ge=0, description="Maximum number of issues for is_valid=True")
    include_fixed_text: bool = Field(default=True, description="Include auto-fixed text in output")
    include_violations: bool = Field(default=False, description="Include raw violation details in output")
    column_type: Literal["stop-words"] = "stop-words"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f6d1"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []

    def scan_options(self) -> ScanOptions:
        return ScanOptions.from_options(
            words=self.words,
            exclude=self.exclude,
            default_words=self.default_words,
            skip=self.skip_nodes,
        )
