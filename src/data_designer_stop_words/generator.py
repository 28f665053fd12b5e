from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_stop_words.config import StopWordsColumnConfig
from data_designer_stop_words.linter import analyze_text

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def check_frame(data: pd.DataFrame, config: StopWordsColumnConfig) -> pd.DataFrame:
    """Copy of ``data`` with one stop-word result dict per row in ``config.name``."""
    # Rule set is built once, before any row is scanned.
    options = config.scan_options()
    logger.info(f"   rules: {len(options.rule_set)}")

    results = []
    for _, row in data[config.target_columns].iterrows():
        text = " ".join(str(v) for v in row.values if v is not None)
        analysis = analyze_text(text, options)
        output: dict = {
            "is_valid": analysis["issue_count"] <= config.max_issues,
            "issue_count": analysis["issue_count"],
            "stop_word_messages": analysis["messages"],
        }
        if config.include_fixed_text:
            output["fixed_text"] = analysis["fixed_text"]
        if config.include_violations:
            output["stop_word_violations"] = analysis["violations"]
        results.append(output)

    data = data.copy()
    data[config.name] = results
    return data


class StopWordsColumnGenerator(ColumnGeneratorFullColumn[StopWordsColumnConfig]):
    """Column generator that flags discouraged words and proposes fixes."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f6d1 Checking column {self.config.name!r} for stop words")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_issues: {self.config.max_issues}")
        return check_frame(data, self.config)
